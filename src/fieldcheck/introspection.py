"""Build field descriptors from records.

The engine never inspects records itself; it consumes the FieldDescriptor
list produced here. Supported records are dataclass instances and pydantic
model instances.
"""

import collections.abc
import dataclasses
import logging
import typing
from typing import Any, get_args, get_origin

from pydantic import BaseModel

from .errors import NotAStructError
from .models import ElementKind, FieldDescriptor

logger = logging.getLogger(__name__)

DEFAULT_TAG_KEY = "validate"

SEQUENCE_ORIGINS = (
    list,
    tuple,
    collections.abc.Sequence,
    collections.abc.MutableSequence,
)


def is_record(value: Any) -> bool:
    """Return True for values describe() can handle."""
    if isinstance(value, type):
        return False
    return dataclasses.is_dataclass(value) or isinstance(value, BaseModel)


def _scalar_kind(annotation: Any) -> ElementKind | None:
    # bool is a subclass of int but a distinct annotation, so identity checks exclude it
    if annotation is str:
        return ElementKind.TEXT
    if annotation is int:
        return ElementKind.INTEGER
    return None


def classify(annotation: Any) -> tuple[ElementKind, bool]:
    """Classify a type annotation as (element kind, is sequence).

    ``str`` and ``int`` are scalars; ``list[X]``, ``tuple[X, ...]`` and
    ``Sequence[X]`` of those are sequences. Anything else is unsupported.
    """
    kind = _scalar_kind(annotation)
    if kind is not None:
        return kind, False

    origin = get_origin(annotation)
    if origin not in SEQUENCE_ORIGINS:
        return ElementKind.UNSUPPORTED, False

    args = get_args(annotation)
    if origin is tuple:
        if len(args) != 2 or args[1] is not Ellipsis:
            return ElementKind.UNSUPPORTED, False
        element = args[0]
    elif len(args) == 1:
        element = args[0]
    else:
        return ElementKind.UNSUPPORTED, False

    kind = _scalar_kind(element)
    if kind is None:
        return ElementKind.UNSUPPORTED, False
    return kind, True


def _resolve_field_hint(cls: type, name: str, annotation: Any) -> Any:
    # Resolve one annotation in the namespace of the module defining cls
    holder = type(cls.__name__, (), {
        "__annotations__": {name: annotation},
        "__module__": cls.__module__,
    })
    try:
        return typing.get_type_hints(holder)[name]
    except (NameError, TypeError, SyntaxError) as e:
        logger.warning(f"Could not resolve annotation of {cls.__name__}.{name}: {e}")
        return None


def _resolve_hints(cls: type) -> dict[str, Any]:
    try:
        return typing.get_type_hints(cls)
    except (NameError, TypeError, SyntaxError) as e:
        logger.debug(f"Resolving type hints of {cls.__name__} field by field: {e}")
    return {
        f.name: _resolve_field_hint(cls, f.name, f.type)
        for f in dataclasses.fields(cls)
    }


def _describe_dataclass(record: Any, tag_key: str) -> list[FieldDescriptor]:
    hints = _resolve_hints(type(record))
    descriptors = []
    for f in dataclasses.fields(record):
        kind, is_sequence = classify(hints.get(f.name))
        descriptors.append(FieldDescriptor(
            name=f.name,
            is_public=not f.name.startswith("_"),
            element_kind=kind,
            is_sequence=is_sequence,
            value=getattr(record, f.name),
            rules=f.metadata.get(tag_key, "") or "",
        ))
    return descriptors


def _describe_model(record: BaseModel, tag_key: str) -> list[FieldDescriptor]:
    descriptors = []
    for name, info in type(record).model_fields.items():
        extra = info.json_schema_extra
        rules = extra.get(tag_key, "") if isinstance(extra, dict) else ""
        kind, is_sequence = classify(info.annotation)
        descriptors.append(FieldDescriptor(
            name=name,
            is_public=not name.startswith("_"),
            element_kind=kind,
            is_sequence=is_sequence,
            value=getattr(record, name),
            rules=rules or "",
        ))
    return descriptors


def describe(record: Any, tag_key: str = DEFAULT_TAG_KEY) -> list[FieldDescriptor]:
    """Produce one descriptor per field, in declaration order.

    Args:
        record: Dataclass instance or pydantic model instance
        tag_key: Metadata key holding the rule string

    Raises:
        NotAStructError: If the value is not a supported record
    """
    if not is_record(record):
        raise NotAStructError()
    if isinstance(record, BaseModel):
        return _describe_model(record, tag_key)
    return _describe_dataclass(record, tag_key)
