"""Route a clause to the evaluator matching a field's element kind and shape."""

import logging
from collections.abc import Callable, Iterable
from typing import Any

from ..errors import (
    ConstraintViolationError,
    InvalidValidatorSyntaxError,
    ValidationError,
)
from ..models import ElementKind, FieldDescriptor, Predicate, RuleClause
from .evaluators import eval_int, eval_text

logger = logging.getLogger(__name__)

Evaluator = Callable[[Any, Predicate, str], None]


def _is_text(value: Any) -> bool:
    return isinstance(value, str)


def _is_integer(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _is_sequence(value: Any) -> bool:
    return isinstance(value, Iterable) and not isinstance(value, (str, bytes))


EVALUATORS: dict[ElementKind, tuple[Callable[[Any], bool], Evaluator]] = {
    ElementKind.TEXT: (_is_text, eval_text),
    ElementKind.INTEGER: (_is_integer, eval_int),
}


def dispatch(field: FieldDescriptor, clause: RuleClause) -> list[ValidationError]:
    """Evaluate one clause against a field's value or values.

    Scalars are evaluated once. Sequences are evaluated once per element and
    every failing element produces its own error. Fields of unsupported kind
    are ignored.
    """
    entry = EVALUATORS.get(field.element_kind)
    if entry is None:
        logger.debug(f"Field {field.name}: unsupported element kind, skipping {clause}")
        return []
    accepts, evaluator = entry

    if field.is_sequence and not _is_sequence(field.value):
        logger.warning(
            f"Field {field.name}: value of type {type(field.value).__name__} "
            "is not a sequence, skipping"
        )
        return []

    values = list(field.value) if field.is_sequence else [field.value]
    predicate = clause.predicate
    errors: list[ValidationError] = []

    for value in values:
        if not accepts(value):
            logger.warning(
                f"Field {field.name}: value of type {type(value).__name__} "
                f"is not {field.element_kind.value}, skipping"
            )
            continue
        try:
            evaluator(value, predicate, clause.argument)
        except ConstraintViolationError as e:
            errors.append(ValidationError(ConstraintViolationError(
                f"error with field {field.name}: {e}", field.name
            )))
        except InvalidValidatorSyntaxError as e:
            # A bad argument fails the clause once, not once per element
            errors.append(ValidationError(InvalidValidatorSyntaxError(
                f"error with field {field.name}: {e}", field.name
            )))
            break

    return errors
