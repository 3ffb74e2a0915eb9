"""Record-level orchestration.

Runs every field of a record through tokenizing, syntax checking and
dispatch, collecting every failure into one ValidationErrors.
"""

import functools
import logging
from collections.abc import Iterable
from pathlib import Path
from typing import Any

from ..config import FieldcheckConfig, load_config
from ..errors import (
    InvalidValidatorSyntaxError,
    MalformedClauseError,
    UnexportedFieldValidationError,
    ValidationErrors,
)
from ..introspection import describe
from ..models import FieldDescriptor
from .dispatch import dispatch
from .syntax import validate_syntax
from .tokenizer import split_clause, tokenize

logger = logging.getLogger(__name__)


class Validator:
    """Validates records against the rules attached to their fields."""

    def __init__(self, config: FieldcheckConfig | None = None):
        self.config = config or FieldcheckConfig()

    @classmethod
    def from_config_file(cls, config_path: str | Path | None = None) -> "Validator":
        """Create a validator from a configuration file.

        With no path, .fieldcheck.json is searched for in the current directory
        and its parents; defaults apply when none is found.
        """
        return cls(load_config(config_path))

    def validate(self, record: Any) -> None:
        """Validate a record.

        Raises:
            NotAStructError: If the record is not a dataclass or pydantic model instance
            ValidationErrors: If any field failed
        """
        errors = self.check(record)
        if errors:
            raise errors

    def check(self, record: Any) -> ValidationErrors:
        """Validate a record and return the (possibly empty) error collection.

        Raises:
            NotAStructError: If the record is not a dataclass or pydantic model instance
        """
        descriptors = describe(record, self.config.tag_key)
        logger.info(f"Validating {type(record).__name__} with {len(descriptors)} fields")
        errors = self.validate_fields(descriptors)
        logger.info(f"Validation of {type(record).__name__} found {len(errors)} errors")
        return errors

    def validate_fields(self, descriptors: Iterable[FieldDescriptor]) -> ValidationErrors:
        """Validate pre-built field descriptors."""
        errors = ValidationErrors()
        for descriptor in descriptors:
            self._validate_field(descriptor, errors)
        return errors

    def _validate_field(self, field: FieldDescriptor, errors: ValidationErrors) -> None:
        if not field.rules:
            return
        if not field.is_public:
            logger.debug(f"Field {field.name} is not public but carries rules")
            errors.append(UnexportedFieldValidationError(field=field.name))
            return
        if not isinstance(field.rules, str):
            logger.warning(
                f"Field {field.name}: rules must be a string, got {type(field.rules).__name__}"
            )
            errors.append(InvalidValidatorSyntaxError(
                f"invalid validator syntax for field {field.name}: rules must be a string",
                field.name,
            ))
            return

        for text in tokenize(field.rules):
            try:
                clause = split_clause(text, field.name)
            except MalformedClauseError as e:
                errors.append(e)
                continue

            try:
                validate_syntax(clause.predicate, clause.argument)
            except InvalidValidatorSyntaxError:
                logger.debug(f"Field {field.name}: invalid syntax in clause {clause}")
                errors.append(InvalidValidatorSyntaxError(field=field.name))
                continue

            logger.debug(f"Field {field.name}: evaluating {clause}")
            errors.extend(dispatch(field, clause))


@functools.lru_cache(maxsize=1)
def default_validator() -> Validator:
    """Validator configured from the discovered .fieldcheck.json, loaded once."""
    return Validator.from_config_file()


def validate(record: Any) -> None:
    """Validate a record with the discovered configuration.

    Raises:
        NotAStructError: If the record is not a dataclass or pydantic model instance
        ValidationErrors: If any field failed
    """
    default_validator().validate(record)
