"""Error taxonomy for fieldcheck.

Every problem found while validating a record is wrapped in a ValidationError
and appended to a ValidationErrors collection. Only NotAStructError aborts a
call; everything else is collected so that the caller sees the full report.
"""

from collections.abc import Iterator, Sequence
from dataclasses import dataclass
from enum import Enum
from typing import Any, overload


class ErrorKind(str, Enum):
    """Kinds of failures reported by the engine."""
    NOT_A_STRUCT = "not_a_struct"
    UNEXPORTED_FIELD = "unexported_field"
    INVALID_SYNTAX = "invalid_syntax"
    MALFORMED_CLAUSE = "malformed_clause"
    CONSTRAINT_VIOLATION = "constraint_violation"


class FieldcheckError(Exception):
    """Base class for all fieldcheck errors."""

    kind: ErrorKind
    default_message = ""

    def __init__(self, message: str | None = None, field: str | None = None):
        self.message = message or self.default_message
        self.field = field
        super().__init__(self.message)


class NotAStructError(FieldcheckError, TypeError):
    """Input is not a record with named fields."""

    kind = ErrorKind.NOT_A_STRUCT
    default_message = "wrong argument given, should be a struct"


class UnexportedFieldValidationError(FieldcheckError):
    """A non-public field carries validation rules."""

    kind = ErrorKind.UNEXPORTED_FIELD
    default_message = "validation for unexported field is not allowed"


class InvalidValidatorSyntaxError(FieldcheckError):
    """Rule argument cannot be parsed for its predicate."""

    kind = ErrorKind.INVALID_SYNTAX
    default_message = "invalid validator syntax"


class MalformedClauseError(FieldcheckError):
    """Clause does not split into predicate and argument."""

    kind = ErrorKind.MALFORMED_CLAUSE

    def __init__(self, field: str | None = None):
        message = f"malformed field {field}" if field else "malformed clause"
        super().__init__(message, field)


class ConstraintViolationError(FieldcheckError):
    """A value does not satisfy a predicate."""

    kind = ErrorKind.CONSTRAINT_VIOLATION


@dataclass(frozen=True)
class ValidationError:
    """A single failure recorded during validation."""
    err: FieldcheckError

    @property
    def kind(self) -> ErrorKind:
        return self.err.kind

    @property
    def field(self) -> str | None:
        return self.err.field

    @property
    def message(self) -> str:
        return str(self.err)

    def __str__(self) -> str:
        return self.message

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON output."""
        return {
            "kind": self.kind.value,
            "field": self.field,
            "message": self.message,
        }


class ValidationErrors(Exception, Sequence):
    """Ordered collection of validation errors for one call.

    Raised by Validator.validate() when at least one error was found.
    Renders as the newline-joined messages of its members.
    """

    def __init__(self, errors: list[ValidationError] | None = None):
        self.errors: list[ValidationError] = list(errors or [])
        super().__init__(self._render())

    @property
    def message(self) -> str:
        return self._render()

    def _render(self) -> str:
        if not self.errors:
            return ""
        if len(self.errors) == 1:
            return self.errors[0].message
        return "\n".join(error.message for error in self.errors)

    def __str__(self) -> str:
        return self._render()

    def __len__(self) -> int:
        return len(self.errors)

    @overload
    def __getitem__(self, index: int) -> ValidationError: ...

    @overload
    def __getitem__(self, index: slice) -> list[ValidationError]: ...

    def __getitem__(self, index):
        return self.errors[index]

    def __iter__(self) -> Iterator[ValidationError]:
        return iter(self.errors)

    def __bool__(self) -> bool:
        return bool(self.errors)

    def append(self, error: FieldcheckError) -> None:
        """Record a failure."""
        self.errors.append(ValidationError(error))
        self.args = (self._render(),)

    def extend(self, errors: list[ValidationError]) -> None:
        """Record failures produced by a lower layer."""
        self.errors.extend(errors)
        self.args = (self._render(),)

    def of_kind(self, kind: ErrorKind) -> list[ValidationError]:
        """Return the errors of one kind, in insertion order."""
        return [error for error in self.errors if error.kind == kind]

    def counts(self) -> dict[str, int]:
        """Count errors by kind."""
        result: dict[str, int] = {}
        for error in self.errors:
            result[error.kind.value] = result.get(error.kind.value, 0) + 1
        return result

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON output."""
        return {
            "total_errors": len(self.errors),
            "errors_by_kind": self.counts(),
            "errors": [error.to_dict() for error in self.errors],
        }
