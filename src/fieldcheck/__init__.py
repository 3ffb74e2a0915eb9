"""fieldcheck - declarative field validation for dataclasses and pydantic models.

Rules are attached to fields as metadata and checked in one pass that reports
every failure, not just the first:

    from dataclasses import dataclass, field
    from fieldcheck import validate

    @dataclass
    class User:
        name: str = field(metadata={"validate": "min:2;max:20"})
        age: int = field(default=0, metadata={"validate": "min:18"})

    validate(User(name="Al", age=30))
"""

__version__ = "0.1.0"
__description__ = "Declarative field validation for dataclasses and pydantic models"

from fieldcheck.config import FieldcheckConfig, load_config
from fieldcheck.engine import Validator, validate
from fieldcheck.errors import (
    ConstraintViolationError,
    ErrorKind,
    FieldcheckError,
    InvalidValidatorSyntaxError,
    MalformedClauseError,
    NotAStructError,
    UnexportedFieldValidationError,
    ValidationError,
    ValidationErrors,
)
from fieldcheck.introspection import describe
from fieldcheck.models import ElementKind, FieldDescriptor, Predicate, RuleClause

__all__ = [
    "__version__",
    "__description__",
    "Validator",
    "validate",
    "describe",
    "FieldcheckConfig",
    "load_config",
    "ElementKind",
    "FieldDescriptor",
    "Predicate",
    "RuleClause",
    "ErrorKind",
    "FieldcheckError",
    "NotAStructError",
    "UnexportedFieldValidationError",
    "InvalidValidatorSyntaxError",
    "MalformedClauseError",
    "ConstraintViolationError",
    "ValidationError",
    "ValidationErrors",
]
