"""Data models shared by the introspection adapter and the engine."""

from dataclasses import dataclass
from enum import Enum
from typing import Any


class ElementKind(str, Enum):
    """Scalar category a field's values are evaluated as."""
    TEXT = "text"
    INTEGER = "integer"
    UNSUPPORTED = "unsupported"


class Predicate(str, Enum):
    """Recognized rule predicates.

    Names outside the closed set map to UNKNOWN, which always passes.
    """
    LEN = "len"
    IN = "in"
    MIN = "min"
    MAX = "max"
    UNKNOWN = "unknown"

    @classmethod
    def from_name(cls, name: str) -> "Predicate":
        try:
            return cls(name)
        except ValueError:
            return cls.UNKNOWN


@dataclass(frozen=True)
class FieldDescriptor:
    """One field of a record as seen by the engine."""
    name: str
    is_public: bool
    element_kind: ElementKind
    is_sequence: bool
    value: Any
    rules: str = ""


@dataclass(frozen=True)
class RuleClause:
    """A single `predicate:argument` unit of a rule string."""
    name: str
    argument: str

    @property
    def predicate(self) -> Predicate:
        return Predicate.from_name(self.name)

    def __str__(self) -> str:
        return f"{self.name}:{self.argument}"
