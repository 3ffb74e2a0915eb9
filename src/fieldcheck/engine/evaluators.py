"""Type-specific predicate implementations.

Each evaluator checks one scalar against one predicate and raises
ConstraintViolationError with a human-readable reason when it does not hold.
Arguments have already passed validate_syntax().
"""

from ..errors import ConstraintViolationError, InvalidValidatorSyntaxError
from ..models import Predicate
from .syntax import parse_int

LIST_SEPARATOR = ","


def _bound(argument: str) -> int | None:
    try:
        return parse_int(argument)
    except ValueError:
        return None


def parse_int_list(argument: str) -> list[int]:
    """Parse a comma-separated list of integers.

    Raises:
        InvalidValidatorSyntaxError: If any element is not an integer
    """
    try:
        return [parse_int(item) for item in argument.split(LIST_SEPARATOR)]
    except ValueError:
        raise InvalidValidatorSyntaxError()


def eval_text(value: str, predicate: Predicate, argument: str) -> None:
    """Evaluate a predicate against a text value."""
    if predicate == Predicate.LEN:
        length = _bound(argument)
        if length is not None and len(value) != length:
            raise ConstraintViolationError("length does not match")
    elif predicate == Predicate.IN:
        if value not in argument.split(LIST_SEPARATOR):
            raise ConstraintViolationError(f"value {value!r} is not one of {argument}")
    elif predicate == Predicate.MIN:
        limit = _bound(argument)
        if limit is not None and len(value) < limit:
            raise ConstraintViolationError("length less than required")
    elif predicate == Predicate.MAX:
        limit = _bound(argument)
        if limit is not None and len(value) > limit:
            raise ConstraintViolationError("length is longer than allowed")


def eval_int(value: int, predicate: Predicate, argument: str) -> None:
    """Evaluate a predicate against an integer value.

    `len` has no meaning for integers and always passes.
    """
    if predicate == Predicate.IN:
        allowed = parse_int_list(argument)
        if value not in allowed:
            raise ConstraintViolationError(f"value {value} is not one of {argument}")
    elif predicate == Predicate.MIN:
        limit = _bound(argument)
        if limit is not None and value < limit:
            raise ConstraintViolationError("number less than required")
    elif predicate == Predicate.MAX:
        limit = _bound(argument)
        if limit is not None and value > limit:
            raise ConstraintViolationError("number is greater than allowed")
