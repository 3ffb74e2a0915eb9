"""Predicate argument syntax checks, independent of any field value."""

import re

from ..errors import InvalidValidatorSyntaxError
from ..models import Predicate

INT64_MIN = -(2 ** 63)
INT64_MAX = 2 ** 63 - 1

_DECIMAL_RE = re.compile(r"[+-]?[0-9]+")


def parse_int(text: str) -> int:
    """Parse a strict base-10 signed 64-bit integer.

    Unlike int(), surrounding whitespace, underscores and non-ASCII digits
    are rejected.

    Raises:
        ValueError: If the text is not a decimal integer in range
    """
    if not _DECIMAL_RE.fullmatch(text):
        raise ValueError(f"invalid decimal integer: {text!r}")
    number = int(text)
    if not INT64_MIN <= number <= INT64_MAX:
        raise ValueError(f"integer out of range: {text!r}")
    return number


def validate_syntax(predicate: Predicate | str, argument: str) -> None:
    """Check that an argument is well-formed for its predicate.

    Raises:
        InvalidValidatorSyntaxError: If the argument cannot be used
    """
    if isinstance(predicate, str) and not isinstance(predicate, Predicate):
        predicate = Predicate.from_name(predicate)

    if predicate == Predicate.LEN:
        try:
            length = parse_int(argument)
        except ValueError:
            raise InvalidValidatorSyntaxError()
        if length < 0:
            raise InvalidValidatorSyntaxError()
    elif predicate == Predicate.IN:
        if argument == "":
            raise InvalidValidatorSyntaxError()
    elif predicate in (Predicate.MIN, Predicate.MAX):
        try:
            parse_int(argument)
        except ValueError:
            raise InvalidValidatorSyntaxError()
