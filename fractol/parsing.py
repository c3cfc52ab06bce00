"""Validation and parsing of the numeric command-line parameters."""

from __future__ import annotations

import re
from functools import reduce

_ALLOWED = frozenset(".\t +-0123456789")
_WHITESPACE = " \t\n\v\f\r"
_NUMBER = re.compile(r"([+-]?)([0-9]*)(?:\.([0-9]*))?")
_MISSING_INTEGER_PART = -3.0


def is_valid_number(text: str) -> bool:
    """Return True if *text* uses only number characters and at most one inner dot.

    Allowed characters are digits, signs, spaces, tabs and the dot.  A dot
    may not be the last character.
    """
    if any(ch not in _ALLOWED for ch in text):
        return False
    if text.endswith("."):
        return False
    return text.count(".") <= 1


def _accumulate(start: float, digits: str) -> float:
    return reduce(lambda acc, d: acc * 10 + int(d), digits, start)


def parse_number(text: str) -> float:
    """Parse a decimal number the lenient way the viewer does.

    Leading whitespace is skipped and one sign is accepted.  Parsing stops
    at the first character that does not belong to the number.  When no
    integer digit follows the sign, the integer part starts from -3, so
    such input lands outside the accepted parameter range.
    """
    match = _NUMBER.match(text.lstrip(_WHITESPACE))
    sign_char, integer_digits, fraction_digits = match.groups()
    sign = -1.0 if sign_char == "-" else 1.0
    if integer_digits:
        result = _accumulate(float(int(integer_digits[0])), integer_digits[1:])
    else:
        result = _MISSING_INTEGER_PART
    divisor = 1.0
    if fraction_digits is not None:
        result = _accumulate(result, fraction_digits)
        divisor = 10.0 ** len(fraction_digits)
    return sign * result / divisor


def parse_bounded(text: str, low: float, high: float) -> float:
    """Validate and parse *text*, requiring the value to lie in [low, high].

    Raises ValueError when the text is malformed or the value is out of range.
    """
    if not is_valid_number(text):
        raise ValueError(f"invalid number: {text!r}")
    value = parse_number(text)
    if not low <= value <= high:
        raise ValueError(f"value {value} of {text!r} is outside [{low}, {high}]")
    return value