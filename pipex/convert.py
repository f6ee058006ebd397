"""Conversion between decimal text and integers."""

from __future__ import annotations

import operator

__all__ = ["atoi", "itoa"]

_WHITESPACE = frozenset(" \t\n\v\f\r")
_DIGITS = "0123456789"


def atoi(text: str) -> int:
    """Parse a leading decimal integer from ``text``.

    Leading spaces and the characters ``\\t\\n\\v\\f\\r`` are skipped, one
    optional ``+`` or ``-`` sign is accepted, and digits are read until the
    first non-digit. Text with no digits gives 0.
    """
    position = 0
    length = len(text)
    while position < length and text[position] in _WHITESPACE:
        position += 1
    sign = 1
    if position < length and text[position] in "+-":
        if text[position] == "-":
            sign = -1
        position += 1
    result = 0
    while position < length and text[position] in _DIGITS:
        result = result * 10 + _DIGITS.index(text[position])
        position += 1
    return result * sign


def itoa(number: int) -> str:
    """Return the decimal representation of an integer."""
    value = operator.index(number)
    digits = []
    magnitude = abs(value)
    while True:
        magnitude, remainder = divmod(magnitude, 10)
        digits.append(_DIGITS[remainder])
        if magnitude == 0:
            break
    if value < 0:
        digits.append("-")
    return "".join(reversed(digits))