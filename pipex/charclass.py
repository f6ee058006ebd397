"""ASCII character classification and case conversion.

Every function takes a character code (an ``int``) or a one-character
string. Only the ASCII ranges count; other codes are never letters or
digits and pass through case conversion unchanged.
"""

from __future__ import annotations

from typing import Union

CharLike = Union[int, str]

__all__ = [
    "isalpha",
    "isdigit",
    "isalnum",
    "isascii",
    "isprint",
    "tolower",
    "toupper",
]

_CASE_OFFSET = ord("a") - ord("A")


def _to_code(code: CharLike) -> int:
    """Return the integer code of a character given as int or one-char str."""
    if isinstance(code, str):
        if len(code) != 1:
            raise ValueError(f"expected a single character, got {code!r}")
        return ord(code)
    if isinstance(code, bool) or not isinstance(code, int):
        raise TypeError(f"expected an int or a one-character str, got {type(code).__name__}")
    return code


def isalpha(code: CharLike) -> bool:
    """True for the ASCII letters A-Z and a-z."""
    value = _to_code(code)
    return ord("A") <= value <= ord("Z") or ord("a") <= value <= ord("z")


def isdigit(code: CharLike) -> bool:
    """True for the ASCII digits 0-9."""
    value = _to_code(code)
    return ord("0") <= value <= ord("9")


def isalnum(code: CharLike) -> bool:
    """True for ASCII letters and digits."""
    return isalpha(code) or isdigit(code)


def isascii(code: CharLike) -> bool:
    """True for codes 0 through 127."""
    return 0 <= _to_code(code) <= 127


def isprint(code: CharLike) -> bool:
    """True for the printable ASCII range, space (32) through tilde (126)."""
    return 32 <= _to_code(code) <= 126


def _convert(code: CharLike, value: int) -> CharLike:
    return chr(value) if isinstance(code, str) else value


def tolower(code: CharLike) -> CharLike:
    """Map an ASCII upper-case letter to lower case; anything else is unchanged.

    The result has the same type as the argument.
    """
    value = _to_code(code)
    if ord("A") <= value <= ord("Z"):
        value += _CASE_OFFSET
    return _convert(code, value)


def toupper(code: CharLike) -> CharLike:
    """Map an ASCII lower-case letter to upper case; anything else is unchanged.

    The result has the same type as the argument.
    """
    value = _to_code(code)
    if ord("a") <= value <= ord("z"):
        value -= _CASE_OFFSET
    return _convert(code, value)