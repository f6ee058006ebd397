"""Building new strings from existing ones: slicing, joining, trimming,
splitting and per-character mapping.

The functions accept ``str``; those that only slice, join or strip also
work with ``bytes``.
"""

from __future__ import annotations

from typing import Any, Callable, Iterable, List, MutableSequence, TypeVar, Union

AnyText = TypeVar("AnyText", str, bytes)

__all__ = [
    "substr",
    "strjoin",
    "strtrim",
    "split",
    "strmapi",
    "striteri",
]

_TERMINATORS = (0, "\0", b"\0")


def substr(text: AnyText, start: int, length: int) -> AnyText:
    """Return at most ``length`` characters of ``text`` beginning at ``start``.

    A start at or past the end of the text gives an empty string.
    """
    if start < 0:
        raise ValueError(f"start must not be negative, got {start}")
    if length < 0:
        raise ValueError(f"length must not be negative, got {length}")
    if start >= len(text):
        return text[:0]
    return text[start:start + length]


def strjoin(first: AnyText, second: AnyText) -> AnyText:
    """Return a new string holding ``first`` followed by ``second``."""
    if isinstance(first, str) != isinstance(second, str):
        raise TypeError("both arguments must be str or both must be bytes")
    return first + second


def strtrim(text: AnyText, charset: AnyText) -> AnyText:
    """Remove every character found in ``charset`` from both ends of ``text``."""
    if isinstance(text, str) != isinstance(charset, str):
        raise TypeError("text and charset must both be str or both be bytes")
    return text.strip(charset)


def split(text: AnyText, separator: AnyText) -> List[AnyText]:
    """Split ``text`` on a single separator character, dropping empty words.

    Runs of separators, and separators at either end, produce no empty
    entries; text made only of separators gives an empty list.
    """
    if len(separator) != 1:
        raise ValueError(f"separator must be a single character, got {separator!r}")
    return [word for word in text.split(separator) if word]


def strmapi(text: str, func: Callable[[int, str], str]) -> str:
    """Return a new string made of ``func(index, char)`` for every character."""
    return "".join(func(index, char) for index, char in enumerate(text))


def striteri(
    chars: MutableSequence[Any], func: Callable[[int, Any], Any]
) -> None:
    """Replace each element of ``chars`` in place with ``func(index, element)``.

    ``chars`` is a mutable sequence of characters, such as a ``list`` of
    one-character strings or a ``bytearray``. Processing stops at the first
    NUL element, which is left as it is.
    """
    for index, value in enumerate(chars):
        if value in _TERMINATORS:
            break
        chars[index] = func(index, value)