"""Formatted output with the conversions ``%c %s %p %d %i %u %x %X %%``.

Integers are taken as a C ``int``: ``%d`` and ``%i`` print them as a
signed 32-bit value, and ``%u``, ``%x`` and ``%X`` as an unsigned one.
A ``%`` followed by any other character prints that character alone. A
``%`` at the very end of the format ends the output.
"""

from __future__ import annotations

import sys
from typing import Any, Callable, Dict, Iterator, Optional, TextIO

__all__ = ["format_text", "printf"]

_UINT_MASK = 0xFFFFFFFF
_POINTER_MASK = 0xFFFFFFFFFFFFFFFF


def _as_int(value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"expected an integer argument, got {type(value).__name__}")
    return value


def _char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError(f"%c expects a single character, got {value!r}")
        return value
    return chr(_as_int(value) & 0xFF)


def _string(value: Any) -> str:
    return "(null)" if value is None else str(value)


def _pointer(value: Any) -> str:
    if value is None:
        return "(nil)"
    address = value if isinstance(value, int) and not isinstance(value, bool) else id(value)
    address &= _POINTER_MASK
    if address == 0:
        return "(nil)"
    return f"0x{address:x}"


def _signed(value: Any) -> str:
    number = (_as_int(value) + 2**31) % 2**32 - 2**31
    return str(number)


def _unsigned(value: Any) -> str:
    return str(_as_int(value) & _UINT_MASK)


def _hex_lower(value: Any) -> str:
    return f"{_as_int(value) & _UINT_MASK:x}"


def _hex_upper(value: Any) -> str:
    return f"{_as_int(value) & _UINT_MASK:X}"


_CONVERSIONS: Dict[str, Callable[[Any], str]] = {
    "c": _char,
    "s": _string,
    "p": _pointer,
    "d": _signed,
    "i": _signed,
    "u": _unsigned,
    "x": _hex_lower,
    "X": _hex_upper,
}


def _next_argument(values: Iterator[Any]) -> Any:
    try:
        return next(values)
    except StopIteration:
        raise TypeError("not enough arguments for format string") from None


def format_text(fmt: str, *args: Any) -> str:
    """Return ``fmt`` with its conversions replaced by ``args`` in order.

    Surplus arguments are ignored; too few raise ``TypeError``.
    """
    pieces = []
    values = iter(args)
    chars = iter(fmt)
    for char in chars:
        if char != "%":
            pieces.append(char)
            continue
        spec = next(chars, None)
        if spec is None:
            break
        if spec == "%":
            pieces.append("%")
            continue
        convert = _CONVERSIONS.get(spec)
        if convert is None:
            pieces.append(spec)
        else:
            pieces.append(convert(_next_argument(values)))
    return "".join(pieces)


def printf(fmt: str, *args: Any, stream: Optional[TextIO] = None) -> int:
    """Write the formatted text to ``stream`` (standard output by default).

    Returns the number of characters written.
    """
    text = format_text(fmt, *args)
    target = sys.stdout if stream is None else stream
    target.write(text)
    target.flush()
    return len(text)