"""Writing characters, strings and numbers to a file descriptor."""

from __future__ import annotations

import os
from typing import Union

from pipex.convert import itoa

__all__ = ["putchar_fd", "putstr_fd", "putendl_fd", "putnbr_fd"]

Text = Union[str, bytes, bytearray]


def _encode(text: Text) -> bytes:
    if isinstance(text, str):
        return text.encode("utf-8")
    if isinstance(text, (bytes, bytearray)):
        return bytes(text)
    raise TypeError(f"expected str or bytes, got {type(text).__name__}")


def _write_all(fd: int, data: bytes) -> None:
    view = memoryview(data)
    while view:
        written = os.write(fd, view)
        view = view[written:]


def putchar_fd(char: Text, fd: int) -> None:
    """Write a single character to ``fd``."""
    if len(char) != 1:
        raise ValueError(f"expected a single character, got {char!r}")
    _write_all(fd, _encode(char))


def putstr_fd(text: Text, fd: int) -> None:
    """Write ``text`` to ``fd``."""
    _write_all(fd, _encode(text))


def putendl_fd(text: Text, fd: int) -> None:
    """Write ``text`` followed by a newline to ``fd``."""
    _write_all(fd, _encode(text) + b"\n")


def putnbr_fd(number: int, fd: int) -> None:
    """Write the decimal representation of ``number`` to ``fd``."""
    _write_all(fd, itoa(number).encode("ascii"))