"""Byte-buffer operations: filling, copying, searching and comparing.

Buffers that are changed in place are ``bytearray`` objects; read-only
arguments may be any bytes-like object. Counts that reach past the end of
a buffer raise ``ValueError`` rather than touching memory that is not there.
"""

from __future__ import annotations

from typing import Optional, Union

BytesLike = Union[bytes, bytearray, memoryview]

__all__ = [
    "memset",
    "bzero",
    "memcpy",
    "memmove",
    "memchr",
    "memcmp",
    "calloc",
]


def _check_count(count: int, available: int, what: str) -> None:
    if count < 0:
        raise ValueError(f"count must not be negative, got {count}")
    if count > available:
        raise ValueError(
            f"count {count} exceeds the {available} bytes available in {what}"
        )


def memset(buffer: bytearray, value: int, count: int) -> bytearray:
    """Set the first ``count`` bytes of ``buffer`` to ``value`` (taken modulo 256).

    Returns the buffer itself.
    """
    _check_count(count, len(buffer), "buffer")
    buffer[:count] = bytes([value & 0xFF]) * count
    return buffer


def bzero(buffer: bytearray, count: int) -> None:
    """Set the first ``count`` bytes of ``buffer`` to zero."""
    memset(buffer, 0, count)


def memcpy(dest: bytearray, src: BytesLike, count: int) -> bytearray:
    """Copy ``count`` bytes from the start of ``src`` to the start of ``dest``.

    Returns ``dest``.
    """
    if count == 0 or src is dest:
        return dest
    _check_count(count, len(dest), "destination")
    _check_count(count, len(src), "source")
    dest[:count] = bytes(src[:count])
    return dest


def memmove(
    buffer: bytearray, dest_offset: int, src_offset: int, count: int
) -> bytearray:
    """Copy ``count`` bytes within ``buffer`` from ``src_offset`` to ``dest_offset``.

    The regions may overlap; the result is as if the source bytes were
    copied out first. Returns the buffer itself.
    """
    if dest_offset < 0 or src_offset < 0:
        raise ValueError("offsets must not be negative")
    _check_count(count, len(buffer) - dest_offset, "destination region")
    _check_count(count, len(buffer) - src_offset, "source region")
    if dest_offset != src_offset and count:
        buffer[dest_offset:dest_offset + count] = bytes(
            buffer[src_offset:src_offset + count]
        )
    return buffer


def memchr(data: BytesLike, value: int, count: int) -> Optional[int]:
    """Return the index of the first byte equal to ``value`` (modulo 256).

    Only the first ``count`` bytes are searched; ``None`` means no match.
    """
    _check_count(count, len(data), "data")
    index = bytes(data[:count]).find(value & 0xFF)
    return None if index < 0 else index


def memcmp(first: BytesLike, second: BytesLike, count: int) -> int:
    """Compare the first ``count`` bytes of two buffers.

    Returns the difference between the first pair of differing bytes,
    taken as unsigned values, or 0 when the ranges are equal.
    """
    _check_count(count, len(first), "first buffer")
    _check_count(count, len(second), "second buffer")
    for left, right in zip(bytes(first[:count]), bytes(second[:count])):
        if left != right:
            return left - right
    return 0


def calloc(count: int, size: int) -> bytearray:
    """Return a zero-filled buffer of ``count * size`` bytes."""
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    return bytearray(count * size)