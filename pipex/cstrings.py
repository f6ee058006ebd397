"""NUL-terminated string operations.

Text may be given as ``str`` or as a bytes-like object. As with C strings,
the first NUL character ends the string; anything after it is ignored.
Functions that search return an index into the text, or ``None`` when
nothing is found. ``strlcpy`` and ``strlcat`` write into a ``bytearray``
and raise ``ValueError`` instead of writing past its end.
"""

from __future__ import annotations

from itertools import zip_longest
from typing import Optional, Sequence, Union

BytesLike = Union[bytes, bytearray, memoryview]
Text = Union[str, bytes, bytearray, memoryview]
CharLike = Union[int, str, bytes]

__all__ = [
    "strlen",
    "strlcpy",
    "strlcat",
    "strchr",
    "strrchr",
    "strnstr",
    "strncmp",
    "strdup",
]


def _terminated(data: Text) -> Union[str, bytes]:
    """Return ``data`` cut at its first NUL, as ``str`` or ``bytes``."""
    if isinstance(data, str):
        end = data.find("\0")
        return data if end < 0 else data[:end]
    raw = bytes(data)
    end = raw.find(0)
    return raw if end < 0 else raw[:end]


def _codes(data: Text) -> Sequence[int]:
    """Return the character codes of a terminated string."""
    text = _terminated(data)
    if isinstance(text, str):
        return [ord(char) for char in text]
    return text


def _needle(text: Text, char: CharLike) -> Union[str, bytes]:
    """Return ``char`` as a one-element string of the same kind as ``text``."""
    if isinstance(char, (bytes, bytearray)):
        if len(char) != 1:
            raise ValueError(f"expected a single byte, got {char!r}")
        code = char[0]
    elif isinstance(char, str):
        if len(char) != 1:
            raise ValueError(f"expected a single character, got {char!r}")
        code = ord(char)
    elif isinstance(char, int) and not isinstance(char, bool):
        code = char & 0xFF
    else:
        raise TypeError(f"expected a character, got {type(char).__name__}")
    if isinstance(text, str):
        return chr(code)
    if code > 0xFF:
        raise ValueError(f"character code {code} does not fit in a byte")
    return bytes([code])


def strlen(data: Text) -> int:
    """Return the number of characters before the first NUL."""
    return len(_terminated(data))


def _check_size(dest: bytearray, size: int) -> None:
    if size < 0:
        raise ValueError(f"size must not be negative, got {size}")
    if size > len(dest):
        raise ValueError(
            f"size {size} exceeds the {len(dest)} bytes of the destination"
        )


def strlcpy(dest: bytearray, src: BytesLike, size: int) -> int:
    """Copy the string ``src`` into ``dest``, writing at most ``size`` bytes.

    At most ``size - 1`` characters are copied and the result is always
    NUL-terminated when ``size`` is positive. Returns the length of ``src``;
    a return value of ``size`` or more means the copy was truncated.
    """
    _check_size(dest, size)
    source = _terminated(src)
    if size > 0:
        copied = min(len(source), size - 1)
        dest[:copied] = source[:copied]
        dest[copied] = 0
    return len(source)


def strlcat(dest: bytearray, src: BytesLike, size: int) -> int:
    """Append the string ``src`` to the string in ``dest``.

    ``size`` is the full size of the destination buffer; the result is
    NUL-terminated and never longer than ``size - 1`` characters. Returns
    the length of the string it tried to create: the initial length of
    ``dest`` (capped at ``size``) plus the length of ``src``.
    """
    _check_size(dest, size)
    source = _terminated(src)
    dest_len = strlen(dest[:size])
    if dest_len >= size:
        return size + len(source)
    copied = min(len(source), size - dest_len - 1)
    dest[dest_len:dest_len + copied] = source[:copied]
    dest[dest_len + copied] = 0
    return dest_len + len(source)


def strchr(text: Text, char: CharLike) -> Optional[int]:
    """Return the index of the first occurrence of ``char`` in ``text``.

    Searching for NUL finds the terminator, at index ``strlen(text)``.
    """
    needle = _needle(text, char)
    body = _terminated(text)
    if needle in ("\0", b"\0"):
        return len(body)
    index = body.find(needle)
    return None if index < 0 else index


def strrchr(text: Text, char: CharLike) -> Optional[int]:
    """Return the index of the last occurrence of ``char`` in ``text``.

    Searching for NUL finds the terminator, at index ``strlen(text)``.
    """
    needle = _needle(text, char)
    body = _terminated(text)
    if needle in ("\0", b"\0"):
        return len(body)
    index = body.rfind(needle)
    return None if index < 0 else index


def strnstr(haystack: Text, needle: Text, length: int) -> Optional[int]:
    """Find ``needle`` lying wholly within the first ``length`` characters.

    An empty needle matches at index 0. Returns the index of the match or
    ``None``.
    """
    if length < 0:
        raise ValueError(f"length must not be negative, got {length}")
    big = _terminated(haystack)
    little = _terminated(needle)
    if isinstance(big, str) != isinstance(little, str):
        raise TypeError("haystack and needle must both be str or both be bytes")
    if not little:
        return 0
    index = big[:length].find(little)
    return None if index < 0 else index


def strncmp(first: Text, second: Text, count: int) -> int:
    """Compare at most ``count`` characters of two strings.

    Returns the difference between the first pair of differing character
    codes, 0 when the strings agree up to ``count`` or up to their end.
    """
    if count < 0:
        raise ValueError(f"count must not be negative, got {count}")
    left = _codes(first)[:count]
    right = _codes(second)[:count]
    for a, b in zip_longest(left, right, fillvalue=0):
        if a != b or a == 0:
            return a - b
    return 0


def strdup(text: Text) -> Union[str, bytes, bytearray]:
    """Return a new copy of the string, up to its first NUL.

    A ``bytearray`` gives a new ``bytearray``; ``str`` and other bytes-like
    input give ``str`` and ``bytes``.
    """
    body = _terminated(text)
    if isinstance(text, bytearray):
        return bytearray(body)
    return body