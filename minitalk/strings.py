"""Splitting, trimming, searching and comparing of strings and byte buffers.

Strings are treated the way C treats them. Text ends at its first NUL
character, if it has one, and the end of a string compares as code 0.
Search functions return an index into the text, or ``None`` when nothing
is found.
"""

from __future__ import annotations

from itertools import zip_longest
from typing import Iterable, Optional, Union

Char = Union[str, int]
Buffer = Union[bytes, bytearray, memoryview]


def _char(c: Char) -> str:
    """Return *c* as a one-character string.

    An integer is cut down to its low byte first.
    """
    if isinstance(c, bool):
        raise TypeError("expected a character or an integer code, got bool")
    if isinstance(c, int):
        return chr(c & 0xFF)
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {len(c)} characters")
        return c
    raise TypeError(f"expected a character or an integer code, got {type(c).__name__}")


def _c_string(text: str) -> str:
    """Return *text* up to, and not including, its first NUL."""
    if not isinstance(text, str):
        raise TypeError(f"expected a string, got {type(text).__name__}")
    return text.partition("\0")[0]


def _non_negative(value: int, name: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an integer")
    if value < 0:
        raise ValueError(f"{name} must not be negative, got {value}")
    return value


def _difference(left: Iterable[int], right: Iterable[int]) -> int:
    """Return the difference at the first position where the codes differ, else 0."""
    for a, b in zip_longest(left, right, fillvalue=0):
        if a != b:
            return a - b
    return 0


def _bytes(data: Buffer, name: str) -> bytes:
    if not isinstance(data, (bytes, bytearray, memoryview)):
        raise TypeError(f"{name} must be a bytes-like object, got {type(data).__name__}")
    return bytes(data)


def split(text: str, sep: str) -> list[str]:
    """Return the non-empty words of *text* separated by the character *sep*."""
    text = _c_string(text)
    sep = _char(sep) if isinstance(sep, str) else _char(sep)
    return [word for word in text.split(sep) if word]


def strtrim(text: str, charset: str) -> str:
    """Remove characters that appear in *charset* from both ends of *text*."""
    text = _c_string(text)
    charset = _c_string(charset)
    return text.strip(charset)


def substr(text: str, start: int, length: int) -> str:
    """Return at most *length* characters of *text* beginning at *start*.

    A start at or past the end of the text gives an empty string.
    """
    text = _c_string(text)
    _non_negative(start, "start")
    _non_negative(length, "length")
    if start >= len(text):
        return ""
    return text[start:start + length]


def strnstr(haystack: str, needle: str, length: int) -> Optional[int]:
    """Find *needle* within the first *length* characters of *haystack*.

    An empty needle is found at index 0. A match must lie wholly inside
    the first *length* characters.
    """
    haystack = _c_string(haystack)
    needle = _c_string(needle)
    _non_negative(length, "length")
    if not needle:
        return 0
    index = haystack[:length].find(needle)
    return None if index < 0 else index


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most *n* characters; return the code difference at the first mismatch."""
    _non_negative(n, "n")
    left = _c_string(s1)[:n]
    right = _c_string(s2)[:n]
    return _difference(map(ord, left), map(ord, right))


def strcmp(s1: str, s2: str) -> int:
    """Compare two strings; return the code difference at the first mismatch."""
    return _difference(map(ord, _c_string(s1)), map(ord, _c_string(s2)))


def memcmp(b1: Buffer, b2: Buffer, n: int) -> int:
    """Compare the first *n* bytes of two buffers as unsigned values."""
    left = _bytes(b1, "b1")
    right = _bytes(b2, "b2")
    _non_negative(n, "n")
    if n > len(left) or n > len(right):
        raise ValueError(f"cannot compare {n} bytes of buffers of lengths {len(left)} and {len(right)}")
    return _difference(left[:n], right[:n])


def memchr(data: Buffer, c: int, n: int) -> Optional[int]:
    """Return the index of the first byte equal to the low byte of *c* in the first *n* bytes."""
    buffer = _bytes(data, "data")
    _non_negative(n, "n")
    if n > len(buffer):
        raise ValueError(f"cannot search {n} bytes of a buffer of length {len(buffer)}")
    if isinstance(c, bool) or not isinstance(c, int):
        raise TypeError("c must be an integer")
    index = buffer[:n].find(c & 0xFF)
    return None if index < 0 else index


def strchr(text: str, c: Char) -> Optional[int]:
    """Return the index of the first occurrence of *c* in *text*.

    Searching for NUL finds the end of the text.
    """
    text = _c_string(text)
    ch = _char(c)
    if ch == "\0":
        return len(text)
    index = text.find(ch)
    return None if index < 0 else index


def strrchr(text: str, c: Char) -> Optional[int]:
    """Return the index of the last occurrence of *c* in *text*.

    Searching for NUL finds the end of the text.
    """
    text = _c_string(text)
    ch = _char(c)
    if ch == "\0":
        return len(text)
    index = text.rfind(ch)
    return None if index < 0 else index