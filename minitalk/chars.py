"""Character classification, case mapping and integer/text conversion.

Every character function accepts either a one-character string or an
integer character code, and classifies only the ASCII range.
"""

from __future__ import annotations

from typing import Union

Char = Union[str, int]

_WHITESPACE = frozenset(" \t\n\v\f\r")
_DIGITS = "0123456789"


def _code(c: Char) -> int:
    """Return the integer code of *c*, a one-character string or an int."""
    if isinstance(c, bool):
        raise TypeError("expected a character or an integer code, got bool")
    if isinstance(c, int):
        return c
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {len(c)} characters")
        return ord(c)
    raise TypeError(f"expected a character or an integer code, got {type(c).__name__}")


def atoi(text: str) -> int:
    """Parse a leading decimal integer the way C's ``atoi`` does.

    Leading whitespace (tab, newline, vertical tab, form feed, carriage
    return, space) is skipped, one optional ``+`` or ``-`` sign is read,
    then ASCII digits are consumed up to the first non-digit. Text with no
    digits in that position yields 0.
    """
    pos = 0
    length = len(text)
    while pos < length and text[pos] in _WHITESPACE:
        pos += 1
    sign = 1
    if pos < length and text[pos] in "+-":
        if text[pos] == "-":
            sign = -1
        pos += 1
    value = 0
    while pos < length and text[pos] in _DIGITS:
        value = value * 10 + _DIGITS.index(text[pos])
        pos += 1
    return sign * value


def itoa(n: int) -> str:
    """Return the decimal representation of *n*, with a leading ``-`` if negative."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"expected an integer, got {type(n).__name__}")
    if n == 0:
        return "0"
    digits = []
    magnitude = -n if n < 0 else n
    while magnitude:
        magnitude, rest = divmod(magnitude, 10)
        digits.append(_DIGITS[rest])
    if n < 0:
        digits.append("-")
    return "".join(reversed(digits))


def is_alpha(c: Char) -> bool:
    """True for ASCII letters."""
    code = _code(c)
    return ord("A") <= code <= ord("Z") or ord("a") <= code <= ord("z")


def is_digit(c: Char) -> bool:
    """True for ASCII decimal digits."""
    code = _code(c)
    return ord("0") <= code <= ord("9")


def is_alnum(c: Char) -> bool:
    """True for ASCII letters and digits."""
    return is_alpha(c) or is_digit(c)


def is_ascii(c: Char) -> bool:
    """True for codes 0 through 127."""
    return 0 <= _code(c) <= 127


def is_print(c: Char) -> bool:
    """True for printable ASCII, space (32) through tilde (126)."""
    return 32 <= _code(c) <= 126


def _shift(c: Char, low: str, high: str, delta: int) -> Char:
    code = _code(c)
    if ord(low) <= code <= ord(high):
        code += delta
    return chr(code) if isinstance(c, str) else code


def to_upper(c: Char) -> Char:
    """Map an ASCII lowercase letter to uppercase; anything else is unchanged.

    The result has the same kind as the argument: a string for a string,
    an integer code for an integer.
    """
    return _shift(c, "a", "z", -32)


def to_lower(c: Char) -> Char:
    """Map an ASCII uppercase letter to lowercase; anything else is unchanged.

    The result has the same kind as the argument: a string for a string,
    an integer code for an integer.
    """
    return _shift(c, "A", "Z", 32)