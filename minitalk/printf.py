"""Formatted output with a small set of conversions.

Supported conversions are ``%c``, ``%s``, ``%p``, ``%d``, ``%i``, ``%u``,
``%x``, ``%X`` and ``%%``. Integer conversions follow the widths of C's
``int`` and ``unsigned int``. An unknown conversion prints nothing and
consumes no argument. A lone ``%`` at the end of the format is dropped.
"""

from __future__ import annotations

import sys
from typing import Any, Iterator

_INT_BITS = 32
_UINT_MASK = (1 << _INT_BITS) - 1
_POINTER_MASK = (1 << 64) - 1
_CONVERSIONS = frozenset("cspdiuxX")


def _next_value(values: Iterator[Any], spec: str) -> Any:
    try:
        return next(values)
    except StopIteration:
        raise TypeError(f"not enough arguments for %{spec}") from None


def _integer(value: Any, spec: str) -> int:
    if not isinstance(value, int):
        raise TypeError(f"%{spec} requires an integer, got {type(value).__name__}")
    return int(value)


def _signed(value: int) -> int:
    value &= _UINT_MASK
    if value >= 1 << (_INT_BITS - 1):
        value -= 1 << _INT_BITS
    return value


def _char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError(f"%c requires a single character, got {len(value)} characters")
        return value
    return chr(_integer(value, "c") & 0xFF)


def _string(value: Any) -> str:
    if value is None:
        return "(null)"
    if not isinstance(value, str):
        raise TypeError(f"%s requires a string, got {type(value).__name__}")
    return value.partition("\0")[0]


def _pointer(value: Any) -> str:
    if value is None:
        return "(nil)"
    address = _integer(value, "p") & _POINTER_MASK
    if address == 0:
        return "(nil)"
    return f"0x{address:x}"


def _convert(spec: str, values: Iterator[Any]) -> str:
    if spec == "%":
        return "%"
    if spec not in _CONVERSIONS:
        return ""
    value = _next_value(values, spec)
    if spec == "c":
        return _char(value)
    if spec == "s":
        return _string(value)
    if spec == "p":
        return _pointer(value)
    number = _integer(value, spec)
    if spec in ("d", "i"):
        return str(_signed(number))
    number &= _UINT_MASK
    if spec == "u":
        return str(number)
    return format(number, "X" if spec == "X" else "x")


def sprintf(fmt: str, *args: Any) -> str:
    """Return *fmt* with its conversions replaced by the formatted *args*."""
    if not isinstance(fmt, str):
        raise TypeError(f"format must be a string, got {type(fmt).__name__}")
    values = iter(args)
    pieces = []
    chars = iter(fmt)
    for ch in chars:
        if ch != "%":
            pieces.append(ch)
            continue
        spec = next(chars, None)
        if spec is None:
            break
        pieces.append(_convert(spec, values))
    return "".join(pieces)


def printf(fmt: str, *args: Any) -> int:
    """Write the formatted text to standard output and return its length."""
    text = sprintf(fmt, *args)
    sys.stdout.write(text)
    sys.stdout.flush()
    return len(text)