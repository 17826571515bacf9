"""Bit-level encoding of messages carried by two user signals.

Each byte travels as eight bits, least significant bit first. A message is
the bytes of its text up to any NUL, followed by one terminating NUL byte.
"""

from __future__ import annotations

from typing import Iterator, Optional, Union

BITS_PER_BYTE = 8

Message = Union[str, bytes, bytearray, memoryview]


def encode_byte(byte: int) -> list[int]:
    """Return the eight bits of *byte*, least significant first."""
    if isinstance(byte, bool) or not isinstance(byte, int):
        raise TypeError(f"expected an integer byte, got {type(byte).__name__}")
    if not 0 <= byte <= 0xFF:
        raise ValueError(f"byte must be in range 0..255, got {byte}")
    return [(byte >> shift) & 1 for shift in range(BITS_PER_BYTE)]


def _payload(message: Message) -> bytes:
    """Return the bytes of *message* up to, and not including, its first NUL."""
    if isinstance(message, str):
        data = message.encode("utf-8", "surrogateescape")
    elif isinstance(message, (bytes, bytearray, memoryview)):
        data = bytes(message)
    else:
        raise TypeError(f"expected text or bytes, got {type(message).__name__}")
    return data.partition(b"\0")[0]


def encode_message(message: Message) -> Iterator[int]:
    """Return an iterator over the bits of *message* and its terminating NUL."""
    payload = _payload(message) + b"\0"
    return (bit for byte in payload for bit in encode_byte(byte))


class Decoder:
    """Collects bits, least significant first, into whole bytes."""

    def __init__(self) -> None:
        self._value = 0
        self._count = 0

    @property
    def pending(self) -> int:
        """Number of bits received towards the current byte."""
        return self._count

    def feed(self, bit: int) -> Optional[int]:
        """Add one bit; return the finished byte after every eighth bit, else ``None``."""
        if bit not in (0, 1):
            raise ValueError(f"bit must be 0 or 1, got {bit!r}")
        if bit:
            self._value |= 1 << self._count
        self._count += 1
        if self._count < BITS_PER_BYTE:
            return None
        byte = self._value
        self._value = 0
        self._count = 0
        return byte