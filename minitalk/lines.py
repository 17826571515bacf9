"""Reading a file descriptor one line at a time.

A :class:`LineReader` keeps unread data for each descriptor separately, so
lines from several descriptors may be read in turns. Reading stops as soon
as a newline is buffered or a read returns fewer bytes than the buffer
size, so a short read hands back what has arrived so far.
"""

from __future__ import annotations

import os
from typing import Iterator, Optional

DEFAULT_BUFFER_SIZE = 42
MAX_FD = 4096


class LineReader:
    """Line reader over raw file descriptors with per-descriptor buffering."""

    def __init__(self, buffer_size: int = DEFAULT_BUFFER_SIZE) -> None:
        if isinstance(buffer_size, bool) or not isinstance(buffer_size, int):
            raise TypeError("buffer_size must be an integer")
        if buffer_size <= 0:
            raise ValueError(f"buffer_size must be positive, got {buffer_size}")
        self.buffer_size = buffer_size
        self._pending: dict[int, bytes] = {}

    def next_line(self, fd: int) -> Optional[bytes]:
        """Return the next line of *fd*, newline included, or ``None`` at end of input.

        The last line of the input may lack a newline. A failing read drops
        any data held for *fd* and raises :class:`OSError`.
        """
        if isinstance(fd, bool) or not isinstance(fd, int):
            raise TypeError("fd must be an integer")
        if not 0 <= fd < MAX_FD:
            raise ValueError(f"fd must be in range 0..{MAX_FD - 1}, got {fd}")
        store = self._pending.pop(fd, b"")
        count = self.buffer_size
        while count == self.buffer_size and b"\n" not in store:
            chunk = os.read(fd, self.buffer_size)
            count = len(chunk)
            if count == 0 and not store:
                return None
            store += chunk
        newline = store.find(b"\n")
        end = newline + 1 if newline >= 0 else len(store)
        line, rest = store[:end], store[end:]
        if rest:
            self._pending[fd] = rest
        return line


def read_lines(fd: int, buffer_size: int = DEFAULT_BUFFER_SIZE) -> Iterator[bytes]:
    """Yield the lines of *fd* until end of input."""
    reader = LineReader(buffer_size)
    while True:
        line = reader.next_line(fd)
        if line is None:
            return
        yield line