"""Receiving side: rebuilds bytes from user signals and prints them.

A ``SIGUSR1`` carries a one bit and a ``SIGUSR2`` a zero bit. Every bit is
acknowledged to its sender with ``SIGUSR1``. After each whole byte the
sender gets ``SIGUSR1`` again, or ``SIGUSR2`` when the byte was the
terminating NUL, which also ends the printed line.
"""

from __future__ import annotations

import os
import signal
import sys
from typing import BinaryIO, Callable, Optional

from minitalk.printf import printf
from minitalk.protocol import Decoder

Notify = Callable[[int, int], None]


class Server:
    """Decodes signalled bits and writes the resulting bytes to *output*."""

    def __init__(self, output: Optional[BinaryIO] = None, notify: Optional[Notify] = None) -> None:
        self.output = output if output is not None else sys.stdout.buffer
        self.notify = notify if notify is not None else os.kill
        self._decoder = Decoder()

    def _write(self, data: bytes) -> None:
        self.output.write(data)
        flush = getattr(self.output, "flush", None)
        if flush is not None:
            flush()

    def handle(self, signum: int, sender_pid: int) -> Optional[int]:
        """Take one signal from *sender_pid*; return the byte it completed, if any.

        A failure to signal the sender is raised as :class:`OSError`.
        """
        bit = 1 if signum == signal.SIGUSR1 else 0
        byte = self._decoder.feed(bit)
        self.notify(sender_pid, signal.SIGUSR1)
        if byte is None:
            return None
        self._write(bytes([byte]))
        if byte == 0:
            self.notify(sender_pid, signal.SIGUSR2)
            self._write(b"\n")
        else:
            self.notify(sender_pid, signal.SIGUSR1)
        return byte

    def serve(self) -> None:
        """Wait for user signals and handle each one, until an error is raised."""
        signals = {signal.SIGUSR1, signal.SIGUSR2}
        previous = signal.pthread_sigmask(signal.SIG_BLOCK, signals)
        try:
            while True:
                info = signal.sigwaitinfo(signals)
                self.handle(info.si_signo, info.si_pid)
        finally:
            signal.pthread_sigmask(signal.SIG_SETMASK, previous)


def main(argv: Optional[list[str]] = None) -> int:
    """Print this process's PID, then print every message received."""
    printf("PID: %d\n", os.getpid())
    server = Server()
    try:
        server.serve()
    except OSError:
        return 1
    except KeyboardInterrupt:
        return 130
    return 0


if __name__ == "__main__":
    sys.exit(main())