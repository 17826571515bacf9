"""Sending side: signals a message to a server one bit at a time."""

from __future__ import annotations

import os
import signal
import sys
from typing import Optional

from minitalk.chars import atoi
from minitalk.printf import printf
from minitalk.protocol import BITS_PER_BYTE, Message, encode_message

USAGE = "Error\nValid parameters: <server_pid> <string_to_send>"
INVALID_PID = "Error: invalid PID"
RECEIVED = "Message received!"

# How long to wait for the end-of-byte signal that may follow an acknowledgement.
_STATUS_WAIT = 0.05


def parse_pid(text: str) -> int:
    """Read a process id the way ``atoi`` reads it; it must be positive."""
    pid = atoi(text)
    if pid <= 0:
        raise ValueError(f"invalid PID: {text!r}")
    return pid


def send_message(pid: int, message: Message) -> None:
    """Send *message* to the server *pid*, waiting for an acknowledgement after each bit.

    A failure to signal the server is raised as :class:`OSError`.
    """
    signals = {signal.SIGUSR1, signal.SIGUSR2}
    previous = signal.pthread_sigmask(signal.SIG_BLOCK, signals)
    try:
        for index, bit in enumerate(encode_message(message), start=1):
            os.kill(pid, signal.SIGUSR1 if bit else signal.SIGUSR2)
            signal.sigwait(signals)
            if index % BITS_PER_BYTE == 0:
                # Drain the end-of-byte signal so it is not taken for the next ack.
                signal.sigtimedwait(signals, _STATUS_WAIT)
    finally:
        signal.pthread_sigmask(signal.SIG_SETMASK, previous)


def main(argv: Optional[list[str]] = None) -> int:
    """Send the second argument as a message to the server whose PID is the first."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 2:
        printf(USAGE)
        return 1
    try:
        pid = parse_pid(args[0])
    except ValueError:
        printf(INVALID_PID)
        return 1
    try:
        send_message(pid, args[1])
    except OSError:
        return 1
    printf(RECEIVED)
    return 0


if __name__ == "__main__":
    sys.exit(main())