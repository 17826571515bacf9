# minitalk

A small server and client that pass a text message from one process to
another using nothing but the two user signals, `SIGUSR1` and `SIGUSR2`.

## Requirements

Python 3.10 or later on a POSIX system whose `signal` module provides
`sigwaitinfo`, `sigtimedwait` and `pthread_sigmask`, such as Linux. macOS
does not provide `sigwaitinfo`/`sigtimedwait`, so the commands do not run there.

## How it works

Each byte goes least significant bit first: `SIGUSR1` for a 1 bit,
`SIGUSR2` for a 0 bit. The message is the UTF-8 bytes of the text up to any
NUL character, followed by one terminating NUL byte.

The server acknowledges every bit with `SIGUSR1`, and the client waits for
that acknowledgement before it sends the next bit. After each whole byte the
server signals the sender once more: `SIGUSR1` for an ordinary byte, or
`SIGUSR2` for the terminating NUL. The server writes every byte it receives
to standard output. When it receives the NUL byte, it also writes a newline.

## Installation

```
pip install .
```

## Usage

Start the server. It prints its process id and then waits for messages:

```
$ minitalk-server
PID: 12345
```

From another terminal, send a message to that process id:

```
$ minitalk-client 12345 "hello there"
Message received!
```

The server writes `hello there` followed by a newline.

The client needs exactly two arguments, the server's PID and the string to
send. With any other number of arguments it prints a usage message and
exits with status 1. The PID is read the way C's `atoi` reads a number.
If it is not a positive number, the client prints `Error: invalid PID` and
exits with status 1. If a signal cannot be delivered, the client exits with
status 1. The server exits with status 1 if it cannot signal a sender, and
with status 130 when interrupted.

## Library

- `minitalk.protocol`: `encode_byte(byte)` returns the eight bits of a byte,
  least significant first. `encode_message(message)` returns an iterator
  over the bits of a `str` or bytes-like message and its terminating NUL.
  `Decoder.feed(bit)` collects bits and returns each finished byte.
- `minitalk.server`: `Server(output=None, notify=None)` writes decoded bytes
  to a binary stream, by default standard output. It signals senders
  through `notify(pid, signum)`, by default `os.kill`. `Server.handle(signum,
  sender_pid)` processes one signal and returns the byte it completed, if
  any. `Server.serve()` blocks and handles incoming user signals.
- `minitalk.client`: `send_message(pid, message)` sends a message and waits
  for each acknowledgement. `parse_pid(text)` reads a PID and raises
  `ValueError` unless it is positive.
- `minitalk.chars`: `atoi`, `itoa`, and the ASCII tests and mappings
  `is_alpha`, `is_digit`, `is_alnum`, `is_ascii`, `is_print`, `to_upper`,
  `to_lower`. These take a one-character string or an integer code.
- `minitalk.strings`: `split`, `strtrim`, `substr`, `strnstr`, `strncmp`,
  `strcmp`, `memcmp`, `memchr`, `strchr`, `strrchr`. They treat text as
  ending at its first NUL. The search functions return an index, or `None`
  when nothing is found.
- `minitalk.printf`: `sprintf(fmt, *args)` and `printf(fmt, *args)` support
  `%c %s %p %d %i %u %x %X %%`. Integers follow 32-bit C `int`/`unsigned
  int` widths. `printf` writes to standard output and returns the length.
- `minitalk.lines`: `LineReader(buffer_size=42).next_line(fd)` returns the
  next line of a raw file descriptor as bytes, newline included, or `None`
  at end of input. It keeps the unread data of each descriptor separately.
  `read_lines(fd, buffer_size=42)` yields the lines until end of input.

## Tests

```
pip install ".[test]"
pytest
```