"""Single-key input, the only platform-specific part of the UI."""

from __future__ import annotations

import sys
from typing import Protocol, TextIO


UNDECODABLE_KEY = "\ufffd"


def _read_char(stream: TextIO) -> str:
    # Undecodable bytes come back as a key no command is bound to.
    try:
        return stream.read(1)
    except UnicodeDecodeError:
        return UNDECODABLE_KEY


class KeyReader(Protocol):
    """Blocking, unbuffered, no-echo read of one character."""

    def read_key(self) -> str:
        ...


class PosixKeyReader:
    """Reads one key with the terminal in non-canonical, no-echo mode.

    The previous terminal attributes are restored after every read, including
    when the read itself fails.
    """

    def __init__(self, stream: TextIO):
        import termios

        self._termios = termios
        self._stream = stream
        self._fd = stream.fileno()

    def read_key(self) -> str:
        termios = self._termios
        old_attrs = termios.tcgetattr(self._fd)
        new_attrs = termios.tcgetattr(self._fd)
        new_attrs[3] &= ~(termios.ICANON | termios.ECHO)
        new_attrs[6][termios.VMIN] = 1
        new_attrs[6][termios.VTIME] = 0

        termios.tcsetattr(self._fd, termios.TCSANOW, new_attrs)
        try:
            return _read_char(self._stream)
        finally:
            termios.tcsetattr(self._fd, termios.TCSANOW, old_attrs)


class WindowsKeyReader:
    def __init__(self):
        import msvcrt

        self._msvcrt = msvcrt

    def read_key(self) -> str:
        return self._msvcrt.getwch()


class StreamKeyReader:
    """Reads keys from a plain text stream (piped stdin, tests).

    Returns "" once the stream is exhausted.
    """

    def __init__(self, stream: TextIO):
        self._stream = stream

    def read_key(self) -> str:
        return _read_char(self._stream)


def default_key_reader(stream: TextIO | None = None) -> KeyReader:
    stream = sys.stdin if stream is None else stream
    try:
        interactive = stream.isatty()
    except (AttributeError, ValueError):
        interactive = False

    if not interactive:
        return StreamKeyReader(stream)
    if sys.platform == "win32":
        return WindowsKeyReader()
    return PosixKeyReader(stream)
