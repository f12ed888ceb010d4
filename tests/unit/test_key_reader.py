from __future__ import annotations

import io
import os
import unittest

from tests.unit._bootstrap import ensure_project_on_path


ensure_project_on_path()


class _FakeTermios:
    ICANON = 0x2
    ECHO = 0x8
    VMIN = 6
    VTIME = 5
    TCSANOW = 0

    def __init__(self) -> None:
        self.attrs = [0, 0, 0, 0xFF, 38400, 38400, [0] * 32]
        self.calls: list[list] = []

    def tcgetattr(self, fd):
        return [*self.attrs[:6], list(self.attrs[6])]

    def tcsetattr(self, fd, when, attrs):
        self.calls.append(attrs)
        self.attrs = [*attrs[:6], list(attrs[6])]


class _TtyStream:
    def __init__(self, data: str = "", fail: bool = False) -> None:
        self._buf = io.StringIO(data)
        self._fail = fail

    def fileno(self) -> int:
        return 0

    def isatty(self) -> bool:
        return True

    def read(self, n: int = -1) -> str:
        if self._fail:
            raise OSError("read failed")
        return self._buf.read(n)


class TestStreamKeyReader(unittest.TestCase):
    def test_reads_one_char_then_empty(self) -> None:
        from ui.key_reader import StreamKeyReader

        reader = StreamKeyReader(io.StringIO("a\n"))
        self.assertEqual(reader.read_key(), "a")
        self.assertEqual(reader.read_key(), "\n")
        self.assertEqual(reader.read_key(), "")

    def test_undecodable_bytes_become_unbound_key(self) -> None:
        from ui.key_reader import UNDECODABLE_KEY, StreamKeyReader

        stream = io.TextIOWrapper(io.BytesIO(b"\xff"), encoding="utf-8", errors="strict")
        reader = StreamKeyReader(stream)
        self.assertEqual(reader.read_key(), UNDECODABLE_KEY)

    def test_default_for_non_tty(self) -> None:
        from ui.key_reader import StreamKeyReader, default_key_reader

        self.assertIsInstance(default_key_reader(io.StringIO("q")), StreamKeyReader)


@unittest.skipUnless(os.name == "posix", "termios is POSIX only")
class TestPosixKeyReader(unittest.TestCase):
    def _reader(self, stream: _TtyStream):
        from ui.key_reader import PosixKeyReader

        reader = PosixKeyReader(stream)
        fake = _FakeTermios()
        reader._termios = fake
        return reader, fake

    def test_raw_mode_then_restore(self) -> None:
        reader, fake = self._reader(_TtyStream("m"))
        original = fake.tcgetattr(0)

        self.assertEqual(reader.read_key(), "m")

        raw = fake.calls[0]
        self.assertEqual(raw[3] & (fake.ICANON | fake.ECHO), 0)
        self.assertEqual(raw[6][fake.VMIN], 1)
        self.assertEqual(fake.attrs, original)

    def test_restore_when_decoding_fails(self) -> None:
        from ui.key_reader import UNDECODABLE_KEY

        stream = _TtyStream()
        stream._buf = io.TextIOWrapper(io.BytesIO(b"\xfe"), encoding="utf-8", errors="strict")
        reader, fake = self._reader(stream)
        original = fake.tcgetattr(0)

        self.assertEqual(reader.read_key(), UNDECODABLE_KEY)
        self.assertEqual(fake.attrs, original)

    def test_restore_when_read_fails(self) -> None:
        reader, fake = self._reader(_TtyStream(fail=True))
        original = fake.tcgetattr(0)

        with self.assertRaises(OSError):
            reader.read_key()
        self.assertEqual(len(fake.calls), 2)
        self.assertEqual(fake.attrs, original)

    def test_default_for_tty(self) -> None:
        from ui.key_reader import PosixKeyReader, default_key_reader

        self.assertIsInstance(default_key_reader(_TtyStream()), PosixKeyReader)


if __name__ == "__main__":
    unittest.main()
