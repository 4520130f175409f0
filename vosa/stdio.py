"""In-memory standard streams."""

from __future__ import annotations

import io


class StreamBuffer(io.RawIOBase):
    """FIFO byte buffer usable as either end of a stream.

    Writes append to the back, reads consume from the front, so a test can
    feed a program's stdin or collect what it printed to stdout.
    """

    def __init__(self) -> None:
        super().__init__()
        self._data = bytearray()

    def readable(self) -> bool:
        return True

    def writable(self) -> bool:
        return True

    def readinto(self, buffer: bytearray | memoryview) -> int:
        n = min(len(buffer), len(self._data))
        buffer[:n] = self._data[:n]
        del self._data[:n]
        return n

    def write(self, data: bytes | bytearray | memoryview) -> int:
        self._data += data
        return len(data)

    def getvalue(self) -> bytes:
        """Return unread content without consuming it."""
        return bytes(self._data)

    def clear(self) -> None:
        """Drop all unread content."""
        self._data.clear()


class Stdio:
    """Stdin, stdout and stderr of a virtual OS."""

    def __init__(self) -> None:
        self._stdin = StreamBuffer()
        self._stdout = StreamBuffer()
        self._stderr = StreamBuffer()

    @property
    def stdin(self) -> StreamBuffer:
        return self._stdin

    @property
    def stdout(self) -> StreamBuffer:
        return self._stdout

    @property
    def stderr(self) -> StreamBuffer:
        return self._stderr

    def streams(self) -> tuple[StreamBuffer, StreamBuffer, StreamBuffer]:
        """Return (stdin, stdout, stderr)."""
        return self._stdin, self._stdout, self._stderr

    def clear(self) -> None:
        """Empty all three streams."""
        for stream in self.streams():
            stream.clear()
