"""Read handles returned by open().

A handle is a snapshot: it copies the file's bytes (or the directory's
listing) when it is opened, so later changes to the filesystem never show
through an already open handle.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TypeVar

from .base import FileInfo
from .errors import NotFileError

_H = TypeVar("_H", bound="Handle")


class Handle(ABC):
    """Common state of file and directory handles.

    A handle starts open and can be closed exactly once.

    Attributes:
        name: Base name of the opened entry.
    """

    def __init__(self, name: str):
        self.name = name
        self._closed = False

    @abstractmethod
    def stat(self) -> FileInfo:
        """Describe the snapshot (valid whether open or closed)."""

    def close(self) -> None:
        """Close the handle.

        Raises:
            ValueError: If the handle is already closed.
        """
        self._check_open()
        self._closed = True

    @property
    def closed(self) -> bool:
        """Return True if the handle is closed."""
        return self._closed

    def _check_open(self) -> None:
        if self._closed:
            raise ValueError(f"I/O operation on closed file: {self.name}")

    def __enter__(self: _H) -> _H:
        return self

    def __exit__(self, *args: object) -> None:
        if not self._closed:
            self.close()


class FileHandle(Handle):
    """Sequential reader over a snapshot of a file's bytes."""

    def __init__(self, name: str, data: bytes):
        super().__init__(name)
        self._data = data
        self._pos = 0

    def stat(self) -> FileInfo:
        return FileInfo(self.name, is_dir=False, size=len(self._data))

    def readinto(self, buffer: bytearray | memoryview) -> int:
        """Copy unread bytes into buffer.

        Args:
            buffer: Writable bytes-like object.

        Returns:
            Number of bytes copied, or 0 once all data has been read.

        Raises:
            ValueError: If the handle is closed.
        """
        self._check_open()
        chunk = self._data[self._pos : self._pos + len(buffer)]
        n = len(chunk)
        buffer[:n] = chunk
        self._pos += n
        return n

    def read(self, size: int = -1) -> bytes:
        """Read up to size bytes (all remaining if size < 0).

        Returns ``b""`` once all data has been read.
        """
        self._check_open()
        end = len(self._data) if size < 0 else self._pos + size
        chunk = self._data[self._pos : end]
        self._pos += len(chunk)
        return chunk


class DirectoryHandle(Handle):
    """Paginated reader over a snapshot of a directory listing."""

    def __init__(self, name: str, entries: list[FileInfo]):
        super().__init__(name)
        self._entries = list(entries)
        self._pos = 0

    def stat(self) -> FileInfo:
        return FileInfo(self.name, is_dir=True, size=0)

    def readdir(self, n: int = -1) -> list[FileInfo]:
        """Read the next entries of the listing, in name order.

        Args:
            n: Maximum number of entries. ``n <= 0`` returns everything
                that has not been read yet (possibly nothing).

        Returns:
            The next entries.

        Raises:
            EOFError: If ``n > 0`` and the listing is exhausted.
            ValueError: If the handle is closed.
        """
        self._check_open()
        remaining = self._entries[self._pos :]
        if n > 0:
            if not remaining:
                raise EOFError(f"no more entries in {self.name}")
            remaining = remaining[:n]
        self._pos += len(remaining)
        return remaining

    def readinto(self, buffer: bytearray | memoryview) -> int:
        """Directories cannot be read as bytes."""
        self._check_open()
        raise NotFileError("read", self.name)

    def read(self, size: int = -1) -> bytes:
        """Directories cannot be read as bytes."""
        self._check_open()
        raise NotFileError("read", self.name)
