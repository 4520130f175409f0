"""Tree nodes of the virtual filesystem.

An entry is either a ``Directory`` or a ``File``. Directories own their
children by name; files own an immutable byte string that is replaced
wholesale when the file is overwritten.
"""

from __future__ import annotations

from .base import FileInfo
from .errors import EntryError, ErrorKind
from .handles import DirectoryHandle, FileHandle


class File:
    """A regular file holding bytes."""

    is_dir = False

    def __init__(self, data: bytes = b""):
        self.data = bytes(data)

    @property
    def size(self) -> int:
        return len(self.data)

    @property
    def is_empty(self) -> bool:
        return not self.data

    def open(self, name: str) -> FileHandle:
        return FileHandle(name, self.data)

    def __repr__(self) -> str:
        return f"File(size={self.size})"


class Directory:
    """A directory mapping child names to entries."""

    is_dir = True

    def __init__(self) -> None:
        self.children: dict[str, Entry] = {}

    @property
    def size(self) -> int:
        return 0

    @property
    def is_empty(self) -> bool:
        return not self.children

    def open(self, name: str) -> DirectoryHandle:
        return DirectoryHandle(name, self.list_sorted())

    def has(self, name: str) -> bool:
        return name in self.children

    def get(self, name: str) -> Entry:
        """Return the named child.

        Raises:
            EntryError: NOT_EXIST if there is no such child.
        """
        try:
            return self.children[name]
        except KeyError:
            raise EntryError(ErrorKind.NOT_EXIST) from None

    def add(self, name: str, entry: Entry) -> None:
        """Add a new child.

        Raises:
            EntryError: EXISTS if the name is taken.
        """
        if name in self.children:
            raise EntryError(ErrorKind.EXISTS)
        self.children[name] = entry

    def update(self, name: str, entry: Entry) -> None:
        """Insert or replace a child.

        A file may always be replaced by a file. A directory may only be
        replaced by another directory, and only while it is empty.

        Raises:
            EntryError: NOT_DIRECTORY / NOT_FILE if the kinds differ,
                NOT_EMPTY if a non-empty directory would be replaced.
        """
        existing = self.children.get(name)
        if existing is not None:
            if entry.is_dir != existing.is_dir:
                if entry.is_dir:
                    raise EntryError(ErrorKind.NOT_DIRECTORY)
                raise EntryError(ErrorKind.NOT_FILE)
            if existing.is_dir and not existing.is_empty:
                raise EntryError(ErrorKind.NOT_EMPTY)
        self.children[name] = entry

    def delete(self, name: str) -> None:
        self.children.pop(name, None)

    def list_sorted(self) -> list[FileInfo]:
        """List children in lexicographic name order."""
        return [
            FileInfo(name, is_dir=entry.is_dir, size=entry.size)
            for name, entry in sorted(self.children.items())
        ]

    def __repr__(self) -> str:
        return f"Directory({sorted(self.children)!r})"


Entry = Directory | File
