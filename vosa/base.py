"""OS facade interface and shared descriptors.

Defines the common interface for OS implementations (VirtualOS, RealOS).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, BinaryIO, Protocol, runtime_checkable

if TYPE_CHECKING:
    from .handles import DirectoryHandle, FileHandle


@dataclass(frozen=True)
class FileInfo:
    """Description of a single file or directory.

    Returned by stat(), by directory listings and by handle stat().

    Attributes:
        name: Base name of the entry ("/" for the root).
        is_dir: True if this is a directory, False for files.
        size: File size in bytes (0 for directories).
    """

    name: str
    is_dir: bool = False
    size: int = 0


@runtime_checkable
class OperatingSystem(Protocol):
    """Capability set shared by the real and the virtual OS.

    Code that takes an ``OperatingSystem`` instead of calling ``os``
    directly can be handed a ``VirtualOS`` in tests.
    """

    def stat(self, path: str) -> FileInfo:
        """Describe the named file or directory."""
        ...

    def mkdir(self, path: str, perm: int = 0o777) -> None:
        """Create a directory."""
        ...

    def mkdir_all(self, path: str, perm: int = 0o777) -> None:
        """Create a directory along with any missing parents."""
        ...

    def mkdir_temp(self, dir: str = "", pattern: str = "") -> str:
        """Create a new uniquely named directory and return its path."""
        ...

    def read_dir(self, path: str) -> list[FileInfo]:
        """List a directory, sorted by name."""
        ...

    def write_file(self, path: str, data: bytes, perm: int = 0o666) -> None:
        """Write data to the named file, creating it if necessary."""
        ...

    def read_file(self, path: str) -> bytes:
        """Read the named file."""
        ...

    def rename(self, old: str, new: str) -> None:
        """Rename (move) old to new."""
        ...

    def remove(self, path: str) -> None:
        """Remove a file or an empty directory."""
        ...

    def remove_all(self, path: str) -> None:
        """Remove path and any children it contains."""
        ...

    def open(self, path: str) -> FileHandle | DirectoryHandle:
        """Open a file or directory for reading."""
        ...

    def getwd(self) -> str:
        """Return the current working directory."""
        ...

    def user_cache_dir(self) -> str:
        """Return the default directory for cached data."""
        ...

    def user_config_dir(self) -> str:
        """Return the default directory for configuration data."""
        ...

    def user_home_dir(self) -> str:
        """Return the current user's home directory."""
        ...

    def is_exist(self, err: BaseException | None) -> bool:
        """Report whether err means a path already exists."""
        ...

    def is_not_exist(self, err: BaseException | None) -> bool:
        """Report whether err means a path does not exist."""
        ...

    def path_separator(self) -> str:
        """Return the directory separator."""
        ...

    def is_path_separator(self, c: str) -> bool:
        """Report whether c is a directory separator."""
        ...

    def exit(self, code: int) -> None:
        """Terminate (or request termination) with the given status."""
        ...

    @property
    def stdin(self) -> BinaryIO:
        ...

    @property
    def stdout(self) -> BinaryIO:
        ...

    @property
    def stderr(self) -> BinaryIO:
        ...
