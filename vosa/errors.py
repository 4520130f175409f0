"""Error kinds shared by every OS implementation.

Failures are reported as ``OSError`` subclasses so that ordinary
``except FileNotFoundError:`` handlers keep working. Each virtual error
additionally records the operation and path that caused it, and can be
classified generically with ``kind_of()``, ``is_exist()`` and
``is_not_exist()`` regardless of which implementation raised it.
"""

from __future__ import annotations

import errno
from enum import Enum


class ErrorKind(Enum):
    """Category of a filesystem failure, independent of its message."""

    EXISTS = (errno.EEXIST, "file already exists")
    NOT_EXIST = (errno.ENOENT, "file does not exist")
    NOT_DIRECTORY = (errno.ENOTDIR, "not a directory")
    NOT_FILE = (errno.EISDIR, "not a file")
    NOT_EMPTY = (errno.ENOTEMPTY, "directory not empty")
    OPERATION_FAILED = (errno.EIO, "operation failed")

    @property
    def errno(self) -> int:
        return self.value[0]

    @property
    def message(self) -> str:
        return self.value[1]


class EntryError(Exception):
    """Raised by the entry model; carries only the kind.

    The filesystem engine rewraps it into a ``PathError`` that also names
    the operation and path.
    """

    def __init__(self, kind: ErrorKind):
        super().__init__(kind.message)
        self.kind = kind


class PathError(OSError):
    """An error tagged with the operation and path that caused it.

    Attributes:
        op: Operation name (e.g. "mkdir", "open").
        filename: The offending path.
        kind: The ErrorKind of this failure.
    """

    kind: ErrorKind = ErrorKind.OPERATION_FAILED

    def __init__(self, op: str, path: str):
        super().__init__(self.kind.errno, self.kind.message, path)
        self.op = op

    def __str__(self) -> str:
        return f"{self.op} {self.filename}: {self.strerror}"


class ExistsError(PathError, FileExistsError):
    kind = ErrorKind.EXISTS


class NotExistError(PathError, FileNotFoundError):
    kind = ErrorKind.NOT_EXIST


class NotDirectoryError(PathError, NotADirectoryError):
    kind = ErrorKind.NOT_DIRECTORY


class NotFileError(PathError, IsADirectoryError):
    kind = ErrorKind.NOT_FILE


class NotEmptyError(PathError):
    kind = ErrorKind.NOT_EMPTY


class OperationFailedError(PathError):
    kind = ErrorKind.OPERATION_FAILED


_ERRORS: dict[ErrorKind, type[PathError]] = {
    cls.kind: cls
    for cls in (
        ExistsError,
        NotExistError,
        NotDirectoryError,
        NotFileError,
        NotEmptyError,
        OperationFailedError,
    )
}

# Host errors carry no kind; classify them by errno.
_ERRNO_KINDS: dict[int, ErrorKind] = {kind.errno: kind for kind in ErrorKind}


def path_error(kind: ErrorKind, op: str, path: str) -> PathError:
    """Build the PathError subclass for ``kind``."""
    return _ERRORS[kind](op, path)


def kind_of(err: BaseException | None) -> ErrorKind | None:
    """Classify an error raised by any OS implementation.

    Args:
        err: Exception to inspect (may be None).

    Returns:
        The matching ErrorKind, or None if the error is not a known
        filesystem failure.
    """
    if isinstance(err, (PathError, EntryError)):
        return err.kind
    if isinstance(err, OSError) and err.errno is not None:
        return _ERRNO_KINDS.get(err.errno)
    return None


def is_exist(err: BaseException | None) -> bool:
    """Report whether ``err`` means a file or directory already exists."""
    return kind_of(err) is ErrorKind.EXISTS


def is_not_exist(err: BaseException | None) -> bool:
    """Report whether ``err`` means a file or directory does not exist."""
    return kind_of(err) is ErrorKind.NOT_EXIST
