"""In-memory virtual OS implementation.

Provides VirtualFS, a filesystem engine over a tree of Directory/File
entries, and VirtualOS, which adds in-memory standard streams and a
non-fatal exit. Nothing here touches the host filesystem.
"""

from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Iterator

from . import paths
from .base import FileInfo
from .config import VirtualOSConfig
from .entries import Directory, Entry, File
from .errors import (
    EntryError,
    ErrorKind,
    ExistsError,
    is_exist,
    is_not_exist,
    path_error,
)
from .exit import ExitRequest
from .handles import DirectoryHandle, FileHandle
from .stdio import Stdio, StreamBuffer

logger = logging.getLogger(__name__)


@contextmanager
def _op(op: str, path: str) -> Iterator[None]:
    """Turn entry-model failures into PathErrors naming op and path."""
    try:
        yield
    except EntryError as e:
        raise path_error(e.kind, op, path) from None


class VirtualFS:
    """Filesystem engine backed by an in-memory tree.

    Every path must be absolute; a relative path raises ValueError. Failed
    operations raise ``PathError`` subclasses (which are also the matching
    builtin ``OSError`` subclasses) and leave the tree untouched.

    Example:
        >>> vfs = VirtualFS()
        >>> vfs.mkdir_all("/home/foo")
        >>> vfs.write_file("/home/foo/bar.txt", b"hi")
        >>> vfs.read_file("/home/foo/bar.txt")
        b'hi'
        >>> [info.name for info in vfs.read_dir("/home/foo")]
        ['bar.txt']
    """

    def __init__(self, config: VirtualOSConfig | None = None):
        """Create the root and the well-known directories.

        Args:
            config: Well-known paths and limits. Defaults to
                VirtualOSConfig().
        """
        config = config if config is not None else VirtualOSConfig()
        self._root = Directory()
        self._temp_suffix_limit = config.temp_suffix_limit

        self._temp = paths.join(config.temp_dir)
        self._home = paths.join(config.home_dir)
        self._cache = paths.join(self._home, config.cache_dir_name)
        self._config = paths.join(self._home, config.config_dir_name)
        for path in (self._temp, self._home, self._cache, self._config):
            self.mkdir_all(path, 0o700)

        self._cwd = self._home

    # -------------------------------------------------------------------------
    # Tree walking
    # -------------------------------------------------------------------------

    def _walk(self, parts: list[str]) -> Entry:
        entry: Entry = self._root
        for name in parts:
            if not isinstance(entry, Directory):
                raise EntryError(ErrorKind.NOT_DIRECTORY)
            entry = entry.get(name)
        return entry

    def _walk_dir(self, parts: list[str]) -> Directory:
        entry = self._walk(parts)
        if not isinstance(entry, Directory):
            raise EntryError(ErrorKind.NOT_DIRECTORY)
        return entry

    # -------------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------------

    def stat(self, path: str) -> FileInfo:
        """Describe a file or directory.

        Raises:
            NotExistError: If the path does not resolve.
            NotDirectoryError: If a file sits where a directory is expected.
        """
        with _op("stat", path):
            entry = self._walk(paths.split_path(path))
        return FileInfo(paths.basename(path), is_dir=entry.is_dir, size=entry.size)

    def exists(self, path: str) -> bool:
        try:
            self._walk(paths.split_path(path))
        except EntryError:
            return False
        return True

    def isdir(self, path: str) -> bool:
        try:
            return self._walk(paths.split_path(path)).is_dir
        except EntryError:
            return False

    def isfile(self, path: str) -> bool:
        try:
            return not self._walk(paths.split_path(path)).is_dir
        except EntryError:
            return False

    def read_dir(self, path: str) -> list[FileInfo]:
        """List a directory sorted by name.

        Raises:
            NotExistError: If the directory does not exist.
            NotDirectoryError: If the path is a file.
        """
        with _op("readdir", path):
            directory = self._walk_dir(paths.split_path(path))
        return directory.list_sorted()

    def read_file(self, path: str) -> bytes:
        """Return the contents of a file.

        Raises:
            NotExistError: If the file does not exist.
            NotFileError: If the path is a directory.
        """
        with _op("read", path):
            entry = self._walk(paths.split_path(path))
            if not isinstance(entry, File):
                raise EntryError(ErrorKind.NOT_FILE)
        return entry.data

    def open(self, path: str) -> FileHandle | DirectoryHandle:
        """Open a file or directory for reading.

        The handle holds a snapshot; later changes do not affect it.

        Raises:
            NotExistError: If the path does not resolve.
        """
        with _op("open", path):
            entry = self._walk(paths.split_path(path))
        return entry.open(paths.basename(path))

    # -------------------------------------------------------------------------
    # Mutations
    # -------------------------------------------------------------------------

    def mkdir(self, path: str, perm: int = 0o777) -> None:
        """Create a directory. ``perm`` is accepted and ignored.

        Raises:
            ExistsError: If the name is already taken.
            NotExistError: If the parent does not exist.
            NotDirectoryError: If the parent is a file.
        """
        parts = paths.split_path(path)
        with _op("mkdir", path):
            if not parts:
                raise EntryError(ErrorKind.EXISTS)
            parent = self._walk_dir(parts[:-1])
            parent.add(parts[-1], Directory())
        logger.debug("mkdir %s", path)

    def mkdir_all(self, path: str, perm: int = 0o777) -> None:
        """Create a directory and any missing parents.

        Succeeds silently if the whole path already exists as directories.
        New directories are only created past the last existing component,
        so a blocking file is found before anything is created.

        Raises:
            NotDirectoryError: If a file blocks the path.
        """
        directory = self._root
        created = False
        with _op("mkdir", path):
            for name in paths.split_path(path):
                if directory.has(name):
                    child = directory.get(name)
                    if not isinstance(child, Directory):
                        raise EntryError(ErrorKind.NOT_DIRECTORY)
                else:
                    child = Directory()
                    directory.add(name, child)
                    created = True
                directory = child
        if created:
            logger.debug("mkdir -p %s", path)

    def mkdir_temp(self, dir: str = "", pattern: str = "") -> str:
        """Create a new directory with a unique name.

        Names are ``pattern`` followed by 1, 2, 3, ... (or, if the pattern
        contains ``*``, the last ``*`` replaced by the number) and the first
        unused one is created. Uniqueness holds within this instance.

        Args:
            dir: Parent directory. Defaults to the temp root.
            pattern: Name prefix, optionally with a ``*`` placeholder.

        Returns:
            Absolute path of the new directory.

        Raises:
            OperationFailedError: If the pattern contains a separator or
                no free name is found below the configured suffix limit.
            NotExistError: If dir does not exist.
        """
        if not dir:
            dir = self._temp
        if paths.SEPARATOR in pattern:
            raise path_error(ErrorKind.OPERATION_FAILED, "mkdirtemp", pattern)
        prefix, star, suffix = pattern.rpartition("*")
        if not star:
            prefix, suffix = pattern, ""

        for n in range(1, self._temp_suffix_limit + 1):
            path = paths.join(dir, f"{prefix}{n}{suffix}")
            try:
                self.mkdir(path, 0o700)
            except ExistsError:
                continue
            return path
        raise path_error(
            ErrorKind.OPERATION_FAILED, "mkdirtemp", paths.join(dir, pattern)
        )

    def write_file(self, path: str, data: bytes, perm: int = 0o666) -> None:
        """Create or overwrite a file. ``perm`` is accepted and ignored.

        Raises:
            TypeError: If data is not bytes-like.
            NotExistError: If the parent does not exist.
            NotFileError: If a directory occupies the name.
        """
        if not isinstance(data, (bytes, bytearray, memoryview)):
            raise TypeError(f"Expected bytes, got {type(data).__name__}")
        parts = paths.split_path(path)
        with _op("write", path):
            if not parts:
                raise EntryError(ErrorKind.NOT_FILE)
            parent = self._walk_dir(parts[:-1])
            parent.update(parts[-1], File(data))
        logger.debug("write %s", path)

    def rename(self, old: str, new: str) -> None:
        """Move a file or directory.

        The moved entry keeps its identity, so a directory's children move
        with it. An existing file at ``new`` is replaced; an existing
        directory is never replaced. All checks run before the tree is
        changed.

        Raises:
            NotExistError: If old (or new's parent) does not exist.
            ExistsError: If new is an existing directory.
            NotDirectoryError: If a directory would replace a file.
            OperationFailedError: If the root is moved or a directory would
                be moved into itself.
        """
        old_parts = paths.split_path(old)
        new_parts = paths.split_path(new)

        with _op("rename", old):
            if not old_parts:
                raise EntryError(ErrorKind.OPERATION_FAILED)
            old_parent = self._walk_dir(old_parts[:-1])
            entry = old_parent.get(old_parts[-1])

        with _op("rename", new):
            if not new_parts:
                raise EntryError(ErrorKind.EXISTS)
            new_parent = self._walk_dir(new_parts[:-1])
            if new_parent.has(new_parts[-1]) and new_parent.get(new_parts[-1]).is_dir:
                raise EntryError(ErrorKind.EXISTS)
            if new_parts == old_parts:
                return
            if entry.is_dir and new_parts[: len(old_parts)] == old_parts:
                raise EntryError(ErrorKind.OPERATION_FAILED)
            new_parent.update(new_parts[-1], entry)

        old_parent.delete(old_parts[-1])
        logger.debug("rename %s -> %s", old, new)

    def remove(self, path: str) -> None:
        """Remove a file or an empty directory.

        Raises:
            NotExistError: If the path does not exist.
            NotEmptyError: If the directory has children.
            OperationFailedError: If path is the root.
        """
        parts = paths.split_path(path)
        with _op("remove", path):
            if not parts:
                raise EntryError(ErrorKind.OPERATION_FAILED)
            parent = self._walk_dir(parts[:-1])
            entry = parent.get(parts[-1])
            if entry.is_dir and not entry.is_empty:
                raise EntryError(ErrorKind.NOT_EMPTY)
            parent.delete(parts[-1])
        logger.debug("remove %s", path)

    def remove_all(self, path: str) -> None:
        """Remove a path and everything below it.

        A path that does not exist is not an error, even when a file sits
        where one of its parent directories would be.

        Raises:
            OperationFailedError: If path is the root.
        """
        parts = paths.split_path(path)
        with _op("removeall", path):
            if not parts:
                raise EntryError(ErrorKind.OPERATION_FAILED)
            try:
                parent = self._walk_dir(parts[:-1])
            except EntryError:
                return
            if not parent.has(parts[-1]):
                return
            parent.delete(parts[-1])
        logger.debug("remove -r %s", path)

    # -------------------------------------------------------------------------
    # Well-known directories
    # -------------------------------------------------------------------------

    def getwd(self) -> str:
        return self._cwd

    def temp_dir(self) -> str:
        return self._temp

    def user_cache_dir(self) -> str:
        return self._cache

    def user_config_dir(self) -> str:
        return self._config

    def user_home_dir(self) -> str:
        return self._home

    # -------------------------------------------------------------------------
    # Error and path helpers
    # -------------------------------------------------------------------------

    def is_exist(self, err: BaseException | None) -> bool:
        return is_exist(err)

    def is_not_exist(self, err: BaseException | None) -> bool:
        return is_not_exist(err)

    def path_separator(self) -> str:
        return paths.SEPARATOR

    def is_path_separator(self, c: str) -> bool:
        return c == paths.SEPARATOR


class VirtualOS(VirtualFS):
    """Virtual filesystem plus in-memory stdio and a catchable exit.

    Example:
        >>> vos = VirtualOS()
        >>> vos.stdout.write(b"hello\\n")
        6
        >>> vos.stdout.read()
        b'hello\\n'
    """

    def __init__(self, config: VirtualOSConfig | None = None):
        super().__init__(config)
        self._stdio = Stdio()

    @property
    def stdin(self) -> StreamBuffer:
        return self._stdio.stdin

    @property
    def stdout(self) -> StreamBuffer:
        return self._stdio.stdout

    @property
    def stderr(self) -> StreamBuffer:
        return self._stdio.stderr

    def stdio(self) -> tuple[StreamBuffer, StreamBuffer, StreamBuffer]:
        """Return (stdin, stdout, stderr) for feeding and inspection."""
        return self._stdio.streams()

    def clear_stdio(self) -> None:
        """Empty all three streams. The filesystem is not affected."""
        self._stdio.clear()

    def exit(self, code: int) -> None:
        """Request exit by raising ExitRequest (see vosa.exit.catch_exit)."""
        logger.debug("exit %d requested", code)
        raise ExitRequest(code)

    def make_temp_dir(self) -> str:
        """Create a fresh directory under the temp root and return it."""
        return self.mkdir_temp("", "")
