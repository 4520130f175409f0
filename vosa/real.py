"""Host OS implementation.

Forwards every facade call to the host ``os``/``shutil``/``tempfile``
functions. Results are converted to the same FileInfo and handle types the
virtual OS returns, and host errors keep their builtin ``OSError`` types,
so ``vosa.errors.kind_of()`` classifies them the same way.
"""

from __future__ import annotations

import errno
import logging
import os
import shutil
import stat as stat_mod
import sys
import tempfile
from pathlib import Path
from typing import BinaryIO

import platformdirs

from .base import FileInfo
from .errors import ErrorKind, is_exist, is_not_exist, path_error
from .handles import DirectoryHandle, FileHandle

logger = logging.getLogger(__name__)


def _basename(path: str) -> str:
    return os.path.basename(os.path.normpath(path)) or os.sep


class RealOS:
    """OperatingSystem backed by the host.

    Stateless, so it is safe to share between threads. Relative paths are
    resolved against the process working directory as usual.
    """

    def stat(self, path: str) -> FileInfo:
        st = os.stat(path)
        is_dir = stat_mod.S_ISDIR(st.st_mode)
        return FileInfo(_basename(path), is_dir=is_dir, size=0 if is_dir else st.st_size)

    def mkdir(self, path: str, perm: int = 0o777) -> None:
        os.mkdir(path, perm)
        logger.debug("mkdir %s", path)

    def mkdir_all(self, path: str, perm: int = 0o777) -> None:
        os.makedirs(path, perm, exist_ok=True)
        logger.debug("mkdir -p %s", path)

    def mkdir_temp(self, dir: str = "", pattern: str = "") -> str:
        """Create a unique directory via tempfile.mkdtemp.

        A ``*`` in the pattern marks where the random part goes; otherwise
        it is appended.
        """
        if os.sep in pattern:
            raise path_error(ErrorKind.OPERATION_FAILED, "mkdirtemp", pattern)
        prefix, star, suffix = pattern.rpartition("*")
        if not star:
            prefix, suffix = pattern, ""
        path = tempfile.mkdtemp(suffix=suffix, prefix=prefix, dir=dir or None)
        logger.debug("mkdirtemp %s", path)
        return path

    def read_dir(self, path: str) -> list[FileInfo]:
        infos = []
        with os.scandir(path) as entries:
            for entry in entries:
                is_dir = entry.is_dir()
                size = 0 if is_dir else entry.stat().st_size
                infos.append(FileInfo(entry.name, is_dir=is_dir, size=size))
        return sorted(infos, key=lambda info: info.name)

    def write_file(self, path: str, data: bytes, perm: int = 0o666) -> None:
        if not isinstance(data, (bytes, bytearray, memoryview)):
            raise TypeError(f"Expected bytes, got {type(data).__name__}")
        fd = os.open(path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, perm)
        with os.fdopen(fd, "wb") as f:
            f.write(data)
        logger.debug("write %s", path)

    def read_file(self, path: str) -> bytes:
        with open(path, "rb") as f:
            return f.read()

    def rename(self, old: str, new: str) -> None:
        """Rename old to new, refusing to replace an existing directory."""
        if os.path.isdir(new):
            raise FileExistsError(errno.EEXIST, os.strerror(errno.EEXIST), new)
        os.rename(old, new)
        logger.debug("rename %s -> %s", old, new)

    def remove(self, path: str) -> None:
        """Remove a file or an empty directory."""
        if os.path.isdir(path) and not os.path.islink(path):
            os.rmdir(path)
        else:
            os.remove(path)
        logger.debug("remove %s", path)

    def remove_all(self, path: str) -> None:
        if not os.path.lexists(path):
            return
        if os.path.isdir(path) and not os.path.islink(path):
            shutil.rmtree(path)
        else:
            os.remove(path)
        logger.debug("remove -r %s", path)

    def open(self, path: str) -> FileHandle | DirectoryHandle:
        """Open path and snapshot its content or listing."""
        if self.stat(path).is_dir:
            return DirectoryHandle(_basename(path), self.read_dir(path))
        return FileHandle(_basename(path), self.read_file(path))

    def getwd(self) -> str:
        return os.getcwd()

    def user_cache_dir(self) -> str:
        return platformdirs.user_cache_dir()

    def user_config_dir(self) -> str:
        return platformdirs.user_config_dir()

    def user_home_dir(self) -> str:
        return str(Path.home())

    def is_exist(self, err: BaseException | None) -> bool:
        return is_exist(err)

    def is_not_exist(self, err: BaseException | None) -> bool:
        return is_not_exist(err)

    def path_separator(self) -> str:
        return os.sep

    def is_path_separator(self, c: str) -> bool:
        return c == os.sep or (os.altsep is not None and c == os.altsep)

    def exit(self, code: int) -> None:
        sys.exit(code)

    @property
    def stdin(self) -> BinaryIO:
        return sys.stdin.buffer

    @property
    def stdout(self) -> BinaryIO:
        return sys.stdout.buffer

    @property
    def stderr(self) -> BinaryIO:
        return sys.stderr.buffer
