"""vosa: substitutable OS abstraction with an in-memory virtual OS."""

from .base import FileInfo, OperatingSystem
from .config import OSConfig, RealOSConfig, VirtualOSConfig, connect_os
from .context import create_os, default_os, get_current_os, patch, patch_virtual
from .errors import (
    ErrorKind,
    ExistsError,
    NotDirectoryError,
    NotEmptyError,
    NotExistError,
    NotFileError,
    OperationFailedError,
    PathError,
    is_exist,
    is_not_exist,
    kind_of,
)
from .exit import ExitRequest, ExitStatus, catch_exit
from .handles import DirectoryHandle, FileHandle
from .real import RealOS
from .stdio import Stdio, StreamBuffer
from .virtual import VirtualFS, VirtualOS

__all__ = [
    "catch_exit",
    "connect_os",
    "create_os",
    "default_os",
    "DirectoryHandle",
    "ErrorKind",
    "ExistsError",
    "ExitRequest",
    "ExitStatus",
    "FileHandle",
    "FileInfo",
    "get_current_os",
    "is_exist",
    "is_not_exist",
    "kind_of",
    "NotDirectoryError",
    "NotEmptyError",
    "NotExistError",
    "NotFileError",
    "OperatingSystem",
    "OperationFailedError",
    "OSConfig",
    "patch",
    "patch_virtual",
    "PathError",
    "RealOS",
    "RealOSConfig",
    "Stdio",
    "StreamBuffer",
    "VirtualFS",
    "VirtualOS",
    "VirtualOSConfig",
]
