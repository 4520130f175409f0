"""Absolute path handling for the virtual filesystem."""

from __future__ import annotations

import posixpath

SEPARATOR = "/"


def split_path(path: str) -> list[str]:
    """Split an absolute path into its components.

    ``.``, ``..``, repeated and trailing separators are collapsed first.
    The root marker is not part of the result, so ``"/"`` yields ``[]``.

    Args:
        path: Absolute path.

    Returns:
        Path components from the root down.

    Raises:
        ValueError: If path is not absolute. Callers are expected to pass
            absolute paths only; this is never reported as an OS error.
    """
    if not path.startswith(SEPARATOR):
        raise ValueError(f"unexpected relative path: {path!r}")
    # normpath keeps a leading "//" (POSIX allows it); the tree has one root.
    cleaned = posixpath.normpath(path).lstrip(SEPARATOR)
    if not cleaned:
        return []
    return cleaned.split(SEPARATOR)


def basename(path: str) -> str:
    """Return the last component of an absolute path ("/" for the root)."""
    parts = split_path(path)
    return parts[-1] if parts else SEPARATOR


def join(*parts: str) -> str:
    """Join path segments with the separator and normalize the result."""
    return posixpath.normpath(posixpath.join(*parts))
