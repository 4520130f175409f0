"""Context-local selection of the active OS implementation.

Code should normally receive an ``OperatingSystem`` explicitly. For code
that looks it up instead, ``get_current_os()`` returns the implementation
active in the current context (the host ``RealOS`` unless swapped), and
``patch()`` swaps it for the duration of a ``with`` block.
"""

from __future__ import annotations

import contextvars
import logging
from contextlib import contextmanager
from typing import Any, Iterator

from .config import OSConfig, RealOSConfig, VirtualOSConfig
from .real import RealOS
from .virtual import VirtualOS

logger = logging.getLogger(__name__)

# Context variable holding the swapped-in OS (None means the default)
current_os: contextvars.ContextVar[Any] = contextvars.ContextVar(
    "vosa_current_os", default=None
)

_default_os = RealOS()


def default_os() -> RealOS:
    """Return the process-wide host OS used when nothing is swapped in."""
    return _default_os


def get_current_os() -> Any:
    """Get the OS for the current context.

    Returns:
        The swapped-in OperatingSystem, or the host RealOS.
    """
    swapped = current_os.get()
    return swapped if swapped is not None else _default_os


@contextmanager
def patch(os_: Any) -> Iterator[Any]:
    """Make ``os_`` the current OS inside the block.

    The previous OS is restored on every exit path, including exceptions.
    Nested blocks restore in reverse order. Each thread and asyncio task
    has its own context, so a swap in one does not leak into another.

    Args:
        os_: Any OperatingSystem implementation.

    Yields:
        ``os_``.

    Example:
        >>> with patch(VirtualOS()) as vos:
        ...     get_current_os().write_file("/home/a.txt", b"x")
    """
    token = current_os.set(os_)
    logger.debug("switched to %s", type(os_).__name__)
    try:
        yield os_
    finally:
        current_os.reset(token)
        logger.debug("restored %s", type(get_current_os()).__name__)


@contextmanager
def patch_virtual(config: VirtualOSConfig | None = None) -> Iterator[VirtualOS]:
    """Swap in a fresh VirtualOS for the duration of the block.

    Yields:
        The new VirtualOS.
    """
    with patch(VirtualOS(config)) as vos:
        yield vos


def create_os(config: OSConfig) -> Any:
    """Build the OS implementation described by ``config``.

    Raises:
        ValueError: If the config type is unknown.
    """
    if isinstance(config, VirtualOSConfig):
        return VirtualOS(config)
    if isinstance(config, RealOSConfig):
        return _default_os
    raise ValueError(f"Unsupported os config: {config!r}")
