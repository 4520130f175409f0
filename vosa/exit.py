"""Exit requests for the virtual OS.

``VirtualOS.exit()`` must not end the test process, so it raises
``ExitRequest`` instead. Top-level code (or a test) handles it once with
``catch_exit()``.
"""

from __future__ import annotations

from contextlib import contextmanager
from dataclasses import dataclass
from typing import Iterator


class ExitRequest(Exception):
    """Raised by VirtualOS.exit() carrying the requested status code."""

    def __init__(self, code: int):
        super().__init__(f"exit status {code}")
        self.code = code


@dataclass
class ExitStatus:
    """Outcome of a catch_exit() block.

    Attributes:
        code: The requested exit code, or None if exit was not called.
    """

    code: int | None = None

    @property
    def exited(self) -> bool:
        return self.code is not None


@contextmanager
def catch_exit() -> Iterator[ExitStatus]:
    """Capture an ExitRequest raised inside the block.

    Other exceptions propagate unchanged.

    Example::

        with catch_exit() as status:
            main(vos)
        assert status.code == 2
    """
    status = ExitStatus()
    try:
        yield status
    except ExitRequest as request:
        status.code = request.code
