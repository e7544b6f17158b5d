"""Filesystem port for the Serving bounded context.

The pipeline reads all of its state from the filesystem at request time.
This protocol is the only way the application layer touches the disk, so
tests and alternative backends can substitute it.
"""

from __future__ import annotations

from pathlib import Path
from typing import Protocol


class IFileSystem(Protocol):
    """Non-blocking filesystem primitives.

    Implementations must never raise for I/O problems: a path that cannot
    be inspected is reported as absent, and a file that cannot be read is
    reported as None. Not-found and permission-denied are indistinguishable.
    """

    async def exists(self, path: Path) -> bool:
        """Return True if `path` exists (following symlinks)."""
        ...

    async def is_dir(self, path: Path) -> bool:
        """Return True if `path` is an existing directory."""
        ...

    async def read_bytes(self, path: Path) -> bytes | None:
        """Return the full contents of `path`, or None if it cannot be read."""
        ...
