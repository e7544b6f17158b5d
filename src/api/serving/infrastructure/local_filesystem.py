"""Local disk implementation of the filesystem port.

Blocking stat and read calls run in anyio's worker threads, so a slow
disk only delays the request that is waiting on it.
"""

from __future__ import annotations

from pathlib import Path

import anyio


class LocalFileSystem:
    """IFileSystem backed by the local disk.

    Every OSError is folded into "absent" or "unreadable". ValueError is
    caught as well because paths containing NUL bytes are rejected by the
    OS layer before any system call is made.
    """

    async def exists(self, path: Path) -> bool:
        try:
            return await anyio.Path(path).exists()
        except (OSError, ValueError):
            return False

    async def is_dir(self, path: Path) -> bool:
        try:
            return await anyio.Path(path).is_dir()
        except (OSError, ValueError):
            return False

    async def read_bytes(self, path: Path) -> bytes | None:
        try:
            return await anyio.Path(path).read_bytes()
        except (OSError, ValueError):
            return None
