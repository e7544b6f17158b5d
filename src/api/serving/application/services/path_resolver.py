"""Request path to filesystem path resolution."""

from __future__ import annotations

from pathlib import Path

from serving.domain.value_objects import INDEX_FILE
from serving.ports.filesystem import IFileSystem

URL_SEPARATOR = "/"


class PathResolver:
    """Maps a tenant and URL path onto a file below the web root.

    `..` segments are passed through to the path join untouched; the
    resolved path is not checked to stay below the tenant directory.
    """

    def __init__(self, web_root: Path, file_system: IFileSystem):
        self._web_root = web_root
        self._file_system = file_system

    async def resolve(self, tenant_id: str, request_path: str) -> Path:
        """Build the path to serve for `request_path`.

        Args:
            tenant_id: Directory name of the tenant under the web root.
            request_path: URL path without query string, e.g. `/docs/`.

        Returns:
            The candidate file path. It is not guaranteed to exist.
        """
        # A leading separator would make the join discard the tenant root
        relative = request_path.lstrip(URL_SEPARATOR)
        file_path = self._web_root / tenant_id / relative

        if await self._file_system.is_dir(file_path):
            return file_path / INDEX_FILE
        if request_path.endswith(URL_SEPARATOR):
            return file_path / INDEX_FILE
        return file_path
