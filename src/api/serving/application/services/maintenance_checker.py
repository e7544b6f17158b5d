"""Maintenance mode detection.

Maintenance is switched on by dropping a `.maintenance` file either at the
web root (every tenant) or inside a tenant directory (that tenant only).
The page served while in maintenance is looked up independently of which
marker triggered it.
"""

from __future__ import annotations

from pathlib import Path

from serving.domain.value_objects import (
    DEFAULT_MAINTENANCE_HTML,
    MAINTENANCE_MARKER,
    MAINTENANCE_PAGE,
    MaintenanceMode,
    MaintenancePage,
    MaintenancePageSource,
)
from serving.ports.filesystem import IFileSystem


class MaintenanceChecker:
    """Decides whether a tenant is in maintenance and what page to show."""

    def __init__(self, web_root: Path, file_system: IFileSystem):
        """Initialize the checker.

        Args:
            web_root: Base directory holding the tenant directories.
            file_system: Filesystem port used for every probe.
        """
        self._web_root = web_root
        self._file_system = file_system

    async def detect_mode(self, tenant_id: str) -> MaintenanceMode:
        """Return which marker, if any, is present.

        The global marker is checked first; when it exists the tenant
        marker is never looked at.
        """
        if await self._file_system.exists(self._web_root / MAINTENANCE_MARKER):
            return MaintenanceMode.GLOBAL
        if await self._file_system.exists(
            self._web_root / tenant_id / MAINTENANCE_MARKER
        ):
            return MaintenanceMode.TENANT
        return MaintenanceMode.NONE

    async def load_page(self, tenant_id: str) -> tuple[bytes, MaintenancePageSource]:
        """Load the maintenance body, preferring the tenant's own page.

        Order: `{tenant}/maintenance.html`, `maintenance.html` at the web
        root, then the built-in page.
        """
        candidates = (
            (
                self._web_root / tenant_id / MAINTENANCE_PAGE,
                MaintenancePageSource.TENANT,
            ),
            (
                self._web_root / MAINTENANCE_PAGE,
                MaintenancePageSource.GLOBAL,
            ),
        )
        for path, source in candidates:
            body = await self._file_system.read_bytes(path)
            if body is not None:
                return body, source
        return DEFAULT_MAINTENANCE_HTML.encode("utf-8"), MaintenancePageSource.BUILTIN

    async def check(self, tenant_id: str) -> MaintenancePage | None:
        """Return the maintenance page to serve, or None if not in maintenance."""
        mode = await self.detect_mode(tenant_id)
        if mode is MaintenanceMode.NONE:
            return None

        body, source = await self.load_page(tenant_id)
        return MaintenancePage(mode=mode, source=source, body=body)
