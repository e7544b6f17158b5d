"""Unit tests for MaintenanceChecker."""

from pathlib import Path
from unittest.mock import AsyncMock, create_autospec

import pytest

from serving.application.services.maintenance_checker import MaintenanceChecker
from serving.domain.value_objects import (
    DEFAULT_MAINTENANCE_HTML,
    MaintenanceMode,
    MaintenancePageSource,
)
from serving.infrastructure.local_filesystem import LocalFileSystem
from serving.ports.filesystem import IFileSystem


@pytest.fixture
def checker(web_root: Path) -> MaintenanceChecker:
    """Create a checker over the real filesystem and a temporary web root."""
    return MaintenanceChecker(web_root, LocalFileSystem())


class TestDetectMode:
    """Tests for marker detection."""

    @pytest.mark.asyncio
    async def test_no_markers(self, checker, tenant_root):
        """Without markers maintenance is off."""
        assert await checker.detect_mode("a.com") is MaintenanceMode.NONE

    @pytest.mark.asyncio
    async def test_global_marker(self, checker, web_root, tenant_root):
        """A marker at the web root applies to every tenant."""
        (web_root / ".maintenance").touch()

        assert await checker.detect_mode("a.com") is MaintenanceMode.GLOBAL
        assert await checker.detect_mode("other.org") is MaintenanceMode.GLOBAL

    @pytest.mark.asyncio
    async def test_tenant_marker(self, checker, web_root, tenant_root):
        """A marker in a tenant directory applies to that tenant only."""
        (tenant_root / ".maintenance").touch()
        (web_root / "other.org").mkdir()

        assert await checker.detect_mode("a.com") is MaintenanceMode.TENANT
        assert await checker.detect_mode("other.org") is MaintenanceMode.NONE

    @pytest.mark.asyncio
    async def test_global_marker_wins_over_tenant_marker(
        self, checker, web_root, tenant_root
    ):
        """When both markers exist the global one is reported."""
        (web_root / ".maintenance").touch()
        (tenant_root / ".maintenance").touch()

        assert await checker.detect_mode("a.com") is MaintenanceMode.GLOBAL

    @pytest.mark.asyncio
    async def test_marker_content_is_irrelevant(self, checker, tenant_root):
        """Only the presence of the marker matters."""
        (tenant_root / ".maintenance").write_text("upgrading until 5pm")

        assert await checker.detect_mode("a.com") is MaintenanceMode.TENANT

    @pytest.mark.asyncio
    async def test_global_check_short_circuits(self, web_root):
        """The tenant marker is not probed when the global marker exists."""
        file_system = create_autospec(IFileSystem, instance=True)
        file_system.exists = AsyncMock(return_value=True)
        checker = MaintenanceChecker(web_root, file_system)

        await checker.detect_mode("a.com")

        file_system.exists.assert_awaited_once_with(web_root / ".maintenance")


class TestLoadPage:
    """Tests for maintenance body resolution order."""

    @pytest.mark.asyncio
    async def test_tenant_page_has_priority(self, checker, web_root, tenant_root):
        """The tenant page beats the global page."""
        (tenant_root / "maintenance.html").write_bytes(b"tenant page")
        (web_root / "maintenance.html").write_bytes(b"global page")

        body, source = await checker.load_page("a.com")

        assert body == b"tenant page"
        assert source is MaintenancePageSource.TENANT

    @pytest.mark.asyncio
    async def test_global_page_when_tenant_page_missing(
        self, checker, web_root, tenant_root
    ):
        """The global page beats the built-in page."""
        (web_root / "maintenance.html").write_bytes(b"global page")

        body, source = await checker.load_page("a.com")

        assert body == b"global page"
        assert source is MaintenancePageSource.GLOBAL

    @pytest.mark.asyncio
    async def test_builtin_page_when_nothing_on_disk(self, checker, tenant_root):
        """The built-in page is the last resort."""
        body, source = await checker.load_page("a.com")

        assert body == DEFAULT_MAINTENANCE_HTML.encode("utf-8")
        assert source is MaintenancePageSource.BUILTIN

    @pytest.mark.asyncio
    async def test_unreadable_tenant_page_falls_through(self, web_root):
        """A tenant page that cannot be read is skipped, not fatal."""
        file_system = create_autospec(IFileSystem, instance=True)
        file_system.read_bytes = AsyncMock(side_effect=[None, b"global page"])
        checker = MaintenanceChecker(web_root, file_system)

        body, source = await checker.load_page("a.com")

        assert body == b"global page"
        assert source is MaintenancePageSource.GLOBAL

    @pytest.mark.asyncio
    async def test_tenant_page_used_even_for_global_maintenance(
        self, checker, web_root, tenant_root
    ):
        """The page choice does not depend on which marker triggered."""
        (web_root / ".maintenance").touch()
        (tenant_root / "maintenance.html").write_bytes(b"tenant page")

        page = await checker.check("a.com")

        assert page is not None
        assert page.mode is MaintenanceMode.GLOBAL
        assert page.source is MaintenancePageSource.TENANT
        assert page.body == b"tenant page"


class TestCheck:
    """Tests for the combined check."""

    @pytest.mark.asyncio
    async def test_returns_none_without_markers(self, checker, tenant_root):
        """No page is produced when maintenance is off."""
        (tenant_root / "maintenance.html").write_bytes(b"tenant page")

        assert await checker.check("a.com") is None

    @pytest.mark.asyncio
    async def test_tenant_maintenance_page(self, checker, tenant_root):
        """Tenant maintenance produces a page and a 503 response."""
        (tenant_root / ".maintenance").touch()

        page = await checker.check("a.com")

        assert page is not None
        assert page.mode is MaintenanceMode.TENANT
        response = page.to_response()
        assert response.status_code == 503
        assert response.header("Retry-After") == "300"

    @pytest.mark.asyncio
    async def test_unknown_tenant_directory(self, checker, web_root):
        """A tenant without a directory is simply not in maintenance."""
        assert await checker.check("missing.example") is None
