"""Integration test fixtures.

Every test gets its own temporary web root; the application is driven
in-process through its ASGI interface, so no port is bound.
"""

from collections.abc import AsyncGenerator
from pathlib import Path

import pytest
import pytest_asyncio
from asgi_lifespan import LifespanManager
from httpx import ASGITransport, AsyncClient

from infrastructure.settings import get_server_settings


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers",
        "integration: mark test as integration test (drives the full ASGI app)",
    )


@pytest.fixture
def web_root(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point WEB_ROOT at an empty temporary directory."""
    root = tmp_path / "www"
    root.mkdir()
    monkeypatch.setenv("WEB_ROOT", str(root))
    get_server_settings.cache_clear()
    yield root
    get_server_settings.cache_clear()


@pytest.fixture
def site(web_root: Path):
    """Create files under the web root from a mapping of relative paths."""

    def _create(files: dict[str, bytes]) -> None:
        for relative, content in files.items():
            path = web_root / relative
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_bytes(content)

    return _create


@pytest_asyncio.fixture
async def app(web_root: Path):
    """Provide the application with its lifespan running."""
    from main import create_app

    application = create_app()
    async with LifespanManager(application):
        yield application


@pytest_asyncio.fixture
async def async_client(app) -> AsyncGenerator[AsyncClient, None]:
    """Create async HTTP client bound to the running application."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
