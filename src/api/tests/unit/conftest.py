"""Unit test fixtures with isolated web roots."""

from pathlib import Path

import pytest


@pytest.fixture
def web_root(tmp_path: Path) -> Path:
    """Provide an empty web root unique to the test."""
    root = tmp_path / "www"
    root.mkdir()
    return root


@pytest.fixture
def tenant_root(web_root: Path) -> Path:
    """Provide the document root of tenant `a.com`."""
    root = web_root / "a.com"
    root.mkdir()
    return root


@pytest.fixture
def server_settings(web_root: Path, monkeypatch: pytest.MonkeyPatch):
    """Provide server settings rooted at the test web root."""
    from infrastructure.settings import ServerSettings

    for name in ("PORT", "WEB_ROOT", "BIND_HOST", "LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    return ServerSettings(web_root=web_root, port=8080, bind_host="127.0.0.1")
