"""Domain probe for server startup and lifecycle events.

Following Domain-Oriented Observability patterns, this probe captures
domain-significant events while the server process starts and stops.
"""

from __future__ import annotations

from pathlib import Path
from typing import Protocol

import structlog


class StartupProbe(Protocol):
    """Domain probe for server lifecycle operations."""

    def server_starting(self, host: str, port: int, web_root: Path) -> None:
        """Record that the server is about to start listening."""
        ...

    def web_root_missing(self, web_root: Path) -> None:
        """Record that the configured web root is not an existing directory."""
        ...

    def server_bind_failed(self, host: str, port: int, error: Exception) -> None:
        """Record that the listening socket could not be bound."""
        ...

    def server_stopped(self) -> None:
        """Record that the server has shut down."""
        ...


class DefaultStartupProbe:
    """Default implementation of StartupProbe using structlog."""

    def __init__(self, logger: structlog.stdlib.BoundLogger | None = None):
        self._logger = logger or structlog.get_logger()

    def server_starting(self, host: str, port: int, web_root: Path) -> None:
        """Record that the server is about to start listening."""
        self._logger.info(
            "server_starting",
            address=f"http://{host}:{port}",
            web_root=str(web_root),
        )

    def web_root_missing(self, web_root: Path) -> None:
        """Record that the configured web root is not an existing directory."""
        self._logger.warning(
            "server_web_root_missing",
            web_root=str(web_root),
            message="Every request will be answered with an empty 200 until it exists",
        )

    def server_bind_failed(self, host: str, port: int, error: Exception) -> None:
        """Record that the listening socket could not be bound."""
        self._logger.error(
            "server_bind_failed",
            host=host,
            port=port,
            error=str(error),
            error_type=type(error).__name__,
        )

    def server_stopped(self) -> None:
        """Record that the server has shut down."""
        self._logger.info("server_stopped")
