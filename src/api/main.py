"""Main FastAPI application entry point."""

import socket
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI

from infrastructure.logging import configure_logging
from infrastructure.observability import DefaultStartupProbe, StartupProbe
from infrastructure.settings import get_server_settings
from infrastructure.version import __version__
from serving.presentation import routes as serving_routes


@asynccontextmanager
async def sitehost_lifespan(app: FastAPI):
    """Application lifespan context.

    Warns once at startup when the web root does not exist yet. Serving
    continues regardless since the directory may be created later.
    """
    settings = get_server_settings()
    probe = DefaultStartupProbe()
    if not settings.web_root.is_dir():
        probe.web_root_missing(settings.web_root)

    yield

    probe.server_stopped()


def create_app() -> FastAPI:
    """Build the ASGI application.

    The interactive docs and OpenAPI routes are disabled: every path
    belongs to the tenants.
    """
    application = FastAPI(
        title="sitehost",
        description="Multi-tenant static file server",
        version=__version__,
        lifespan=sitehost_lifespan,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )
    application.include_router(serving_routes.router)
    return application


app = create_app()


def bind_socket(host: str, port: int) -> socket.socket:
    """Bind the listening socket before the server starts.

    Raises:
        OSError: If the address is in use or not permitted.
    """
    family = socket.AF_INET6 if ":" in host else socket.AF_INET
    sock = socket.socket(family, socket.SOCK_STREAM)
    try:
        sock.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
        sock.bind((host, port))
    except OSError:
        sock.close()
        raise
    return sock


def run(probe: StartupProbe | None = None) -> None:
    """Run the server until terminated.

    Exits with status 1 when the listening port cannot be bound.
    """
    settings = get_server_settings()
    configure_logging(settings.log_level)
    probe = probe or DefaultStartupProbe()

    try:
        sock = bind_socket(settings.bind_host, settings.port)
    except OSError as e:
        probe.server_bind_failed(settings.bind_host, settings.port, e)
        raise SystemExit(1) from e

    config = uvicorn.Config(app, log_level=settings.log_level.lower())
    server = uvicorn.Server(config)

    probe.server_starting(settings.bind_host, settings.port, settings.web_root)
    try:
        server.run(sockets=[sock])
    finally:
        sock.close()


if __name__ == "__main__":
    run()
