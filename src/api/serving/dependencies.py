"""Dependency injection for Serving bounded context.

Composes settings and the filesystem adapter with the application
services that make up the request pipeline.
"""

from functools import lru_cache
from typing import Annotated

from fastapi import Depends

from infrastructure.settings import ServerSettings, get_server_settings
from serving.application.services import (
    ContentResponder,
    MaintenanceChecker,
    PathResolver,
    StaticSiteService,
)
from serving.infrastructure.local_filesystem import LocalFileSystem
from serving.ports.filesystem import IFileSystem


@lru_cache
def get_file_system() -> IFileSystem:
    """Get the application-scoped filesystem adapter.

    The adapter is stateless and shared across all requests.
    """
    return LocalFileSystem()


def get_static_site_service(
    settings: Annotated[ServerSettings, Depends(get_server_settings)],
    file_system: Annotated[IFileSystem, Depends(get_file_system)],
) -> StaticSiteService:
    """Get StaticSiteService instance.

    Args:
        settings: Process-wide server settings
        file_system: Filesystem adapter

    Returns:
        StaticSiteService rooted at the configured web root
    """
    return StaticSiteService(
        maintenance_checker=MaintenanceChecker(settings.web_root, file_system),
        path_resolver=PathResolver(settings.web_root, file_system),
        content_responder=ContentResponder(file_system),
    )
