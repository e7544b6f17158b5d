"""Application services for the Serving bounded context."""

from serving.application.services.content_responder import ContentResponder
from serving.application.services.maintenance_checker import MaintenanceChecker
from serving.application.services.path_resolver import PathResolver
from serving.application.services.static_site_service import StaticSiteService

__all__ = [
    "ContentResponder",
    "MaintenanceChecker",
    "PathResolver",
    "StaticSiteService",
]
