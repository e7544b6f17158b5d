"""Serving application layer.

Contains the application services that run the request resolution
pipeline for the Serving bounded context.
"""

from serving.application.services import StaticSiteService

__all__ = ["StaticSiteService"]
