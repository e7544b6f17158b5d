"""Serving domain module.

Contains value objects and layout constants for the Serving bounded context.
"""

from serving.domain.value_objects import (
    MaintenanceMode,
    MaintenancePage,
    MaintenancePageSource,
    StaticResponse,
)

__all__ = [
    "MaintenanceMode",
    "MaintenancePage",
    "MaintenancePageSource",
    "StaticResponse",
]
