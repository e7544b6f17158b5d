"""Domain probes for Serving application layer."""

from serving.application.observability.static_site_service_probe import (
    StaticSiteServiceProbe,
)
from serving.application.observability.default_static_site_service_probe import (
    DefaultStaticSiteServiceProbe,
)

__all__ = [
    "StaticSiteServiceProbe",
    "DefaultStaticSiteServiceProbe",
]
