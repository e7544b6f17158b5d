"""Observation context for domain-oriented observability.

Observation contexts collect and manage contextual metadata for instrumentation,
following the Domain Oriented Observability pattern.

See: https://martinfowler.com/articles/domain-oriented-observability.html
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class ObservationContext:
    """Immutable context containing metadata for observability.

    Captures request-scoped metadata that should be included with all
    instrumentation events, so that every event emitted while serving a
    request can be correlated.

    Attributes:
        request_id: Unique identifier for the current request.
        tenant_id: Tenant resolved from the Host header (if known yet).
        request_path: URL path of the request (if applicable).

    Example:
        context = ObservationContext(request_id="req-123", request_path="/")
        probe = DefaultStaticSiteServiceProbe().with_context(context)
    """

    request_id: str | None = None
    tenant_id: str | None = None
    request_path: str | None = None

    def as_dict(self) -> dict[str, Any]:
        """Convert context to a dictionary for logging.

        Only includes non-None values to keep logs clean.
        """
        result: dict[str, Any] = {}
        if self.request_id is not None:
            result["request_id"] = self.request_id
        if self.tenant_id is not None:
            result["tenant_id"] = self.tenant_id
        if self.request_path is not None:
            result["request_path"] = self.request_path
        return result

    def with_tenant(self, tenant_id: str) -> ObservationContext:
        """Create a new context with the tenant identifier set."""
        return ObservationContext(
            request_id=self.request_id,
            tenant_id=tenant_id,
            request_path=self.request_path,
        )
