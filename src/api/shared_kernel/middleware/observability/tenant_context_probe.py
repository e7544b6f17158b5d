"""Domain probe for tenant context resolution.

Following Domain-Oriented Observability patterns, this probe captures
domain-significant events related to resolving a tenant from the Host
request header.

See: https://martinfowler.com/articles/domain-oriented-observability.html
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

import structlog

if TYPE_CHECKING:
    from shared_kernel.observability_context import ObservationContext


class TenantContextProbe(Protocol):
    """Domain probe for tenant context resolution operations."""

    def tenant_resolved_from_host(
        self,
        tenant_id: str,
        raw_host: str,
    ) -> None:
        """Record that tenant context was resolved from the Host header."""
        ...

    def tenant_resolved_from_default(
        self,
        reason: str,
    ) -> None:
        """Record that the default tenant was selected."""
        ...

    def with_context(self, context: ObservationContext) -> TenantContextProbe:
        """Create a new probe with observation context bound."""
        ...


class DefaultTenantContextProbe:
    """Default implementation of TenantContextProbe using structlog."""

    def __init__(
        self,
        logger: structlog.stdlib.BoundLogger | None = None,
        context: ObservationContext | None = None,
    ):
        self._logger = logger or structlog.get_logger()
        self._context = context

    def _get_context_kwargs(self) -> dict[str, Any]:
        """Get context metadata as kwargs for logging."""
        if self._context is None:
            return {}
        return self._context.as_dict()

    def with_context(self, context: ObservationContext) -> DefaultTenantContextProbe:
        """Create a new probe with observation context bound."""
        return DefaultTenantContextProbe(logger=self._logger, context=context)

    def tenant_resolved_from_host(
        self,
        tenant_id: str,
        raw_host: str,
    ) -> None:
        """Record that tenant context was resolved from the Host header."""
        self._logger.debug(
            "tenant_context_resolved_from_host",
            **{
                **self._get_context_kwargs(),
                "tenant_id": tenant_id,
                "raw_host": raw_host,
            },
        )

    def tenant_resolved_from_default(
        self,
        reason: str,
    ) -> None:
        """Record that the default tenant was selected."""
        self._logger.debug(
            "tenant_context_resolved_from_default",
            reason=reason,
            **self._get_context_kwargs(),
        )
