"""Protocol for static site service observability.

Defines the interface for domain probes that capture application-level
domain events while serving a request.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from pathlib import Path

    from shared_kernel.observability_context import ObservationContext


class StaticSiteServiceProbe(Protocol):
    """Domain probe for static site service operations."""

    def maintenance_page_served(
        self,
        tenant_id: str,
        mode: str,
        page_source: str,
    ) -> None:
        """Record that a 503 maintenance page replaced normal serving."""
        ...

    def file_served(
        self,
        tenant_id: str,
        file_path: Path,
        content_type: str,
        size: int,
    ) -> None:
        """Record that a file was read and returned."""
        ...

    def file_unreadable(
        self,
        tenant_id: str,
        file_path: Path,
    ) -> None:
        """Record that the resolved file could not be read (empty 200 returned)."""
        ...

    def with_context(self, context: ObservationContext) -> StaticSiteServiceProbe:
        """Create a new probe with observation context bound."""
        ...
