"""Default implementation of static site service probe.

Provides a structlog-based implementation of the StaticSiteServiceProbe
protocol for observability at the use-case level.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Any

import structlog

from serving.application.observability.static_site_service_probe import (
    StaticSiteServiceProbe,
)

if TYPE_CHECKING:
    from shared_kernel.observability_context import ObservationContext


class DefaultStaticSiteServiceProbe(StaticSiteServiceProbe):
    """Default implementation of StaticSiteServiceProbe using structlog."""

    def __init__(
        self,
        logger: structlog.stdlib.BoundLogger | None = None,
        context: ObservationContext | None = None,
    ):
        self._logger = logger or structlog.get_logger()
        self._context = context

    def _get_context_kwargs(self) -> dict[str, Any]:
        if self._context is None:
            return {}
        return self._context.as_dict()

    def _event_kwargs(self, **fields: Any) -> dict[str, Any]:
        """Merge event fields over the bound context.

        The context may already carry keys such as `tenant_id`; the value
        passed with the event wins.
        """
        return {**self._get_context_kwargs(), **fields}

    def with_context(
        self, context: ObservationContext
    ) -> DefaultStaticSiteServiceProbe:
        return DefaultStaticSiteServiceProbe(logger=self._logger, context=context)

    def maintenance_page_served(
        self,
        tenant_id: str,
        mode: str,
        page_source: str,
    ) -> None:
        self._logger.info(
            "maintenance_page_served",
            **self._event_kwargs(
                tenant_id=tenant_id,
                mode=mode,
                page_source=page_source,
            ),
        )

    def file_served(
        self,
        tenant_id: str,
        file_path: Path,
        content_type: str,
        size: int,
    ) -> None:
        self._logger.debug(
            "static_file_served",
            **self._event_kwargs(
                tenant_id=tenant_id,
                file_path=str(file_path),
                content_type=content_type,
                size=size,
            ),
        )

    def file_unreadable(
        self,
        tenant_id: str,
        file_path: Path,
    ) -> None:
        self._logger.debug(
            "static_file_unreadable",
            **self._event_kwargs(tenant_id=tenant_id, file_path=str(file_path)),
        )
