"""Static site service.

Application service running the per-request resolution pipeline:
tenant resolution, maintenance check, path resolution and content
response. No state is kept between calls; every decision is taken from
the filesystem as it is at request time.
"""

from __future__ import annotations

from serving.application.observability import (
    DefaultStaticSiteServiceProbe,
    StaticSiteServiceProbe,
)
from serving.application.services.content_responder import ContentResponder
from serving.application.services.maintenance_checker import MaintenanceChecker
from serving.application.services.path_resolver import PathResolver
from serving.domain.value_objects import StaticResponse
from shared_kernel.middleware.observability.tenant_context_probe import (
    DefaultTenantContextProbe,
    TenantContextProbe,
)
from shared_kernel.middleware.tenant_context import resolve_tenant
from shared_kernel.observability_context import ObservationContext


class StaticSiteService:
    """Application service serving tenant files from the web root.

    Every call returns exactly one response: a 503 maintenance page, a
    200 with the file contents, or an empty 200 when nothing is readable.
    """

    def __init__(
        self,
        maintenance_checker: MaintenanceChecker,
        path_resolver: PathResolver,
        content_responder: ContentResponder,
        probe: StaticSiteServiceProbe | None = None,
        tenant_probe: TenantContextProbe | None = None,
    ):
        """Initialize the service.

        Args:
            maintenance_checker: Detects maintenance markers and pages.
            path_resolver: Maps URL paths onto tenant files.
            content_responder: Reads files into responses.
            probe: Optional domain probe for observability.
            tenant_probe: Optional probe for tenant resolution events.
        """
        self._maintenance_checker = maintenance_checker
        self._path_resolver = path_resolver
        self._content_responder = content_responder
        self._probe = probe or DefaultStaticSiteServiceProbe()
        self._tenant_probe = tenant_probe or DefaultTenantContextProbe()

    async def serve(
        self,
        raw_host: bytes | str | None,
        request_path: str,
        context: ObservationContext | None = None,
    ) -> StaticResponse:
        """Serve a request.

        Args:
            raw_host: The Host header as received, or None when absent.
            request_path: URL path of the request, without query string.
            context: Optional request-scoped observation context.

        Returns:
            The response to send back to the client.
        """
        context = context or ObservationContext(request_path=request_path)
        tenant = resolve_tenant(raw_host, self._tenant_probe.with_context(context))

        context = context.with_tenant(tenant.tenant_id)
        probe = self._probe.with_context(context)

        maintenance = await self._maintenance_checker.check(tenant.tenant_id)
        if maintenance is not None:
            probe.maintenance_page_served(
                tenant_id=tenant.tenant_id,
                mode=maintenance.mode.value,
                page_source=maintenance.source.value,
            )
            return maintenance.to_response()

        file_path = await self._path_resolver.resolve(tenant.tenant_id, request_path)
        response = await self._content_responder.respond(file_path)

        content_type = response.header("Content-Type")
        if content_type is None:
            probe.file_unreadable(tenant_id=tenant.tenant_id, file_path=file_path)
        else:
            probe.file_served(
                tenant_id=tenant.tenant_id,
                file_path=file_path,
                content_type=content_type,
                size=len(response.body),
            )
        return response
