"""HTTP routes for the Serving bounded context.

A single catch-all route hands every request, whatever its method or path,
to the static site service. Only the Host header and the URL path are read.
"""

from typing import Annotated
from uuid import uuid4

from fastapi import APIRouter, Depends, Request, Response
from fastapi.routing import APIRoute
from starlette.routing import Match
from starlette.types import Receive, Scope, Send

from serving.application.services import StaticSiteService
from serving.dependencies import get_static_site_service
from shared_kernel.observability_context import ObservationContext

# Methods advertised for the route; AnyMethodRoute accepts any other too.
ALL_METHODS = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS", "TRACE"]


class AnyMethodRoute(APIRoute):
    """Route that matches on the path alone.

    Starlette answers a method outside `methods` with 405. The request
    method plays no part in serving a file, so TRACE, CONNECT and
    extension methods are dispatched to the endpoint like GET.
    """

    def matches(self, scope: Scope) -> tuple[Match, Scope]:
        match, child_scope = super().matches(scope)
        if match is Match.PARTIAL:
            match = Match.FULL
        return match, child_scope

    async def handle(self, scope: Scope, receive: Receive, send: Send) -> None:
        await self.app(scope, receive, send)


router = APIRouter(tags=["static-files"], route_class=AnyMethodRoute)


def raw_host_header(request: Request) -> bytes | None:
    """Return the Host header exactly as received.

    Starlette decodes header values as latin-1, which never fails; the raw
    bytes are needed to tell a non-UTF-8 Host header apart.
    """
    for name, value in request.scope.get("headers", []):
        if name.lower() == b"host":
            return value
    return None


@router.api_route("/{request_path:path}", methods=ALL_METHODS)
async def serve_static(
    request: Request,
    service: Annotated[StaticSiteService, Depends(get_static_site_service)],
) -> Response:
    """Serve the tenant file matching the request path.

    Returns 503 while maintenance is active, otherwise 200 with either the
    file contents or an empty body.
    """
    request_path = request.scope["path"]
    context = ObservationContext(request_id=str(uuid4()), request_path=request_path)

    result = await service.serve(
        raw_host=raw_host_header(request),
        request_path=request_path,
        context=context,
    )

    return Response(
        content=result.body,
        status_code=result.status_code,
        headers=dict(result.headers),
    )
