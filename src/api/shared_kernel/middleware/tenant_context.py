"""Tenant context value object and Host header resolution.

The tenant identifier is the hostname part of the request's Host header.
It is used only as a directory name under the web root and is never
validated as a domain name.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

from shared_kernel.middleware.observability.tenant_context_probe import (
    DefaultTenantContextProbe,
    TenantContextProbe,
)

DEFAULT_TENANT_ID = "default"


@dataclass(frozen=True)
class TenantContext:
    """Resolved tenant context for the current request.

    Attributes:
        tenant_id: The tenant identifier, used as a path segment.
        source: How the tenant was resolved - 'host' if taken from the Host
            header, 'default' if the header was absent, undecodable or empty.
    """

    tenant_id: str
    source: Literal["host", "default"]


def _strip_port(host: str) -> str:
    """Remove a trailing `:port` from a Host header value.

    Bracketed IPv6 literals keep their brackets: `[::1]:8080` -> `[::1]`.
    """
    if host.startswith("["):
        end = host.find("]")
        if end != -1:
            return host[: end + 1]
    return host.split(":", 1)[0]


def resolve_tenant(
    raw_host: bytes | str | None,
    probe: TenantContextProbe | None = None,
) -> TenantContext:
    """Resolve the tenant context from a raw Host header value.

    This function is total: any value that cannot produce a hostname
    resolves to the default tenant.

    Args:
        raw_host: Host header as received (raw bytes or text), or None.
        probe: Optional domain probe for observability.

    Returns:
        TenantContext carrying the tenant identifier and its source.
    """
    probe = probe or DefaultTenantContextProbe()

    if raw_host is None:
        probe.tenant_resolved_from_default(reason="host_header_missing")
        return TenantContext(tenant_id=DEFAULT_TENANT_ID, source="default")

    if isinstance(raw_host, bytes):
        try:
            raw_host = raw_host.decode("utf-8")
        except UnicodeDecodeError:
            probe.tenant_resolved_from_default(reason="host_header_undecodable")
            return TenantContext(tenant_id=DEFAULT_TENANT_ID, source="default")

    hostname = _strip_port(raw_host.strip())
    if not hostname:
        probe.tenant_resolved_from_default(reason="host_header_empty")
        return TenantContext(tenant_id=DEFAULT_TENANT_ID, source="default")

    probe.tenant_resolved_from_host(tenant_id=hostname, raw_host=raw_host)
    return TenantContext(tenant_id=hostname, source="host")
