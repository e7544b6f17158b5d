"""Domain value objects for the Serving bounded context.

These are immutable data structures describing the on-disk layout contract
and the responses produced by the resolution pipeline. They have no
identity - equality is based on their attribute values.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

# On-disk layout contract under {web_root} and {web_root}/{tenant}
MAINTENANCE_MARKER = ".maintenance"
MAINTENANCE_PAGE = "maintenance.html"
INDEX_FILE = "index.html"

RETRY_AFTER_SECONDS = 300
FALLBACK_CONTENT_TYPE = "application/octet-stream"

DEFAULT_MAINTENANCE_HTML = """<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>Maintenance</title>
    <style>
        body {
            font-family: -apple-system, BlinkMacSystemFont, "Segoe UI", Roboto, "Helvetica Neue", Arial, sans-serif;
            background-color: #f7f9fb;
            color: #333;
            display: flex;
            align-items: center;
            justify-content: center;
            height: 100vh;
            margin: 0;
        }
        .container {
            text-align: center;
            background: white;
            padding: 40px;
            border-radius: 8px;
            box-shadow: 0 4px 6px rgba(0,0,0,0.1);
            max-width: 500px;
            width: 90%;
        }
        h1 { margin-bottom: 20px; font-size: 24px; color: #2d3748; }
        p { color: #718096; line-height: 1.5; }
    </style>
</head>
<body>
    <div class="container">
        <h1>We'll be back soon!</h1>
        <p>We're currently performing some scheduled maintenance. We should be back shortly. Thank you for your patience.</p>
    </div>
</body>
</html>"""


class MaintenanceMode(str, Enum):
    """Which marker put the tenant into maintenance."""

    NONE = "none"
    GLOBAL = "global"
    TENANT = "tenant"


class MaintenancePageSource(str, Enum):
    """Where the maintenance body was taken from."""

    TENANT = "tenant"
    GLOBAL = "global"
    BUILTIN = "builtin"


@dataclass(frozen=True)
class StaticResponse:
    """Transport-agnostic response produced by the pipeline.

    Attributes:
        status_code: HTTP status code.
        headers: Ordered header pairs; may be empty.
        body: Raw response body.
    """

    status_code: int
    headers: tuple[tuple[str, str], ...] = ()
    body: bytes = b""

    @classmethod
    def empty(cls) -> StaticResponse:
        """The 200 response with no body and no Content-Type."""
        return cls(status_code=200)

    def header(self, name: str) -> str | None:
        """Return the first header value matching `name` (case-insensitive)."""
        lowered = name.lower()
        for key, value in self.headers:
            if key.lower() == lowered:
                return value
        return None


@dataclass(frozen=True)
class MaintenancePage:
    """An active maintenance state together with the page to serve."""

    mode: MaintenanceMode
    source: MaintenancePageSource
    body: bytes

    def to_response(self) -> StaticResponse:
        """Build the 503 response announcing the maintenance window."""
        return StaticResponse(
            status_code=503,
            headers=(
                ("Content-Type", "text/html"),
                ("Retry-After", str(RETRY_AFTER_SECONDS)),
            ),
            body=self.body,
        )
