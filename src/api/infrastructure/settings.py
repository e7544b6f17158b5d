"""Application settings using pydantic-settings.

Settings are loaded from environment variables once at startup and shared
read-only by every request handler. Malformed values fall back to defaults
instead of aborting startup.
"""

from functools import lru_cache
from pathlib import Path
from typing import Any

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_PORT = 80
DEFAULT_WEB_ROOT = Path("/var/www")
LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


class ServerSettings(BaseSettings):
    """Static file server settings.

    Environment variables:
        PORT: TCP port to listen on (default: 80, also used when unparsable)
        WEB_ROOT: Directory holding one subdirectory per tenant (default: /var/www)
        BIND_HOST: Interface to listen on (default: 0.0.0.0)
        LOG_LEVEL: Minimum log level (default: INFO)
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        frozen=True,
    )

    port: int = Field(default=DEFAULT_PORT, description="TCP port to listen on")
    web_root: Path = Field(
        default=DEFAULT_WEB_ROOT,
        description="Base directory for all tenant document roots",
    )
    bind_host: str = Field(default="0.0.0.0", description="Interface to listen on")
    log_level: str = Field(default="INFO", description="Minimum log level")

    @field_validator("port", mode="before")
    @classmethod
    def fallback_to_default_port(cls, value: Any) -> int:
        """Replace an unparsable or out-of-range port with the default."""
        try:
            port = int(str(value).strip())
        except (TypeError, ValueError):
            return DEFAULT_PORT
        if not 0 <= port <= 65535:
            return DEFAULT_PORT
        return port

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, value: Any) -> str:
        """Upper-case the level name; unknown names fall back to INFO."""
        level = str(value).strip().upper()
        return level if level in LOG_LEVELS else "INFO"


@lru_cache
def get_server_settings() -> ServerSettings:
    """Get cached server settings.

    Uses lru_cache to ensure settings are only loaded once.
    """
    return ServerSettings()
