"""Structlog configuration for the server process.

Every event is printed as one line on stdout: colored key/value pairs
when a human is watching, JSON otherwise.
"""

import logging
import os
import sys

import structlog

TRUTHY = ("1", "true", "yes")


def wants_colors() -> bool:
    """Whether log lines should be rendered for a terminal.

    FORCE_COLOR enables colors even without a TTY (e.g. in containers).
    """
    if os.environ.get("FORCE_COLOR", "").lower() in TRUTHY:
        return True
    return sys.stdout.isatty()


def level_number(log_level: str) -> int:
    """Translate a level name into its numeric value, defaulting to INFO."""
    level = logging.getLevelName(log_level.upper())
    return level if isinstance(level, int) else logging.INFO


def configure_logging(log_level: str = "INFO") -> None:
    """Configure structlog for the server.

    Args:
        log_level: Name of the minimum level to emit
    """
    processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
    ]

    if wants_colors():
        processors.append(structlog.dev.ConsoleRenderer(colors=True))
    else:
        processors.append(structlog.processors.format_exc_info)
        processors.append(structlog.processors.JSONRenderer())

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(level_number(log_level)),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )
