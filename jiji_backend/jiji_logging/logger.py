"""
Structured logging for the Jiji API.

Every line carries event_type, level, a UTC ISO timestamp, the emitting module
and the service name. Request fields (request_id, method, path) arrive through
contextvars bound by RequestContextMiddleware.

LOG_FORMAT=json (default) renders one JSON object per line; anything else uses
structlog's console renderer. LOG_LEVEL filters below the given level.

No jiji_backend imports here; every other module imports this one.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import Any

import structlog

SERVICE_NAME = os.getenv("SERVICE_NAME", "jiji-api").strip() or "jiji-api"


def build_processors(log_format: str) -> list[Any]:
    """Processor chain ending in the renderer for log_format."""
    renderer: Any
    if log_format == "json":
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())
    return [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.TimeStamper(fmt="iso", utc=True, key="timestamp"),
        structlog.processors.EventRenamer("event_type"),
        renderer,
    ]


def configure_structlog(
    log_format: str | None = None,
    log_level: str | None = None,
) -> None:
    """Configure structlog for stdout. Arguments default to LOG_FORMAT / LOG_LEVEL."""
    log_format = (log_format or os.getenv("LOG_FORMAT", "json")).strip().lower()
    level_name = (log_level or os.getenv("LOG_LEVEL", "INFO")).strip().upper()
    structlog.configure(
        processors=build_processors(log_format),
        wrapper_class=structlog.make_filtering_bound_logger(getattr(logging, level_name, logging.INFO)),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stdout),
        cache_logger_on_first_use=True,
    )


if not structlog.is_configured():
    configure_structlog()


def get_logger(name: str) -> structlog.BoundLogger:
    """
    Return a logger bound to the module name and service.

        logger = get_logger(__name__)
        logger.info("ask_received", user_id="u1", query_length=5)
    """
    return structlog.get_logger(name).bind(logger=name, service=SERVICE_NAME)
