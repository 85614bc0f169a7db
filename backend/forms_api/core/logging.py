"""
Structured logging via structlog.

Call ``setup_logging()`` once at startup (see ``main.py`` lifespan), then
get module loggers with ``get_logger(__name__)`` and log events with
keyword context::

    logger = get_logger(__name__)
    logger.info("Submission stored", submission_id=submission_id)
"""

from __future__ import annotations

import logging
import sys

import structlog

from forms_api.core.config import settings


def setup_logging(level: str = "INFO") -> None:
    """Configure structlog and route stdlib logging through the same level."""
    log_level = getattr(logging, level.upper(), logging.INFO)

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=log_level,
        force=True,
    )

    if settings.APP_ENV == "development":
        renderer = structlog.dev.ConsoleRenderer()
    else:
        renderer = structlog.processors.JSONRenderer()

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str | None = None) -> structlog.typing.FilteringBoundLogger:
    """Return a structlog logger bound to ``name``."""
    return structlog.get_logger(name)
