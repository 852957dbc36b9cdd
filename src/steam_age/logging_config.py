"""Structured logging setup.

Every module logs through ``structlog.get_logger()``; this module decides how
those events are rendered (console for development, JSON lines otherwise).
"""

import logging

import structlog

from steam_age.config import Settings

_LOG_LEVEL_MAP = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warning": logging.WARNING,
    "error": logging.ERROR,
    "critical": logging.CRITICAL,
}


def get_log_level(settings: Settings) -> int:
    """Get numeric log level from settings, falling back to INFO."""
    return _LOG_LEVEL_MAP.get(settings.log_level.lower(), logging.INFO)


def configure_logging(settings: Settings) -> None:
    """Configure structlog processors and level filtering.

    Args:
        settings: Settings carrying ``log_level`` and ``log_format``
    """
    renderer = (
        structlog.processors.JSONRenderer()
        if settings.log_format == "json"
        else structlog.dev.ConsoleRenderer()
    )
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(get_log_level(settings)),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )
