"""Structured logging setup."""

import logging

import structlog

from mercadopago_client.core.config import settings


def setup_logging(level: str | None = None, fmt: str | None = None) -> None:
    """
    Configure structlog for the client.

    Uses JSON output by default and a console renderer when
    ``log_format`` is ``console``.
    """
    level_name = (level or settings.log_level).upper()
    log_format = fmt or settings.log_format

    renderer = (
        structlog.dev.ConsoleRenderer()
        if log_format == "console"
        else structlog.processors.JSONRenderer()
    )

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(
            logging.getLevelName(level_name)
        ),
        cache_logger_on_first_use=False,
    )
