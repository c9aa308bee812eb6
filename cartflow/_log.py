"""
Logging setup.

Library modules only call ``structlog.get_logger(__name__)``; applications
call :func:`configure_logging` once at startup.
"""

from __future__ import annotations

import logging
import os
import sys
from collections.abc import Mapping
from typing import Any

import structlog

_LEVELS_BY_ENV = {
    "production": "INFO",
    "staging": "INFO",
    "development": "DEBUG",
    "test": "WARNING",
}


def get_log_level(environ: Mapping[str, str] | None = None) -> str:
    """Resolve log level from LOG_LEVEL, falling back to the ENVIRONMENT default."""
    env = os.environ if environ is None else environ
    name = (env.get("ENVIRONMENT") or "development").lower()
    return env.get("LOG_LEVEL", _LEVELS_BY_ENV.get(name, "INFO")).upper()


def configure_logging(level: str | None = None, *, json: bool | None = None) -> None:
    """
    Configure stdlib logging and structlog.

    Args:
        level: Log level name. Defaults to :func:`get_log_level`.
        json: Render JSON lines. Defaults to True in production/staging.
    """
    log_level = level or get_log_level()
    if json is None:
        json = os.getenv("ENVIRONMENT", "development").lower() in ("production", "staging")

    root = logging.getLogger()
    root.setLevel(log_level)
    root.handlers = []
    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(log_level)
    root.addHandler(handler)

    logging.getLogger("asyncio").setLevel(logging.WARNING)

    processors: list[Any] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
    ]
    if json:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer())

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


__all__ = ("configure_logging", "get_log_level")
