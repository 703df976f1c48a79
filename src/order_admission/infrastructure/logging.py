"""Logging configuration.

structlog over the standard library logger. Development gets the
console renderer; production and staging emit JSON lines.
"""

from __future__ import annotations

import logging
import os
import sys

import structlog


def get_environment() -> str:
    return os.getenv("ORDER_ADMISSION_ENV", "development").lower()


def get_log_level(verbose: bool = False) -> str:
    if verbose:
        return "DEBUG"
    return os.getenv("LOG_LEVEL", "INFO").upper()


def configure_logging(verbose: bool = False) -> None:
    """Configure stdlib logging and structlog for the CLI process."""
    level = get_log_level(verbose)

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stderr,
        level=level,
        force=True,
    )

    processors = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.contextvars.merge_contextvars,
    ]

    if get_environment() in ("production", "staging"):
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=False))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=False,
    )
