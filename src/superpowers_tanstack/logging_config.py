"""structlog setup.

Logs go to stderr; stdout carries only the JSON report.
"""

from __future__ import annotations

import logging
import sys

import structlog

from superpowers_tanstack.config import debug_enabled


def configure_logging(debug: bool | None = None) -> None:
    """Configure structlog for the CLI.

    Args:
        debug: Force debug output on or off. When None, respects the
            SUPERPOWERS_TANSTACK_DEBUG env var.
    """
    if debug is None:
        debug = debug_enabled()
    level = logging.DEBUG if debug else logging.WARNING

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="%H:%M:%S"),
            structlog.dev.ConsoleRenderer(colors=False),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=False,
    )


def get_logger(
    name: str | None = None,
) -> structlog.typing.FilteringBoundLogger:
    return structlog.get_logger(name)
