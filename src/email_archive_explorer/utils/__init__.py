"""Utility functions for Email Archive Explorer."""

import logging
import sys
from typing import TextIO

import structlog


def configure_logging(log_level: str = "INFO", stream: TextIO | None = None) -> None:
    """Configure structlog with a level filter.

    Args:
        log_level: Level name (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        stream: Where log lines are written. Defaults to stderr so command
            output on stdout stays machine readable.
    """

    level = getattr(logging, log_level.upper(), logging.INFO)
    if not isinstance(level, int):
        level = logging.INFO

    structlog.configure(
        wrapper_class=structlog.make_filtering_bound_logger(level),
        logger_factory=structlog.PrintLoggerFactory(file=stream or sys.stderr),
        cache_logger_on_first_use=False,
    )
