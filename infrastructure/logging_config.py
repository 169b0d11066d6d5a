"""Structured logging setup."""

import logging
import sys
from typing import Optional

import structlog

from infrastructure.config import get_log_level


def configure_logging(level: Optional[str] = None) -> None:
    """
    Configure stdlib logging and structlog.

    Args:
        level: Level name (DEBUG, INFO, ...). Falls back to LOG_LEVEL.
    """
    level_name = (level or get_log_level()).upper()
    numeric_level = logging.getLevelName(level_name)
    if not isinstance(numeric_level, int):
        numeric_level = logging.INFO

    logging.basicConfig(format="%(message)s", stream=sys.stdout, level=numeric_level)

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(numeric_level),
        cache_logger_on_first_use=False,
    )
