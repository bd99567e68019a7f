"""Logging configuration (stdlib logging + structlog)."""

import logging
from typing import Optional

import structlog

from infrastructure.config import get_log_level

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"


def configure_logging(level: Optional[str] = None) -> int:
    """Configure stdlib logging and route structlog through it.

    Args:
        level: Level name (defaults to LOG_LEVEL env var, then INFO)

    Returns:
        Numeric level that was applied
    """
    level_name = (level or get_log_level()).upper()
    numeric_level = getattr(logging, level_name, logging.INFO)

    logging.basicConfig(level=numeric_level, format=LOG_FORMAT)

    structlog.configure(
        processors=[
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(numeric_level),
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=False,
    )

    return numeric_level
