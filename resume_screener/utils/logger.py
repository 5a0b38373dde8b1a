"""Logging configuration for the resume screener."""

import logging
import sys
from typing import Optional

from resume_screener.config import LOG_LEVEL


def resolve_level(name: str) -> int:
    """Numeric level for a level name; unknown names resolve to INFO."""
    level = logging.getLevelName((name or "").strip().upper())
    return level if isinstance(level, int) else logging.INFO


def get_logger(name: str, level: Optional[int] = None) -> logging.Logger:
    """Get a configured logger instance. Level defaults to LOG_LEVEL."""
    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(
            logging.Formatter(
                "%(asctime)s | %(name)s | %(levelname)s | %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )
        )
        logger.addHandler(handler)
        if level is not None:
            logger.setLevel(level)
        else:
            logger.setLevel(resolve_level(LOG_LEVEL))
            if not isinstance(logging.getLevelName(LOG_LEVEL.strip().upper()), int):
                logger.warning("Unknown LOG_LEVEL %r; using INFO", LOG_LEVEL)
    elif level is not None:
        logger.setLevel(level)
    return logger
