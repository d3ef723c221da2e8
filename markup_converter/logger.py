"""Logging helpers."""

import logging
import os
from typing import Optional

from rich.logging import RichHandler

LOG_LEVEL_ENV = "MARKUP_CONVERTER_LOG_LEVEL"
DEFAULT_LEVEL = "WARNING"


def get_logger(name: str) -> logging.Logger:
    """Return the logger for a module."""
    return logging.getLogger(name)


def setup_logger(name: str, level: Optional[str] = None) -> logging.Logger:
    """
    Configure a logger with rich output.

    Calling it again for the same logger only updates the level.

    Args:
        name: Logger name
        level: Level name (falls back to $MARKUP_CONVERTER_LOG_LEVEL, then WARNING)

    Returns:
        Configured logger
    """
    level = (level or os.getenv(LOG_LEVEL_ENV) or DEFAULT_LEVEL).upper()

    logger = logging.getLogger(name)
    logger.setLevel(level)

    if not any(isinstance(h, RichHandler) for h in logger.handlers):
        handler = RichHandler(rich_tracebacks=True, show_path=False)
        handler.setFormatter(logging.Formatter("%(message)s", datefmt="[%X]"))
        logger.addHandler(handler)

    return logger
