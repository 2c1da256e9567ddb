"""Logging configuration: loguru sink setup for the blockmarkup package."""

import sys

from loguru import logger

from blockmarkup.config import get_settings

LOG_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>"
)


def configure_logging(level: str | None = None) -> int:
    """Enable blockmarkup log records and send them to stderr.

    The package is disabled on import so applications opt in explicitly.
    Returns the loguru handler id so callers can `logger.remove()` it again.
    """
    logger.enable("blockmarkup")
    return logger.add(
        sys.stderr,
        format=LOG_FORMAT,
        level=level or get_settings().log_level,
        colorize=True,
        filter="blockmarkup",
    )
