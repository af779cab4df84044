"""Logger configuration for workweek."""

import sys

from loguru import logger


def setup_logger(level: str = "WARNING") -> None:
    """Configure loguru logger with a single stderr handler.

    Stdout is reserved for the result line, so every log record goes to stderr.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    """
    # Remove default handler
    logger.remove()

    logger.add(
        sys.stderr,
        format=(
            "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
            "<level>{level: <8}</level> | "
            "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - "
            "<level>{message}</level>"
        ),
        level=level.upper(),
        colorize=True,
    )

    logger.debug(f"Logger initialized with level={level.upper()}")
