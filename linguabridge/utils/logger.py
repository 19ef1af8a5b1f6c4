"""Logging utilities."""

import sys
from pathlib import Path
from typing import Optional

from loguru import logger as loguru_logger

LOG_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan> - <level>{message}</level>"
)


def setup_logger(
    name: str = "linguabridge",
    level: str = "INFO",
    log_file: Optional[str] = None,
):
    """
    Set up logger with configuration.

    Replaces any sinks installed earlier, so call it once at process start
    (the CLI and server entry points do).

    Args:
        name: Logger name bound to every record
        level: Logging level (DEBUG, INFO, WARNING, ERROR)
        log_file: Optional log file path

    Returns:
        Configured logger
    """
    loguru_logger.remove()

    loguru_logger.add(sys.stderr, level=level.upper(), format=LOG_FORMAT)

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        loguru_logger.add(
            log_file,
            level=level.upper(),
            rotation="10 MB",
            retention="1 week"
        )

    return loguru_logger.bind(component=name)


def get_logger(name: str = "linguabridge"):
    """Get a logger bound to a component name."""
    return loguru_logger.bind(component=name)
