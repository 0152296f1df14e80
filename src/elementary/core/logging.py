"""
Unified logging utilities for the elementary package.

Exports:
    - logger: Global Loguru logger (ready for use/import).
    - configure_logging: Reset the console sink to a level (env-aware).
    - setup_logfile: Add file logging with rotation/compression.
"""

import os
import sys
from typing import Optional

from loguru import logger

__all__ = [
    "logger",
    "configure_logging",
    "setup_logfile",
]

LOG_LEVEL_ENV = "ELEMENTARY_LOG_LEVEL"

# Library code stays quiet unless a host application opts in.
logger.disable("elementary")


def configure_logging(level: Optional[str] = None) -> None:
    """
    Enable package logging and route it to stderr at the given level.

    Args:
        level (str, optional): Logging level. If None, reads ELEMENTARY_LOG_LEVEL, else WARNING.
    """
    if level is None:
        level = os.environ.get(LOG_LEVEL_ENV, "WARNING")
    logger.remove()
    logger.add(sys.stderr, level=level.upper())
    logger.enable("elementary")
    logger.debug(f"Logging configured at {level.upper()}")


def setup_logfile(
    log_path: str,
    rotation: str = "10 MB",
    retention: str = "10 days",
    compression: str = "zip",
    level: str = "INFO",
    colorize: bool = False
):
    """
    Add a rotating file handler to the global logger.

    Args:
        log_path (str): Path to the log file.
        rotation (str): Size or time string for log rotation.
        retention (str): How long to keep old logs.
        compression (str): Compression method for rotated logs.
        level (str): Logging level (DEBUG, INFO, etc.).
        colorize (bool): Colorize file output (default: False).
    Returns:
        int: Loguru handler id, for logger.remove().
    """
    handler_id = logger.add(
        log_path,
        rotation=rotation,
        retention=retention,
        compression=compression,
        level=level.upper(),
        colorize=colorize,
        enqueue=True,
        backtrace=True,
        diagnose=True,
    )
    logger.enable("elementary")
    logger.info(f"Loguru file logging initialized: {log_path}")
    return handler_id
