"""
================================================================================
Common Utilities
================================================================================

Shared logging setup for the suite.

Exports:
    - init_logger: Initialize the loguru logger from the `logging.*` config
    - get_logger: Return the configured logger, initializing it if needed

Usage:
    from saucedemo_suite.common import init_logger

    init_logger()
    init_logger(level="DEBUG", log_file="logs/saucedemo.log")

================================================================================
"""

import sys
from pathlib import Path
from typing import Optional

from loguru import logger

from saucedemo_suite.ui_testing.framework.config_loader import ConfigLoader


DEFAULT_LOG_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> | "
    "<level>{message}</level>"
)

_logger_initialized = False


def init_logger(
    level: Optional[str] = None,
    format_string: Optional[str] = None,
    log_file: Optional[str] = None,
    force: bool = False,
) -> None:
    """
    Initializes the loguru logger with standard settings.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR). Defaults to config value.
        format_string: Log format string. Uses default if not provided.
        log_file: Optional file path to write logs to. Defaults to `logging.file`.
        force: Reconfigure even if the logger was already initialized.
    """
    global _logger_initialized

    if _logger_initialized and not force:
        return

    config = ConfigLoader()

    # Remove default handler
    logger.remove()

    level = (level or config.get("logging.level", "INFO")).upper()
    format_string = format_string or config.get("logging.format", DEFAULT_LOG_FORMAT)

    logger.add(
        sys.stderr,
        format=format_string,
        level=level,
        colorize=True,
    )

    log_file = log_file or config.get("logging.file")
    if log_file:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
        logger.add(
            log_file,
            format=format_string,
            level=level,
            rotation=config.get("logging.rotation", "10 MB"),
            retention=config.get("logging.retention", "7 days"),
            colorize=False,
        )

    _logger_initialized = True
    logger.debug(f"Logger initialized with level: {level}")


def get_logger():
    """
    Returns the configured Loguru logger instance.

    Ensures the logger is initialized before returning.
    """
    if not _logger_initialized:
        init_logger()
    return logger


__all__ = [
    "DEFAULT_LOG_FORMAT",
    "init_logger",
    "get_logger",
]
