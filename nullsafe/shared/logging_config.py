"""Logging configuration.

Sets up the package logger with a stdout handler. Nothing is configured on import;
applications opt in by calling configure_logging().
"""

import logging
import sys

from nullsafe.shared.config import get_settings

PACKAGE_LOGGER = "nullsafe"


def configure_logging(level: str | None = None) -> logging.Logger:
    """Configure logging for the package.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
            Defaults to the configured ``log_level`` setting.

    Returns:
        The configured package logger
    """
    if level is None:
        level = get_settings().log_level

    # Convert string level to logging constant
    numeric_level = getattr(logging, level.upper(), logging.INFO)

    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(numeric_level)

    # Add console handler only once
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        formatter = logging.Formatter(
            fmt="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    for handler in logger.handlers:
        handler.setLevel(numeric_level)

    return logger


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance for a module.

    Args:
        name: Logger name (usually __name__)

    Returns:
        Logger instance
    """
    return logging.getLogger(name)
