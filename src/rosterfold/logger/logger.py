"""Global logger configuration for the rosterfold project."""

import logging
import sys

from rosterfold.config import settings

__all__ = ["logger", "setup_logger", "get_logger"]


def setup_logger(
    name: str = "rosterfold",
    level: str | None = None,
    format_string: str | None = None,
    datefmt: str | None = None,
) -> logging.Logger:
    """
    Configure and return a logger instance.

    Args:
        name: Logger name (typically project name)
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        format_string: Custom format string
        datefmt: Custom ``asctime`` format

    Returns:
        Configured logger instance
    """
    level = level or settings.LOG_LEVEL
    format_string = format_string or settings.LOG_FORMAT
    datefmt = datefmt or settings.LOG_DATEFMT

    logger = logging.getLogger(name)

    # Only configure if not already configured
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        formatter = logging.Formatter(fmt=format_string, datefmt=datefmt)
        handler.setFormatter(formatter)
        logger.addHandler(handler)
        logger.setLevel(getattr(logging, level.upper()))
        logger.propagate = False

    return logger


# Create default logger instance for the project
logger = setup_logger()


def get_logger(name: str) -> logging.Logger:
    """Return a module logger that reports through the project logger.

    Args:
        name: Module name, usually ``__name__``. Names outside the project
            namespace are nested under it.

    Returns:
        Child of the project logger, inheriting its level and handler.
    """
    if name != logger.name and not name.startswith(logger.name + "."):
        name = f"{logger.name}.{name}"
    return logging.getLogger(name)
