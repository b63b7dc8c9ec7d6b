"""
Logging helpers for fastapi_pagebuilder.

The library logs through ``logging.getLogger(__name__)`` and never
installs handlers on its own. Applications that want to see its records
without configuring logging themselves can call setup_logging().

Usage:
    from fastapi_pagebuilder.logging import setup_logging

    setup_logging("DEBUG")
"""

import logging
import sys

from fastapi_pagebuilder.config import get_settings

DEFAULT_TEXT_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
DEFAULT_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

PACKAGE_LOGGER = "fastapi_pagebuilder"


def setup_logging(level: str | None = None) -> logging.Logger:
    """
    Attach a stream handler to the package logger.

    Calling it again replaces the handler instead of adding another one.

    Args:
        level: Log level name; defaults to PaginationSettings.log_level

    Returns:
        The configured package logger
    """
    log_level = (level or get_settings().log_level).upper()

    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(getattr(logging, log_level, logging.WARNING))

    for handler in list(logger.handlers):
        if getattr(handler, "_pagebuilder_handler", False):
            logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(DEFAULT_TEXT_FORMAT, datefmt=DEFAULT_DATE_FORMAT))
    handler._pagebuilder_handler = True  # type: ignore[attr-defined]
    logger.addHandler(handler)
    return logger
