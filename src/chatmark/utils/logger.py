"""Logging helpers for chatmark.

Thin wrapper over the standard library logging module. The library never
installs handlers; applications configure output.

Example:
    >>> from chatmark.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("Parsed reply")
"""

from __future__ import annotations

import logging

ROOT_LOGGER_NAME = "chatmark"


def get_logger(name: str) -> logging.Logger:
    """Get a logger namespaced under ``chatmark``.

    Args:
        name: Logger name (typically __name__)

    Returns:
        logging.Logger instance

    Example:
        >>> get_logger("renderers").name
        'chatmark.renderers'
    """
    if not (name == ROOT_LOGGER_NAME or name.startswith(f"{ROOT_LOGGER_NAME}.")):
        name = f"{ROOT_LOGGER_NAME}.{name}"
    return logging.getLogger(name)
