"""Minimal logging utilities for Pluma.

Provides a simple get_logger function that wraps the standard library logging.

Example:
    >>> from pluma.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("Parsing document")
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given name.

    Returns a standard library logger with the "pluma." prefix.

    Args:
        name: Logger name (typically __name__)

    Returns:
        logging.Logger instance

    Example:
        >>> logger = get_logger("mymodule")
        >>> logger.name
        'pluma.mymodule'
    """
    if not (name == "pluma" or name.startswith("pluma.")):
        name = f"pluma.{name}"
    return logging.getLogger(name)
