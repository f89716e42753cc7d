"""Minimal logging utilities for Arroba.

Provides a simple get_logger function that wraps the standard library logging.

Example:
    >>> from arroba.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("Lexing header line")
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given name.

    Returns a standard library logger with the "arroba." prefix.

    Args:
        name: Logger name (typically __name__)

    Returns:
        logging.Logger instance

    Example:
        >>> logger = get_logger("completion")
        >>> logger.name
        'arroba.completion'
    """
    if not (name == "arroba" or name.startswith("arroba.")):
        name = f"arroba.{name}"
    return logging.getLogger(name)
