"""Utility modules for Arroba.

Provides:
- logger: get_logger for logging
"""

from arroba.utils.logger import get_logger

__all__ = [
    "get_logger",
]
