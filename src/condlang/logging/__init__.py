"""Structured logging module for condlang.

Provides configurable logging with JSON format support and file rotation.
"""

from condlang.logging.config import configure_logging
from condlang.logging.handlers import JSONFormatter

__all__ = [
    "JSONFormatter",
    "configure_logging",
]
