"""Structured logging module for MKV Remux.

Provides configurable logging with JSON format support and file rotation.
"""

from mkv_remux.logging.config import SourceTagFilter, configure_logging
from mkv_remux.logging.handlers import JSONFormatter

__all__ = [
    "JSONFormatter",
    "SourceTagFilter",
    "configure_logging",
]
