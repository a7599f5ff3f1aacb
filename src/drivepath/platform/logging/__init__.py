"""Logging facade exports.

Where: platform/logging/__init__.py
What: Re-export configured logger, setup helpers, and custom Rich handlers.
Why: Provide a single canonical import path for every module that logs.
"""

from __future__ import annotations

from .config import DEFAULT_CONSOLE_LEVEL, DEFAULT_LOG_FILE, logger, setup_logger
from .handlers import PathRichHandler

__all__ = [
    "DEFAULT_CONSOLE_LEVEL",
    "DEFAULT_LOG_FILE",
    "PathRichHandler",
    "logger",
    "setup_logger",
]
