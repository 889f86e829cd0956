"""Logging facade exports.

Where: platform/logging/__init__.py
What: Re-export the configured logger and setup helpers.
Why: Provide a single canonical import path for every feature.
"""

from __future__ import annotations

from .config import LOGGER_NAME, enable_file_logging, logger, setup_logger

__all__ = [
    "LOGGER_NAME",
    "enable_file_logging",
    "logger",
    "setup_logger",
]
