"""Logger configuration bootstrap.

Where: platform/logging/config.py
What: Configure global logging defaults and expose the shared application logger.
Why: Separate handler formatting from setup so configuration stays concise.
"""

from __future__ import annotations

import logging
import logging.handlers
import os
from pathlib import Path
from typing import Final

from rich.console import Console
from rich.logging import RichHandler

from tapedeck.config.paths import default_log_file

LOGGER_NAME: Final[str] = "tapedeck"


def setup_logger(
    log_file: Path | None = None,
    console_level: int = logging.INFO,
    file_level: int = logging.DEBUG,
    console: Console | None = None,
) -> logging.Logger:
    """Set up and configure the application logger.

    Handlers from a previous call are closed first so repeated setup (tests,
    settings reloads) never duplicates output.
    """

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(logging.DEBUG)

    for handler in list(logger.handlers):
        handler.close()
    logger.handlers.clear()

    file_formatter = logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )

    console_handler = RichHandler(
        console=console or Console(stderr=True, soft_wrap=True),
        show_path=False,
        markup=False,
    )
    console_handler.setLevel(console_level)
    logger.addHandler(console_handler)

    if log_file is not None:
        resolved_log_file = Path(log_file).expanduser().resolve()
        os.makedirs(resolved_log_file.parent, exist_ok=True)

        file_handler = logging.handlers.RotatingFileHandler(
            resolved_log_file,
            maxBytes=10 * 1024 * 1024,
            backupCount=5,
            encoding="utf-8",
        )
        file_handler.setLevel(file_level)
        file_handler.setFormatter(file_formatter)
        logger.addHandler(file_handler)

    return logger


def enable_file_logging(log_file: Path | None = None, file_level: int = logging.DEBUG) -> Path:
    """Add the rotating file handler, defaulting to ``<repo_root>/logs/tapedeck.log``.

    Returns the resolved log file path.
    """

    resolved_log_file = Path(log_file or default_log_file()).expanduser().resolve()
    _ = setup_logger(log_file=resolved_log_file, file_level=file_level)
    return resolved_log_file


# File output is opt-in through the ``log_to_file`` setting.
logger: Final[logging.Logger] = setup_logger()


__all__ = ["LOGGER_NAME", "enable_file_logging", "setup_logger", "logger"]
