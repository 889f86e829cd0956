"""Tests for the logging bootstrap."""

from __future__ import annotations

import logging
import logging.handlers
from collections.abc import Iterator
from pathlib import Path

import pytest
from rich.logging import RichHandler

from tapedeck.platform.logging import LOGGER_NAME, enable_file_logging, logger, setup_logger


@pytest.fixture(autouse=True)
def restore_logger() -> Iterator[None]:
    yield
    _ = setup_logger()


def test_module_logger_is_console_only() -> None:
    assert logger.name == LOGGER_NAME
    assert [type(handler) for handler in logger.handlers] == [RichHandler]


def test_repeated_setup_does_not_duplicate_handlers(tmp_path: Path) -> None:
    _ = setup_logger(log_file=tmp_path / "tapedeck.log")
    configured = setup_logger(log_file=tmp_path / "tapedeck.log")

    assert configured is logging.getLogger(LOGGER_NAME)
    assert len(configured.handlers) == 2


def test_file_handler_receives_debug_records(tmp_path: Path) -> None:
    log_file = tmp_path / "logs" / "tapedeck.log"
    configured = setup_logger(log_file=log_file, console_level=logging.CRITICAL)

    configured.debug("Staged recording at %s", "pending.tapedeck")
    for handler in configured.handlers:
        handler.flush()

    assert any(isinstance(h, logging.handlers.RotatingFileHandler) for h in configured.handlers)
    assert "Staged recording at pending.tapedeck" in log_file.read_text(encoding="utf-8")


def test_enable_file_logging_defaults_to_repo_logs(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    import tapedeck.platform.logging.config as logging_config

    monkeypatch.setattr(logging_config, "default_log_file", lambda: tmp_path / "logs" / "tapedeck.log")

    log_file = enable_file_logging()
    logger.info("Saved recording %s", "song.mp3")
    for handler in logger.handlers:
        handler.flush()

    assert log_file == (tmp_path / "logs" / "tapedeck.log").resolve()
    assert "Saved recording song.mp3" in log_file.read_text(encoding="utf-8")
