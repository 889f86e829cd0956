"""
Summary: Report whether a recording's final file is already on disk.
Why: Callers decide between skipping and re-recording; this module only answers.
"""

from __future__ import annotations

from pathlib import PurePath

from tapedeck.platform.logging import logger
from tapedeck.shared import Track, UserSettings

from .builder import build_output_file
from .ports import FilesystemPort


def final_file_exists(
    track: Track,
    settings: UserSettings,
    filesystem: FilesystemPort,
    root_path: PurePath | None = None,
) -> bool:
    """Return True when the final rendering for ``track`` already exists."""

    final_path = build_output_file(track, settings, root_path).to_final_path()
    exists = filesystem.exists(final_path)
    if exists:
        logger.debug("Recording already exists: %s", final_path)
    return exists


__all__ = ["final_file_exists"]
