"""Shared pytest fixtures: settings, tracks and an in-memory filesystem."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path, PureWindowsPath

import pytest

from fakes import MemoryFilesystem
from tapedeck.shared import MediaFormat, Track, UserSettings

WINDOWS_ROOT = PureWindowsPath(r"C:\path")


@pytest.fixture
def memory_filesystem() -> MemoryFilesystem:
    """Empty in-memory filesystem."""

    return MemoryFilesystem()


@pytest.fixture
def seeded_filesystem() -> MemoryFilesystem:
    """In-memory filesystem holding an artist folder and one stale pending file."""

    filesystem = MemoryFilesystem()
    filesystem.add_directory(WINDOWS_ROOT / "Artist")
    filesystem.add_file(WINDOWS_ROOT / "Artist" / "Delete_Me.tapedeck", bytes([0x12, 0x34, 0x56, 0xD2]))
    return filesystem


@pytest.fixture
def windows_settings() -> UserSettings:
    """Settings rooted at a Windows path, mirroring a desktop installation."""

    return UserSettings(
        output_path=WINDOWS_ROOT,
        bitrate=128,
        media_format=MediaFormat.MP3,
        minimum_recorded_length_seconds=30,
        group_by_folders_enabled=False,
        track_title_separator=" ",
        order_number_in_media_tag_enabled=False,
        order_number_in_front_of_file_enabled=False,
        ending_track_delay_enabled=True,
        mute_ads_enabled=True,
        record_unknown_track_type_enabled=False,
        internal_order_number=1,
        duplicate_already_recorded_track=True,
    )


@pytest.fixture
def make_local_settings(tmp_path: Path) -> Callable[..., UserSettings]:
    """Factory for settings rooted in ``tmp_path / 'recordings'``."""

    def _make(**overrides: object) -> UserSettings:
        values: dict[str, object] = {"output_path": tmp_path / "recordings"}
        values.update(overrides)
        return UserSettings(**values)  # pyright: ignore[reportArgumentType]

    return _make


@pytest.fixture
def track() -> Track:
    """Track with every naming-relevant field set."""

    return Track(
        title="Title",
        artist="Artist",
        title_extended="Live",
        album="Single",
        ad=False,
    )
