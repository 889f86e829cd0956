"""
Summary: Validate the per-track FileManager against in-memory and local filesystems.
Why: The recorder relies on it for directory creation, duplicates and cleanup.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import replace
from pathlib import Path, PurePath, PureWindowsPath

import pytest

from fakes import MemoryFilesystem

from tapedeck.features.naming import (
    PENDING_EXTENSION,
    FileManager,
    LocalFilesystemAdapter,
    OutputFile,
    OutputPathError,
    RecordingState,
    final_file_exists,
)
from tapedeck.shared import Track, UserSettings

ROOT = PureWindowsPath(r"C:\path")


def test_get_output_file_creates_grouped_directory(
    seeded_filesystem: MemoryFilesystem, track: Track, windows_settings: UserSettings
) -> None:
    settings = replace(windows_settings, group_by_folders_enabled=True)
    manager = FileManager(settings, track, seeded_filesystem)

    output_file = manager.get_output_file()

    assert str(output_file) == r"C:\path\Artist\Single\Title - Live.mp3"
    assert seeded_filesystem.is_directory(ROOT / "Artist" / "Single")


def test_get_output_file_creates_untitled_album_directory(
    seeded_filesystem: MemoryFilesystem, track: Track, windows_settings: UserSettings
) -> None:
    track.album = ""
    settings = replace(windows_settings, group_by_folders_enabled=True)

    output_file = FileManager(settings, track, seeded_filesystem).get_output_file()

    assert str(output_file) == r"C:\path\Artist\Untitled\Title - Live.mp3"
    assert seeded_filesystem.is_directory(ROOT / "Artist" / "Untitled")


def test_get_output_file_is_repeatable(
    memory_filesystem: MemoryFilesystem, track: Track, windows_settings: UserSettings
) -> None:
    """An existing directory is not an error."""

    settings = replace(windows_settings, group_by_folders_enabled=True)
    manager = FileManager(settings, track, memory_filesystem)

    assert manager.get_output_file() == manager.get_output_file()


def test_get_output_file_rejects_file_as_root(
    memory_filesystem: MemoryFilesystem, track: Track, windows_settings: UserSettings
) -> None:
    memory_filesystem.add_file(ROOT, b"not a folder")

    with pytest.raises(OutputPathError) as excinfo:
        _ = FileManager(windows_settings, track, memory_filesystem).get_output_file()

    assert isinstance(excinfo.value.__cause__, OSError)


def test_get_output_file_rejects_empty_root(
    memory_filesystem: MemoryFilesystem, track: Track, windows_settings: UserSettings
) -> None:
    settings = replace(windows_settings, output_path=PurePath(""))

    with pytest.raises(OutputPathError):
        _ = FileManager(settings, track, memory_filesystem).get_output_file()


def test_get_output_file_rejects_read_only_directory(
    memory_filesystem: MemoryFilesystem, track: Track, windows_settings: UserSettings
) -> None:
    memory_filesystem.add_directory(ROOT)
    memory_filesystem.read_only.add(ROOT)

    with pytest.raises(OutputPathError, match="not writable"):
        _ = FileManager(windows_settings, track, memory_filesystem).get_output_file()


def test_stage_fails_fast_on_read_only_album_folder(
    memory_filesystem: MemoryFilesystem, track: Track, windows_settings: UserSettings
) -> None:
    settings = replace(windows_settings, group_by_folders_enabled=True)
    memory_filesystem.add_directory(ROOT / "Artist" / "Single")
    memory_filesystem.read_only.add(ROOT / "Artist" / "Single")

    with pytest.raises(OutputPathError):
        _ = FileManager(settings, track, memory_filesystem).stage()


def test_is_path_file_name_exists_reports_missing_file(
    seeded_filesystem: MemoryFilesystem, track: Track, windows_settings: UserSettings
) -> None:
    assert FileManager(windows_settings, track, seeded_filesystem).is_path_file_name_exists() is False


def test_exists_flips_after_finalize(
    memory_filesystem: MemoryFilesystem, track: Track, windows_settings: UserSettings
) -> None:
    manager = FileManager(windows_settings, track, memory_filesystem)
    assert final_file_exists(track, windows_settings, memory_filesystem) is False

    recording = manager.stage()
    memory_filesystem.write_bytes(recording.pending_path, b"audio")
    assert final_file_exists(track, windows_settings, memory_filesystem) is False

    _ = recording.finalize()

    assert final_file_exists(track, windows_settings, memory_filesystem) is True
    assert manager.is_path_file_name_exists() is True


def test_delete_file_deletes_pending_file(
    seeded_filesystem: MemoryFilesystem, windows_settings: UserSettings
) -> None:
    track = Track(artist="Artist", title="Delete_Me", title_extended="")
    settings = replace(windows_settings, track_title_separator="_")
    output_file = OutputFile(
        path=ROOT / "Artist",
        file="Delete_Me",
        extension=settings.media_format.extension,
        separator=settings.track_title_separator,
    )
    pending = output_file.to_pending_path()
    assert seeded_filesystem.exists(pending)

    FileManager(settings, track, seeded_filesystem).delete_file(pending)

    assert not seeded_filesystem.exists(pending)
    assert seeded_filesystem.is_directory(ROOT / "Artist")


def test_delete_file_removes_folder_when_grouping(
    seeded_filesystem: MemoryFilesystem, windows_settings: UserSettings
) -> None:
    track = Track(artist="Artist", title="Delete_Me", title_extended="")
    settings = replace(windows_settings, group_by_folders_enabled=True, track_title_separator="_")
    pending = ROOT / "Artist" / f"Delete_Me.{PENDING_EXTENSION}"

    FileManager(settings, track, seeded_filesystem).delete_file(pending)

    assert not seeded_filesystem.exists(pending)
    assert not seeded_filesystem.exists(ROOT / "Artist")
    assert seeded_filesystem.is_directory(ROOT)


def test_local_round_trip_finalize(
    make_local_settings: Callable[..., UserSettings], track: Track
) -> None:
    """Finalized files keep the bytes written to the pending file."""

    settings = make_local_settings(group_by_folders_enabled=True)
    filesystem = LocalFilesystemAdapter()
    manager = FileManager(settings, track, filesystem)
    content = bytes(range(256)) * 8

    recording = manager.stage()
    pending = Path(recording.pending_path)
    assert pending.parent.is_dir()
    _ = pending.write_bytes(content)

    assert manager.complete(recording, recorded_seconds=240) is RecordingState.FINALIZED

    final = Path(recording.final_path)
    assert final == Path(settings.output_path) / "Artist" / "Single" / "Title - Live.mp3"
    assert not pending.exists()
    assert final.read_bytes() == content
    assert manager.is_path_file_name_exists() is True


def test_local_discard_removes_grouped_folders(
    make_local_settings: Callable[..., UserSettings], track: Track
) -> None:
    settings = make_local_settings(group_by_folders_enabled=True)
    manager = FileManager(settings, track, LocalFilesystemAdapter())

    recording = manager.stage()
    _ = Path(recording.pending_path).write_bytes(b"partial")
    state = manager.complete(recording, recorded_seconds=2)

    root = Path(settings.output_path)
    assert state is RecordingState.DISCARDED
    assert not Path(recording.pending_path).exists()
    assert not (root / "Artist").exists()
    assert root.is_dir()


def test_local_discard_keeps_shared_album_folder(
    make_local_settings: Callable[..., UserSettings], track: Track
) -> None:
    settings = make_local_settings(group_by_folders_enabled=True)
    album_dir = Path(settings.output_path) / "Artist" / "Single"
    album_dir.mkdir(parents=True)
    _ = (album_dir / "Another Song.mp3").write_bytes(b"done")

    recording = FileManager(settings, track, LocalFilesystemAdapter()).stage()
    _ = Path(recording.pending_path).write_bytes(b"partial")
    recording.discard()

    assert album_dir.is_dir()
    assert (album_dir / "Another Song.mp3").exists()
    assert not Path(recording.pending_path).exists()


def test_dot_artist_stays_inside_root(make_local_settings: Callable[..., UserSettings], tmp_path: Path) -> None:
    settings = make_local_settings(group_by_folders_enabled=True)
    root = Path(settings.output_path)
    neighbour = tmp_path / "victim"
    neighbour.mkdir()
    manager = FileManager(settings, Track(artist="..", title="Song", album="victim"), LocalFilesystemAdapter())

    recording = manager.stage()
    pending = Path(recording.pending_path)
    _ = pending.write_bytes(b"partial")

    assert pending.resolve().is_relative_to(root.resolve())
    assert pending.parent == root / "victim"

    recording.discard()

    assert neighbour.is_dir()
    assert not (root / "victim").exists()
    assert root.is_dir()
