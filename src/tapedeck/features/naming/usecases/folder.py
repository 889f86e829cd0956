"""
Summary: Derive the optional artist/album sub-folder of a recording.
Why: Grouping by folders is the only naming rule that adds directory levels.
"""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import PurePath
from typing import Final

from tapedeck.shared import UNTITLED_ALBUM, Track, UserSettings

from ..domain.sanitizer import WINDOWS_ILLEGAL_CHARACTERS, sanitize

# Windows silently drops these at the end of a directory name.
_TRAILING_DROPPED: Final[str] = ". "


def folder_segment(
    text: str | None,
    illegal_characters: Iterable[str] = WINDOWS_ILLEGAL_CHARACTERS,
) -> str:
    """Sanitize one directory name so it can never leave its parent.

    Trailing dots and spaces are removed, which also turns ``.`` and ``..``
    into an empty segment.
    """

    return sanitize(text, illegal_characters).rstrip(_TRAILING_DROPPED)


def resolve_folder(
    track: Track,
    settings: UserSettings,
    illegal_characters: Iterable[str] = WINDOWS_ILLEGAL_CHARACTERS,
) -> PurePath | None:
    """Return the relative ``artist/album`` fragment, or ``None`` without grouping.

    Both segments are sanitized before they are joined. An empty artist
    segment is left out; an album that is missing, or empty once sanitized,
    falls back to ``UNTITLED_ALBUM``.
    """

    if not settings.group_by_folders_enabled:
        return None

    illegal = frozenset(illegal_characters)
    artist_dir = folder_segment(track.artist, illegal)
    album_dir = folder_segment(track.album, illegal) or UNTITLED_ALBUM
    if not artist_dir:
        return PurePath(album_dir)
    return PurePath(artist_dir, album_dir)


__all__ = ["folder_segment", "resolve_folder"]
