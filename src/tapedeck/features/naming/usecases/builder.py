"""
Summary: Compose the OutputFile of a recording from track metadata and settings.
Why: Keep the naming rules in one pure function that callers can repeat safely.
"""

from __future__ import annotations

import re
from collections.abc import Iterable
from pathlib import PurePath
from typing import Final

from tapedeck.shared import TITLE_SEGMENT_JOINER, Track, UserSettings

from ..domain.output_file import OutputFile
from ..domain.sanitizer import WINDOWS_ILLEGAL_CHARACTERS, sanitize
from .folder import resolve_folder

ORDER_NUMBER_WIDTH: Final[int] = 3
_WHITESPACE: Final[re.Pattern[str]] = re.compile(r"\s")


def format_order_number(order_number: int) -> str:
    """Zero-pad ``order_number`` so file listings sort in recording order."""

    return str(order_number).zfill(ORDER_NUMBER_WIDTH)


def build_file_name(
    track: Track,
    settings: UserSettings,
    illegal_characters: Iterable[str] = WINDOWS_ILLEGAL_CHARACTERS,
) -> str:
    """Build the base file name (no directory, no extension) for ``track``.

    Segments are joined with ``" - "``; every whitespace character is then
    replaced by the configured separator. The artist segment is left out when
    grouping by folders because the folder already carries it.
    """

    title = track.title or ""
    order_as_title = settings.order_number_as_title
    if order_as_title is not None:
        title = f"{format_order_number(order_as_title)} {title}"

    segments: list[str] = []
    if not settings.group_by_folders_enabled:
        segments.append(track.artist or "")
    segments.append(title)
    if track.title_extended:
        segments.append(track.title_extended)

    name = TITLE_SEGMENT_JOINER.join(segments)

    order_as_file = settings.order_number_as_file
    if order_as_file is not None:
        name = f"{format_order_number(order_as_file)} {name}"

    name = _WHITESPACE.sub(settings.track_title_separator, name)
    return sanitize(name, illegal_characters)


def build_output_file(
    track: Track,
    settings: UserSettings,
    root_path: PurePath | None = None,
    illegal_characters: Iterable[str] = WINDOWS_ILLEGAL_CHARACTERS,
) -> OutputFile:
    """Return the OutputFile for ``track``.

    No directory is created here; identical arguments always produce equal
    values.

    Args:
        track: Metadata of the recording.
        settings: Session settings.
        root_path: Root directory; defaults to ``settings.output_path``.
        illegal_characters: Characters rejected by the target filesystem.
    """

    illegal = frozenset(illegal_characters)
    directory: PurePath = settings.output_path if root_path is None else root_path
    folder = resolve_folder(track, settings, illegal)
    if folder is not None:
        directory = directory.joinpath(*folder.parts)

    return OutputFile(
        path=directory,
        file=build_file_name(track, settings, illegal),
        extension=settings.media_format.extension,
        separator=settings.track_title_separator,
    )


__all__ = ["ORDER_NUMBER_WIDTH", "build_file_name", "build_output_file", "format_order_number"]
