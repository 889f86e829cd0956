"""Media tag writer.

Where: src/tapedeck/features/metadata/adapters/media_tags.py
What: Embed Track metadata into recorded MP3 and WAV files as ID3 frames.
Why: Keep mutagen usage behind the MediaTagWriterPort so lifecycle code stays I/O free.
"""

from __future__ import annotations

from pathlib import Path, PurePath

from mutagen import MutagenError
from mutagen.id3 import (
    ID3,
    TALB,
    TCON,
    TDRC,
    TIT2,
    TPE1,
    TPE2,
    TPOS,
    TRCK,
    Frame,
    ID3NoHeaderError,
)
from mutagen.wave import WAVE

from tapedeck.features.naming.usecases.ports import MediaTagWriterPort
from tapedeck.platform.logging import logger
from tapedeck.shared import MediaFormat, Track, UserSettings

_UTF8 = 3


class MediaTagError(RuntimeError):
    """Raised when tags cannot be written to a recording."""


def build_id3_frames(track: Track, settings: UserSettings) -> list[Frame]:
    """Return the ID3 frames describing ``track``.

    Empty values produce no frame. The track number is the session order
    number when ``order_number_in_media_tag_enabled`` is set, otherwise the
    album position.
    """

    frames: list[Frame] = []

    title = track.to_title_string()
    if title:
        frames.append(TIT2(encoding=_UTF8, text=[title]))

    performers = track.performers or ([track.artist] if track.artist else [])
    if performers:
        frames.append(TPE1(encoding=_UTF8, text=list(performers)))

    album_artists = track.album_artists or ([track.artist] if track.artist else [])
    if album_artists:
        frames.append(TPE2(encoding=_UTF8, text=list(album_artists)))

    if track.album:
        frames.append(TALB(encoding=_UTF8, text=[track.album]))

    track_number = (
        settings.internal_order_number
        if settings.order_number_in_media_tag_enabled
        else track.album_position
    )
    if track_number:
        frames.append(TRCK(encoding=_UTF8, text=[str(track_number)]))

    if track.disc:
        frames.append(TPOS(encoding=_UTF8, text=[str(track.disc)]))

    if track.year:
        frames.append(TDRC(encoding=_UTF8, text=[str(track.year)]))

    if track.genres:
        frames.append(TCON(encoding=_UTF8, text=list(track.genres)))

    return frames


class MutagenTagWriter(MediaTagWriterPort):
    """Write ID3 frames with mutagen, choosing the container from the settings.

    The container comes from ``settings.media_format`` rather than the file
    suffix so pending files can be tagged before they are finalized.
    """

    def write(self, path: PurePath, track: Track, settings: UserSettings) -> None:
        target = Path(path)
        frames = build_id3_frames(track, settings)
        try:
            if settings.media_format is MediaFormat.WAV:
                self._write_wave(target, frames)
            else:
                self._write_mp3(target, frames)
        except (MutagenError, OSError) as exc:
            logger.error("Failed to write tags to %s: %s", target, exc)
            raise MediaTagError(f"Could not write tags to {target}") from exc
        logger.debug("Wrote %d tag frames to %s", len(frames), target)

    @staticmethod
    def _write_mp3(path: Path, frames: list[Frame]) -> None:
        try:
            tags = ID3(path)
        except ID3NoHeaderError:
            tags = ID3()
        for frame in frames:
            tags.add(frame)
        tags.save(path, v2_version=4)

    @staticmethod
    def _write_wave(path: Path, frames: list[Frame]) -> None:
        audio = WAVE(path)
        if audio.tags is None:
            audio.add_tags()
        for frame in frames:
            audio.tags.add(frame)
        audio.save()


def write_media_tags(path: PurePath, track: Track, settings: UserSettings) -> None:
    """Write ``track`` metadata into the recording at ``path``."""

    MutagenTagWriter().write(path, track, settings)


__all__ = ["MediaTagError", "MutagenTagWriter", "build_id3_frames", "write_media_tags"]
