# Where: tapedeck.shared.track
# What: Canonical Track record populated by metadata mappers and read by naming.
# Why: Centralize the metadata representation shared across features.

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Final

UNTITLED_ALBUM: Final[str] = "Untitled"
TITLE_SEGMENT_JOINER: Final[str] = " - "


@dataclass
class Track:
    """Metadata for a recorded track.

    Numeric fields stay ``0`` and sequences stay empty when a provider has no
    value for them, so consumers never branch on ``None`` for those fields.
    """

    title: str | None = None
    artist: str | None = None
    title_extended: str | None = None
    album: str | None = None
    album_artists: list[str] = field(default_factory=list)
    album_position: int = 0
    disc: int = 0
    year: int = 0
    genres: list[str] = field(default_factory=list)
    performers: list[str] = field(default_factory=list)
    art_small_url: str | None = None
    art_medium_url: str | None = None
    art_large_url: str | None = None
    art_extra_large_url: str | None = None
    ad: bool = False

    def to_title_string(self) -> str:
        """Render ``title`` followed by the extended qualifier when present."""

        title = self.title or ""
        if self.title_extended:
            return f"{title}{TITLE_SEGMENT_JOINER}{self.title_extended}"
        return title

    def __str__(self) -> str:
        return f"{self.artist or ''}{TITLE_SEGMENT_JOINER}{self.to_title_string()}"


__all__ = ["TITLE_SEGMENT_JOINER", "Track", "UNTITLED_ALBUM"]
