# Path: `src/tapedeck/features/metadata/__init__.py`
# Summary: Export metadata mapping helpers and the media tag writer.
# Why: Keep a single import path for recorder wiring.

from .adapters import MediaTagError, MutagenTagWriter, build_id3_frames, write_media_tags
from .usecases import (
    ArtTiers,
    map_lastfm_track,
    map_spotify_album,
    map_spotify_track,
    parse_number,
    parse_year,
    select_art_tiers,
)

__all__ = [
    "ArtTiers",
    "MediaTagError",
    "MutagenTagWriter",
    "build_id3_frames",
    "map_lastfm_track",
    "map_spotify_album",
    "map_spotify_track",
    "parse_number",
    "parse_year",
    "select_art_tiers",
    "write_media_tags",
]
