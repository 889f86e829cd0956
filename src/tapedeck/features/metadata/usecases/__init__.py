"""Metadata mapping use cases."""

from .artwork import ArtTiers, select_art_tiers
from .mapping import (
    map_lastfm_track,
    map_spotify_album,
    map_spotify_track,
    parse_number,
    parse_year,
)

__all__ = [
    "ArtTiers",
    "map_lastfm_track",
    "map_spotify_album",
    "map_spotify_track",
    "parse_number",
    "parse_year",
    "select_art_tiers",
]
