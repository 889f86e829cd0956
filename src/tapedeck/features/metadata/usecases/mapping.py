"""
Summary: Populate Track records from catalog track and album documents.
Why: Providers return loosely shaped JSON; naming needs defaults instead of missing keys.
"""

from __future__ import annotations

import re
from collections.abc import Iterable, Mapping
from typing import Any, Final

from tapedeck.platform.logging import logger
from tapedeck.shared import Track

from .artwork import ArtTiers, select_art_tiers

_YEAR_PATTERN: Final[re.Pattern[str]] = re.compile(r"^\s*(\d{4})")

# Last.fm names its image sizes; "mega" is only used when "extralarge" is absent.
_LASTFM_SIZES: Final[dict[str, str]] = {
    "small": "small",
    "medium": "medium",
    "large": "large",
    "extralarge": "extra_large",
    "mega": "extra_large",
}


def parse_year(release_date: str | None) -> int:
    """Return the year of an ISO-like release date, or 0 when unknown."""

    if not release_date:
        return 0
    match = _YEAR_PATTERN.match(release_date)
    return int(match.group(1)) if match else 0


def parse_number(value: Any) -> int:
    """Coerce a provider number (int or numeric string) to ``int``; 0 otherwise."""

    if isinstance(value, bool):
        return 0
    if isinstance(value, int):
        return max(value, 0)
    if isinstance(value, str) and value.strip().isdigit():
        return int(value.strip())
    return 0


def _names(entries: Iterable[Mapping[str, Any]] | None) -> list[str]:
    return [str(entry["name"]) for entry in entries or () if entry.get("name")]


def map_spotify_track(track: Track, payload: Mapping[str, Any]) -> None:
    """Copy title, position, disc and performers from a Spotify track document."""

    track.title = payload.get("name")
    track.album_position = parse_number(payload.get("track_number"))
    track.disc = parse_number(payload.get("disc_number"))
    track.performers = _names(payload.get("artists"))


def map_spotify_album(track: Track, payload: Mapping[str, Any]) -> None:
    """Copy album name, artists, genres, year and art from a Spotify album document."""

    track.album_artists = _names(payload.get("artists"))
    track.album = payload.get("name")
    track.genres = [str(genre) for genre in payload.get("genres") or ()]
    track.year = parse_year(payload.get("release_date"))
    select_art_tiers(payload.get("images")).apply(track)


def map_lastfm_track(track: Track, payload: Mapping[str, Any]) -> None:
    """Copy album, position, genres and art from a Last.fm ``track.getInfo`` document.

    Fields the document does not carry keep their current value except art,
    which is replaced as a whole.
    """

    album = payload.get("album") or {}
    if album.get("title"):
        track.album = str(album["title"])
    if album.get("artist") and not track.album_artists:
        track.album_artists = [str(album["artist"])]

    position = parse_number((album.get("@attr") or {}).get("position"))
    if position:
        track.album_position = position

    tags = (payload.get("toptags") or {}).get("tag") or []
    if isinstance(tags, Mapping):
        tags = [tags]
    genres = _names(tags)
    if genres:
        track.genres = genres

    _lastfm_art(album.get("image")).apply(track)
    logger.debug("Mapped Last.fm metadata for %s", track)


def _lastfm_art(images: Iterable[Mapping[str, Any]] | None) -> ArtTiers:
    by_tier: dict[str, str] = {}
    for image in images or ():
        url = image.get("#text")
        tier = _LASTFM_SIZES.get(str(image.get("size", "")))
        if not url or tier is None:
            continue
        if tier == "extra_large" and image.get("size") == "mega" and tier in by_tier:
            continue
        by_tier[tier] = str(url)
    return ArtTiers(
        extra_large=by_tier.get("extra_large"),
        large=by_tier.get("large"),
        medium=by_tier.get("medium"),
        small=by_tier.get("small"),
    )


__all__ = [
    "map_lastfm_track",
    "map_spotify_album",
    "map_spotify_track",
    "parse_number",
    "parse_year",
]
