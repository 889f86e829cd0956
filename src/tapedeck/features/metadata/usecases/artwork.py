"""Select album art URLs for the four art tiers of a Track."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Any

from tapedeck.shared import Track


@dataclass(frozen=True, slots=True)
class ArtTiers:
    """Art URLs ordered from largest to smallest."""

    extra_large: str | None = None
    large: str | None = None
    medium: str | None = None
    small: str | None = None

    def apply(self, track: Track) -> None:
        track.art_extra_large_url = self.extra_large
        track.art_large_url = self.large
        track.art_medium_url = self.medium
        track.art_small_url = self.small


def _image_size(image: Mapping[str, Any]) -> int:
    height = image.get("height") or 0
    width = image.get("width") or 0
    return max(int(height), int(width))


def select_art_tiers(images: Iterable[Mapping[str, Any]] | None) -> ArtTiers:
    """Assign catalog images to tiers by descending size.

    The largest image becomes extra-large, the next one large, and so on.
    Tiers left over when there are fewer than four images stay ``None``, so a
    single image only fills the extra-large tier. Images without a URL are
    ignored.
    """

    candidates = [image for image in images or () if image.get("url")]
    ranked = sorted(candidates, key=_image_size, reverse=True)
    urls: list[str | None] = [str(image["url"]) for image in ranked[:4]]
    urls.extend([None] * (4 - len(urls)))
    return ArtTiers(extra_large=urls[0], large=urls[1], medium=urls[2], small=urls[3])


__all__ = ["ArtTiers", "select_art_tiers"]
