"""Summary: Read-only recording settings shared by naming, lifecycle and tagging.
Why: One frozen value keeps every component of a session on the same policy."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import StrEnum
from pathlib import PurePath

from tapedeck.config.paths import default_output_path


class MediaFormat(StrEnum):
    """Audio container written by the encoder."""

    MP3 = "mp3"
    WAV = "wav"

    @staticmethod
    def from_user_input(value: str) -> "MediaFormat":
        """Translate raw configuration input into the matching format."""

        normalized = value.strip().lower()
        for media_format in MediaFormat:
            if media_format.value == normalized:
                return media_format
        valid = ", ".join(f.value for f in MediaFormat)
        msg = f"Unsupported media format '{value}'. Valid options: {valid}"
        raise ValueError(msg)

    @property
    def extension(self) -> str:
        return self.value.lower()


@dataclass(frozen=True, slots=True)
class UserSettings:
    """Naming and recording policy for one session."""

    output_path: PurePath = field(default_factory=default_output_path)
    media_format: MediaFormat = MediaFormat.MP3
    bitrate: int = 128
    track_title_separator: str = " "
    group_by_folders_enabled: bool = False
    order_number_in_media_tag_enabled: bool = False
    order_number_in_front_of_file_enabled: bool = False
    internal_order_number: int = 1
    ending_track_delay_enabled: bool = True
    mute_ads_enabled: bool = True
    minimum_recorded_length_seconds: int = 30
    record_unknown_track_type_enabled: bool = False
    duplicate_already_recorded_track: bool = False

    @property
    def order_number_as_file(self) -> int | None:
        """Order number placed in front of the file name, if enabled."""

        if self.order_number_in_front_of_file_enabled:
            return self.internal_order_number
        return None

    @property
    def order_number_as_title(self) -> int | None:
        """Order number folded into the title segment.

        The in-front placement takes precedence, so only one of the two
        placements is ever honored.
        """

        if self.order_number_in_media_tag_enabled and not self.order_number_in_front_of_file_enabled:
            return self.internal_order_number
        return None

    def with_next_order_number(self) -> "UserSettings":
        """Return a copy whose order number is advanced for the next recording."""

        return replace(self, internal_order_number=self.internal_order_number + 1)


__all__ = ["MediaFormat", "UserSettings"]
