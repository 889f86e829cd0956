"""Where: src/tapedeck/config/settings.py
What: Load recording settings from TOML into a frozen UserSettings value.
Why: Validate user input once so naming code can trust every field.
"""

from __future__ import annotations

import textwrap
import tomllib
from collections.abc import Mapping
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Final

from tapedeck.config.paths import (
    SETTINGS_PATH_ENV,
    default_settings_path,
    resolve_overridable_path,
)
from tapedeck.platform.logging import enable_file_logging, logger
from tapedeck.shared import MediaFormat, UserSettings

_TEMPLATE: Final[str] = textwrap.dedent(
    """
    # tapedeck recording settings (TOML)
    #
    # Root directory for finished recordings (defaults to ~/Music/tapedeck)
    # output_path = "/path/to/recordings"

    media_format = "mp3"
    bitrate = 128

    # Replaces every space in generated file names
    track_title_separator = " "

    # Store recordings under <artist>/<album> folders
    group_by_folders = false

    # Number recordings; the file-name prefix wins when both are enabled
    order_number_in_front_of_file = false
    order_number_in_media_tag = false
    order_number = 1

    ending_track_delay = true
    mute_ads = true
    minimum_recorded_length_seconds = 30
    record_unknown_track_type = false
    duplicate_already_recorded_track = false

    # Also write logs to <repo_root>/logs/tapedeck.log
    log_to_file = false
    """
).strip() + "\n"

# Read by the loader itself, not part of UserSettings
_LOG_TO_FILE_KEY: Final[str] = "log_to_file"

# TOML key -> UserSettings field
_KEY_TO_FIELD: Final[dict[str, str]] = {
    "output_path": "output_path",
    "media_format": "media_format",
    "bitrate": "bitrate",
    "track_title_separator": "track_title_separator",
    "group_by_folders": "group_by_folders_enabled",
    "order_number_in_media_tag": "order_number_in_media_tag_enabled",
    "order_number_in_front_of_file": "order_number_in_front_of_file_enabled",
    "order_number": "internal_order_number",
    "ending_track_delay": "ending_track_delay_enabled",
    "mute_ads": "mute_ads_enabled",
    "minimum_recorded_length_seconds": "minimum_recorded_length_seconds",
    "record_unknown_track_type": "record_unknown_track_type_enabled",
    "duplicate_already_recorded_track": "duplicate_already_recorded_track",
}

_BOOL_FIELDS: Final[frozenset[str]] = frozenset(
    f.name for f in fields(UserSettings) if f.type in ("bool", bool)
)
_NON_NEGATIVE_INT_FIELDS: Final[frozenset[str]] = frozenset(
    {"internal_order_number", "minimum_recorded_length_seconds"}
)


class SettingsError(Exception):
    """Base exception for recording settings errors."""


class SettingsParseError(SettingsError):
    """Raised when the TOML document cannot be parsed."""


class SettingsValidationError(SettingsError):
    """Raised when the parsed document is semantically invalid."""


@dataclass(slots=True, frozen=True)
class LoadedSettings:
    """Settings value together with the file it came from."""

    path: Path
    settings: UserSettings
    created: bool = False
    log_file: Path | None = None


def load_user_settings(
    *, path: Path | None = None, env: Mapping[str, str] | None = None
) -> LoadedSettings:
    """Load recording settings, writing a template when the file is missing.

    Args:
        path: Optional explicit path to the settings file.
        env: Optional environment mapping used for ``TAPEDECK_SETTINGS_PATH``.

    Returns:
        LoadedSettings: Parsed settings and their source path.

    Raises:
        SettingsParseError: If the file is not valid TOML.
        SettingsValidationError: If a key is unknown or a value has the wrong type.
    """

    resolved_path = resolve_overridable_path(
        explicit_path=path,
        env=env,
        env_var=SETTINGS_PATH_ENV,
        default_factory=default_settings_path,
    )
    created = _write_template_if_missing(resolved_path)

    try:
        with resolved_path.open("rb") as handle:
            document = tomllib.load(handle)
    except tomllib.TOMLDecodeError as exc:
        raise SettingsParseError(f"Invalid TOML in settings file: {resolved_path}") from exc
    except OSError as exc:  # pragma: no cover - rare filesystem failure
        raise SettingsError(f"Failed to read settings file: {resolved_path}") from exc

    log_to_file = document.pop(_LOG_TO_FILE_KEY, False)
    if not isinstance(log_to_file, bool):
        raise SettingsValidationError(f"'{_LOG_TO_FILE_KEY}' must be true or false")

    settings = parse_user_settings(document, base_dir=resolved_path.parent)
    log_file = enable_file_logging() if log_to_file else None
    logger.info("Settings loaded from %s", resolved_path)
    return LoadedSettings(path=resolved_path, settings=settings, created=created, log_file=log_file)


def _write_template_if_missing(path: Path) -> bool:
    """Write the commented settings template unless ``path`` exists."""

    if path.exists():
        return False
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        _ = path.write_text(_TEMPLATE, encoding="utf-8")
    except OSError as exc:
        raise SettingsError(f"Failed to write settings template: {path}") from exc
    logger.info("Created settings template at %s", path)
    return True


def parse_user_settings(document: Mapping[str, Any], *, base_dir: Path | None = None) -> UserSettings:
    """Validate a decoded settings document and build ``UserSettings``.

    Relative ``output_path`` values are resolved against ``base_dir``.
    """

    unknown = sorted(set(document) - set(_KEY_TO_FIELD))
    if unknown:
        raise SettingsValidationError(f"Unknown settings keys: {', '.join(unknown)}")

    values: dict[str, Any] = {}
    for key, raw in document.items():
        field_name = _KEY_TO_FIELD[key]
        values[field_name] = _convert(key, field_name, raw, base_dir)

    return UserSettings(**values)


def _convert(key: str, field_name: str, raw: Any, base_dir: Path | None) -> Any:
    if field_name == "output_path":
        if not isinstance(raw, str) or not raw.strip():
            raise SettingsValidationError(f"'{key}' must be a non-empty string")
        output_path = Path(raw).expanduser()
        if not output_path.is_absolute() and base_dir is not None:
            output_path = base_dir / output_path
        return output_path

    if field_name == "media_format":
        if not isinstance(raw, str):
            raise SettingsValidationError(f"'{key}' must be a string")
        try:
            return MediaFormat.from_user_input(raw)
        except ValueError as exc:
            raise SettingsValidationError(str(exc)) from exc

    if field_name == "track_title_separator":
        if not isinstance(raw, str):
            raise SettingsValidationError(f"'{key}' must be a string")
        return raw

    if field_name in _BOOL_FIELDS:
        if not isinstance(raw, bool):
            raise SettingsValidationError(f"'{key}' must be true or false")
        return raw

    # bool is an int subclass; reject it for numeric keys.
    if isinstance(raw, bool) or not isinstance(raw, int):
        raise SettingsValidationError(f"'{key}' must be an integer")
    if field_name == "bitrate" and raw <= 0:
        raise SettingsValidationError(f"'{key}' must be positive")
    if field_name in _NON_NEGATIVE_INT_FIELDS and raw < 0:
        raise SettingsValidationError(f"'{key}' must not be negative")
    return raw


__all__ = [
    "LoadedSettings",
    "SettingsError",
    "SettingsParseError",
    "SettingsValidationError",
    "load_user_settings",
    "parse_user_settings",
]
