"""Summary: Ports defining naming and lifecycle use case dependencies.
Why: Decouple use cases from concrete adapters so tests run without real disk I/O."""

from __future__ import annotations

from pathlib import PurePath
from typing import Protocol, runtime_checkable

from tapedeck.shared import Track, UserSettings


@runtime_checkable
class FilesystemPort(Protocol):
    """Port abstracting the filesystem operations recordings rely on."""

    def exists(self, path: PurePath) -> bool:
        """Return True if a file or directory exists at ``path``."""
        ...

    def is_directory(self, path: PurePath) -> bool:
        """Return True when ``path`` is an existing directory."""
        ...

    def make_directories(self, path: PurePath) -> None:
        """Create ``path`` and its parents; an existing directory is not an error."""
        ...

    def is_writable(self, path: PurePath) -> bool:
        """Return True when new files can be created inside directory ``path``."""
        ...

    def rename(self, source: PurePath, destination: PurePath) -> None:
        """Rename ``source`` to ``destination`` in one step, replacing ``destination``."""
        ...

    def delete_file(self, path: PurePath) -> None:
        """Delete the file at ``path``; raises ``FileNotFoundError`` when missing."""
        ...

    def remove_directory(self, path: PurePath) -> None:
        """Remove an empty directory; raises ``OSError`` when missing or not empty."""
        ...

    def read_bytes(self, path: PurePath) -> bytes:
        """Return the content of the file at ``path``."""
        ...

    def write_bytes(self, path: PurePath, data: bytes) -> None:
        """Create or truncate the file at ``path`` with ``data``."""
        ...


@runtime_checkable
class MediaTagWriterPort(Protocol):
    """Port for embedding track metadata into a recorded file."""

    def write(self, path: PurePath, track: Track, settings: UserSettings) -> None:
        """Write ``track`` metadata into the file at ``path``."""
        ...


__all__ = ["FilesystemPort", "MediaTagWriterPort"]
