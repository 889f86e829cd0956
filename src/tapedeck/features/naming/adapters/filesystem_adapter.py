"""src/tapedeck/features/naming/adapters/filesystem_adapter.py
What: Adapter implementing FilesystemPort on top of the local disk.
Why: Keep filesystem I/O in adapters while use cases target abstractions."""

from __future__ import annotations

import os
from pathlib import Path, PurePath

from tapedeck.platform.filesystem import ensure_directory, remove_directory_if_empty

from ..usecases.ports import FilesystemPort


class LocalFilesystemAdapter(FilesystemPort):
    """Thin wrapper around the local filesystem."""

    def exists(self, path: PurePath) -> bool:
        return Path(path).exists()

    def is_directory(self, path: PurePath) -> bool:
        return Path(path).is_dir()

    def make_directories(self, path: PurePath) -> None:
        _ = ensure_directory(Path(path))

    def is_writable(self, path: PurePath) -> bool:
        return os.access(Path(path), os.W_OK | os.X_OK)

    def rename(self, source: PurePath, destination: PurePath) -> None:
        # os.replace overwrites atomically on both POSIX and Windows.
        os.replace(Path(source), Path(destination))

    def delete_file(self, path: PurePath) -> None:
        Path(path).unlink()

    def remove_directory(self, path: PurePath) -> None:
        remove_directory_if_empty(Path(path))

    def read_bytes(self, path: PurePath) -> bytes:
        return Path(path).read_bytes()

    def write_bytes(self, path: PurePath, data: bytes) -> None:
        _ = Path(path).write_bytes(data)


__all__ = ["LocalFilesystemAdapter"]
