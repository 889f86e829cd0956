"""Filesystem helpers reused across multiple layers."""

from __future__ import annotations

from pathlib import Path


def ensure_directory(directory: Path) -> Path:
    """Ensure ``directory`` exists as a folder and return it."""

    if directory.exists():
        if not directory.is_dir():
            raise NotADirectoryError(f"Path exists but is not a directory: {directory}")
        return directory

    # exist_ok covers a concurrent recording creating the same album folder.
    directory.mkdir(parents=True, exist_ok=True)
    return directory


def remove_directory_if_empty(directory: Path) -> None:
    """Remove ``directory`` when it holds no entries.

    Raises:
        OSError: If the directory is missing, not empty, or cannot be removed.
    """

    if any(directory.iterdir()):
        raise OSError(f"Directory not empty: {directory}")
    directory.rmdir()


__all__ = ["ensure_directory", "remove_directory_if_empty"]
