"""
Summary: Immutable description of every path one recording attempt touches.
Why: A single value renders both the in-progress and the finished file name.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import PurePath
from typing import Final

# Reserved for in-progress recordings; never a media extension.
PENDING_EXTENSION: Final[str] = "tapedeck"


@dataclass(frozen=True, slots=True)
class OutputFile:
    """Directory, base name and extension of a recording target."""

    path: PurePath
    file: str
    extension: str
    separator: str = " "

    def __post_init__(self) -> None:
        if self.extension.lower() == PENDING_EXTENSION:
            raise ValueError(f"'{PENDING_EXTENSION}' is reserved for pending recordings")

    def to_pending_path(self) -> PurePath:
        """Path the encoder writes to while the recording is in progress."""

        return self.path / f"{self.file}.{PENDING_EXTENSION}"

    def to_final_path(self) -> PurePath:
        """Path of the finished recording."""

        return self.path / f"{self.file}.{self.extension}"

    def to_pending_file_string(self) -> str:
        return str(self.to_pending_path())

    def __str__(self) -> str:
        return str(self.to_final_path())


__all__ = ["OutputFile", "PENDING_EXTENSION"]
