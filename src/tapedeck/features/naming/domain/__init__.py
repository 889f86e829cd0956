"""Domain values of the naming feature."""

from .output_file import PENDING_EXTENSION, OutputFile
from .sanitizer import (
    POSIX_ILLEGAL_CHARACTERS,
    WINDOWS_ILLEGAL_CHARACTERS,
    sanitize,
)

__all__ = [
    "OutputFile",
    "PENDING_EXTENSION",
    "POSIX_ILLEGAL_CHARACTERS",
    "WINDOWS_ILLEGAL_CHARACTERS",
    "sanitize",
]
