"""
Summary: Remove characters that are illegal in file and directory names.
Why: Keep naming deterministic across hosts by passing the illegal set explicitly.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Final

_CONTROL_CHARACTERS: Final[str] = "".join(chr(code) for code in range(32))

# Union of the characters Windows rejects in file names and in paths.
WINDOWS_ILLEGAL_CHARACTERS: Final[frozenset[str]] = frozenset('"<>|:*?\\/' + _CONTROL_CHARACTERS)

POSIX_ILLEGAL_CHARACTERS: Final[frozenset[str]] = frozenset("/\0")


def sanitize(
    text: str | None,
    illegal_characters: Iterable[str] = WINDOWS_ILLEGAL_CHARACTERS,
) -> str:
    """Remove every illegal character from ``text``.

    Characters are dropped rather than replaced and the order of the
    remaining characters is preserved, which makes the function idempotent.

    Args:
        text: Raw name segment. ``None`` is treated as an empty string.
        illegal_characters: Characters rejected by the target filesystem.

    Returns:
        str: ``text`` without any character from ``illegal_characters``.
    """

    if not text:
        return ""

    illegal = frozenset(illegal_characters)
    return "".join(character for character in text if character not in illegal)


__all__ = [
    "POSIX_ILLEGAL_CHARACTERS",
    "WINDOWS_ILLEGAL_CHARACTERS",
    "sanitize",
]
