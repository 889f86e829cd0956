# Where: tapedeck.shared.__init__
# What: Provide a concise import surface for shared dataclasses.
# Why: Encourage consistent reuse of shared records across features.

"""Shared cross-cutting records exposed at the package level."""

from .track import TITLE_SEGMENT_JOINER, UNTITLED_ALBUM, Track
from .user_settings import MediaFormat, UserSettings

__all__ = ["MediaFormat", "TITLE_SEGMENT_JOINER", "Track", "UNTITLED_ALBUM", "UserSettings"]
