"""Adapters implementing metadata feature ports."""

from .media_tags import MediaTagError, MutagenTagWriter, build_id3_frames, write_media_tags

__all__ = ["MediaTagError", "MutagenTagWriter", "build_id3_frames", "write_media_tags"]
