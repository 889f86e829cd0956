"""Naming and lifecycle use cases."""

from .builder import build_file_name, build_output_file, format_order_number
from .collision import final_file_exists
from .file_manager import FileManager, OutputPathError
from .folder import folder_segment, resolve_folder
from .lifecycle import (
    DiscardReason,
    FinalizeError,
    RecordingEvent,
    RecordingState,
    RecordingStateError,
    StagedRecording,
    evaluate_recording,
)
from .ports import FilesystemPort, MediaTagWriterPort

__all__ = [
    "DiscardReason",
    "FileManager",
    "FilesystemPort",
    "FinalizeError",
    "MediaTagWriterPort",
    "OutputPathError",
    "RecordingEvent",
    "RecordingState",
    "RecordingStateError",
    "StagedRecording",
    "build_file_name",
    "build_output_file",
    "evaluate_recording",
    "final_file_exists",
    "folder_segment",
    "format_order_number",
    "resolve_folder",
]
