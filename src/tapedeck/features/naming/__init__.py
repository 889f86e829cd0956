# Path: `src/tapedeck/features/naming/__init__.py`
# Summary: Export naming feature domain, use case and adapter symbols.
# Why: Provide a stable import surface for the recorder and tests.

from .adapters import LocalFilesystemAdapter
from .domain import (
    PENDING_EXTENSION,
    POSIX_ILLEGAL_CHARACTERS,
    WINDOWS_ILLEGAL_CHARACTERS,
    OutputFile,
    sanitize,
)
from .usecases import (
    DiscardReason,
    FileManager,
    FilesystemPort,
    FinalizeError,
    MediaTagWriterPort,
    OutputPathError,
    RecordingEvent,
    RecordingState,
    RecordingStateError,
    StagedRecording,
    build_file_name,
    build_output_file,
    evaluate_recording,
    final_file_exists,
    folder_segment,
    format_order_number,
    resolve_folder,
)

__all__ = [
    "DiscardReason",
    "FileManager",
    "FilesystemPort",
    "FinalizeError",
    "LocalFilesystemAdapter",
    "MediaTagWriterPort",
    "OutputFile",
    "OutputPathError",
    "PENDING_EXTENSION",
    "POSIX_ILLEGAL_CHARACTERS",
    "RecordingEvent",
    "RecordingState",
    "RecordingStateError",
    "StagedRecording",
    "WINDOWS_ILLEGAL_CHARACTERS",
    "build_file_name",
    "build_output_file",
    "evaluate_recording",
    "final_file_exists",
    "folder_segment",
    "format_order_number",
    "resolve_folder",
    "sanitize",
]
