"""
Summary: Facade tying naming, collision checks and staging to one track.
Why: The recorder needs a single object per track that owns every path decision.
"""

from __future__ import annotations

from logging import Logger, getLogger
from pathlib import PurePath

from tapedeck.shared import Track, UserSettings

from ..domain.output_file import OutputFile
from .builder import build_output_file
from .collision import final_file_exists
from .lifecycle import (
    RecordingState,
    StagedRecording,
    delete_pending_file,
    evaluate_recording,
)
from .ports import FilesystemPort, MediaTagWriterPort


class OutputPathError(RuntimeError):
    """Raised when the configured output directory is unusable."""


class FileManager:
    """Resolve, stage and complete the output file of one track."""

    _settings: UserSettings
    _track: Track
    _filesystem: FilesystemPort
    _tag_writer: MediaTagWriterPort | None
    _logger: Logger

    def __init__(
        self,
        settings: UserSettings,
        track: Track,
        filesystem: FilesystemPort,
        *,
        tag_writer: MediaTagWriterPort | None = None,
        logger: Logger | None = None,
    ) -> None:
        self._settings = settings
        self._track = track
        self._filesystem = filesystem
        self._tag_writer = tag_writer
        self._logger = logger or getLogger(__name__)

    @property
    def root(self) -> PurePath:
        return self._settings.output_path

    def get_output_file(self) -> OutputFile:
        """Build the OutputFile and make sure its directory exists.

        Raises:
            OutputPathError: If the directory cannot be created, is not a
                directory, or is not writable.
        """

        root = self.root
        if not root.parts:
            raise OutputPathError("No output path configured")

        output_file = build_output_file(self._track, self._settings, root)
        try:
            self._filesystem.make_directories(output_file.path)
        except OSError as exc:
            self._logger.error("Output directory %s is not usable: %s", output_file.path, exc)
            raise OutputPathError(f"Cannot use output directory {output_file.path}") from exc
        if not self._filesystem.is_writable(output_file.path):
            self._logger.error("Output directory %s is not writable", output_file.path)
            raise OutputPathError(f"Output directory {output_file.path} is not writable")
        return output_file

    def is_path_file_name_exists(self) -> bool:
        """Return True when this track was already recorded under the same name."""

        return final_file_exists(self._track, self._settings, self._filesystem, self.root)

    def stage(self) -> StagedRecording:
        """Start a recording attempt and return its pending handle."""

        return StagedRecording(
            self.get_output_file(),
            filesystem=self._filesystem,
            root=self.root,
            prune_folders=self._settings.group_by_folders_enabled,
            logger=self._logger,
        )

    def complete(self, recording: StagedRecording, recorded_seconds: float) -> RecordingState:
        """Finalize ``recording`` or discard it when the capture must not be kept.

        Tags are written to the pending file before the rename so the final
        file only ever appears fully tagged. A tag writer error propagates and
        leaves the recording pending.

        Raises:
            FinalizeError: If the rename to the final name fails.
        """

        reason = evaluate_recording(self._track, self._settings, recorded_seconds)
        if reason is not None:
            recording.discard(reason)
            return recording.state

        if self._tag_writer is not None:
            self._tag_writer.write(recording.pending_path, self._track, self._settings)
        _ = recording.finalize()
        return recording.state

    def delete_file(self, path: PurePath) -> None:
        """Best-effort delete of ``path``, pruning grouped folders left empty."""

        delete_pending_file(
            self._filesystem,
            path,
            root=self.root,
            prune_folders=self._settings.group_by_folders_enabled,
            logger=self._logger,
        )


__all__ = ["FileManager", "OutputPathError"]
