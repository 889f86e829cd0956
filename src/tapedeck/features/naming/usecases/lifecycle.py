"""
Summary: Pending, finalized and discarded states of one staged recording.
Why: The pending-to-final rename is the only step readers of finished files can observe.
"""

from __future__ import annotations

from enum import StrEnum
from logging import Logger, getLogger
from pathlib import PurePath

from tapedeck.shared import Track, UserSettings

from ..domain.output_file import OutputFile
from .ports import FilesystemPort


class RecordingState(StrEnum):
    """States of a staged recording; FINALIZED and DISCARDED are terminal."""

    PENDING = "pending"
    FINALIZED = "finalized"
    DISCARDED = "discarded"


class DiscardReason(StrEnum):
    """Why a recording was thrown away instead of finalized."""

    TOO_SHORT = "too_short"
    ADVERTISEMENT = "advertisement"
    CANCELLED = "cancelled"


class RecordingEvent(StrEnum):
    """Structured event identifiers for recording lifecycle logs."""

    STAGED = "recording.staged"
    FINALIZED = "recording.finalized"
    FINALIZE_ERROR = "recording.finalize.error"
    DISCARDED = "recording.discarded"
    CLEANUP_ERROR = "recording.cleanup.error"


class RecordingStateError(RuntimeError):
    """Raised when a transition is requested from a terminal state."""


class FinalizeError(RuntimeError):
    """Raised when the pending file cannot be renamed to its final name."""


def evaluate_recording(
    track: Track,
    settings: UserSettings,
    recorded_seconds: float,
) -> DiscardReason | None:
    """Return why a completed capture must be discarded, or None to keep it."""

    if track.ad and settings.mute_ads_enabled:
        return DiscardReason.ADVERTISEMENT
    if recorded_seconds < settings.minimum_recorded_length_seconds:
        return DiscardReason.TOO_SHORT
    return None


def _normalize(path: PurePath) -> PurePath:
    """Collapse ``.`` and ``..`` parts without touching the filesystem."""

    parts: list[str] = []
    for part in path.parts:
        if part == ".":
            continue
        if part == ".." and parts and parts[-1] != ".." and parts[-1] != path.anchor:
            _ = parts.pop()
            continue
        parts.append(part)
    return type(path)(*parts)


def prune_empty_folders(
    filesystem: FilesystemPort,
    directory: PurePath,
    *,
    stop_at: PurePath | None,
    logger: Logger,
) -> None:
    """Remove ``directory`` and its empty parents below ``stop_at``.

    Pruning stops at the first directory that cannot be removed, and never
    touches a directory that is not below ``stop_at`` once ``..`` parts are
    collapsed. Without ``stop_at`` only ``directory`` itself is attempted.
    Failures are logged and never raised.
    """

    root = _normalize(stop_at) if stop_at is not None else None
    current = directory
    while True:
        if root is not None:
            normalized = _normalize(current)
            if normalized == root or root not in normalized.parents:
                return
        try:
            filesystem.remove_directory(current)
        except OSError as exc:
            logger.debug(
                "Kept folder %s: %s",
                current,
                exc,
                extra={"recording_event": RecordingEvent.CLEANUP_ERROR},
            )
            return
        logger.debug("Removed empty folder %s", current)
        if stop_at is None:
            return
        current = current.parent


class StagedRecording:
    """One recording attempt, from the pending file to a terminal state.

    The encoder writes to :meth:`pending_path`. :meth:`finalize` renames it to
    :meth:`final_path` with a single filesystem rename; :meth:`discard` deletes
    it and, when ``prune_folders`` is set, removes grouped folders that end up
    empty.
    """

    _output_file: OutputFile
    _filesystem: FilesystemPort
    _root: PurePath | None
    _prune_folders: bool
    _logger: Logger
    _state: RecordingState
    _discard_reason: DiscardReason | None

    def __init__(
        self,
        output_file: OutputFile,
        *,
        filesystem: FilesystemPort,
        root: PurePath | None = None,
        prune_folders: bool = False,
        logger: Logger | None = None,
    ) -> None:
        self._output_file = output_file
        self._filesystem = filesystem
        self._root = root
        self._prune_folders = prune_folders
        self._logger = logger or getLogger(__name__)
        self._state = RecordingState.PENDING
        self._discard_reason = None
        self._logger.debug(
            "Staged recording at %s",
            self.pending_path,
            extra={"recording_event": RecordingEvent.STAGED},
        )

    @property
    def output_file(self) -> OutputFile:
        return self._output_file

    @property
    def state(self) -> RecordingState:
        return self._state

    @property
    def discard_reason(self) -> DiscardReason | None:
        return self._discard_reason

    @property
    def pending_path(self) -> PurePath:
        return self._output_file.to_pending_path()

    @property
    def final_path(self) -> PurePath:
        return self._output_file.to_final_path()

    def finalize(self) -> PurePath:
        """Promote the pending file to its final name and return the final path.

        An existing final file is replaced. A failed rename leaves the
        recording pending so the caller can still discard it.

        Raises:
            RecordingStateError: If the recording already reached a terminal state.
            FinalizeError: If the rename fails.
        """

        self._require_pending("finalize")
        try:
            self._filesystem.rename(self.pending_path, self.final_path)
        except OSError as exc:
            self._logger.error(
                "Failed to finalize recording %s: %s",
                self.final_path,
                exc,
                extra={"recording_event": RecordingEvent.FINALIZE_ERROR},
            )
            raise FinalizeError(f"Could not rename {self.pending_path} to {self.final_path}") from exc

        self._state = RecordingState.FINALIZED
        self._logger.info(
            "Saved recording %s",
            self.final_path,
            extra={"recording_event": RecordingEvent.FINALIZED},
        )
        return self.final_path

    def discard(self, reason: DiscardReason = DiscardReason.CANCELLED) -> None:
        """Delete the pending file and prune emptied grouped folders.

        Cleanup is best-effort: missing files, non-empty folders and other
        filesystem errors are logged, never raised.

        Raises:
            RecordingStateError: If the recording already reached a terminal state.
        """

        self._require_pending("discard")
        self._state = RecordingState.DISCARDED
        self._discard_reason = reason
        delete_pending_file(
            self._filesystem,
            self.pending_path,
            root=self._root,
            prune_folders=self._prune_folders,
            logger=self._logger,
        )
        self._logger.info(
            "Discarded recording %s (%s)",
            self._output_file.file,
            reason,
            extra={"recording_event": RecordingEvent.DISCARDED},
        )

    def _require_pending(self, action: str) -> None:
        if self._state is not RecordingState.PENDING:
            raise RecordingStateError(
                f"Cannot {action} a recording that is already {self._state}"
            )


def delete_pending_file(
    filesystem: FilesystemPort,
    path: PurePath,
    *,
    root: PurePath | None,
    prune_folders: bool,
    logger: Logger,
) -> None:
    """Delete ``path`` and, if requested, its emptied parent folders; never raises."""

    try:
        filesystem.delete_file(path)
    except FileNotFoundError:
        logger.debug("Pending file already gone: %s", path)
    except OSError as exc:
        logger.warning(
            "Failed to delete pending file %s: %s",
            path,
            exc,
            extra={"recording_event": RecordingEvent.CLEANUP_ERROR},
        )

    if prune_folders:
        prune_empty_folders(filesystem, path.parent, stop_at=root, logger=logger)


__all__ = [
    "DiscardReason",
    "FinalizeError",
    "RecordingEvent",
    "RecordingState",
    "RecordingStateError",
    "StagedRecording",
    "delete_pending_file",
    "evaluate_recording",
    "prune_empty_folders",
]
