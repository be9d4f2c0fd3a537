"""src/trackdrop/shared/processing_types.py
Where: Shared layer used by the tag and deposit runners.
What: Structured log events and per-file result records.
Why: Keep runners and the CLI display agreeing on one result shape.
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from enum import StrEnum
from pathlib import Path
from typing import Any

from .tag_record import TagRecord


class ProcessingEvent(StrEnum):
    """Structured event identifiers for batch processing logs."""

    RUN_START = "processing.run.start"
    RUN_COMPLETE = "processing.run.complete"
    RUN_NO_FILES = "processing.run.no_files"
    FILE_START = "processing.file.start"
    FILE_TAGGED = "processing.file.tagged"
    FILE_MOVE = "processing.file.move"
    FILE_SKIP = "processing.file.skip"
    FILE_CONFLICT = "processing.file.conflict"
    FILE_ERROR = "processing.file.error"


class FileAction(StrEnum):
    """What happened to a file during a run."""

    TAGGED = "tagged"
    MOVED = "moved"
    SKIPPED = "skipped"
    UNCHANGED = "unchanged"
    FAILED = "failed"


@dataclass(slots=True)
class RunContext:
    """Mutable bookkeeping for one batch run."""

    step: str
    directory: Path
    total_files: int
    start_time: float = field(default_factory=time.perf_counter)
    processed: int = 0
    skipped: int = 0
    failed: int = 0

    def record(self, result: "ProcessResult") -> None:
        """Count ``result`` in the matching bucket."""

        if not result.success:
            self.failed += 1
        elif result.action is FileAction.SKIPPED:
            self.skipped += 1
        else:
            self.processed += 1

    def duration_seconds(self) -> float:
        return time.perf_counter() - self.start_time

    def summary_extra(self) -> dict[str, Any]:
        """Return a dictionary suitable for structured logging extras."""

        return {
            "step": self.step,
            "directory": str(self.directory),
            "total_files": self.total_files,
            "processed": self.processed,
            "skipped": self.skipped,
            "failed": self.failed,
            "duration_seconds": round(self.duration_seconds(), 4),
        }


@dataclass
class ProcessResult:
    """Result of processing one file in a batch."""

    source_path: Path
    action: FileAction = FileAction.UNCHANGED
    target_path: Path | None = None
    success: bool = True
    error_kind: str | None = None
    error_message: str | None = None
    record: TagRecord | None = None
    title: str | None = None
    filename: str | None = None
    warnings: list[str] = field(default_factory=list)

    @classmethod
    def failure(cls, source_path: Path, error: Exception) -> "ProcessResult":
        """Build a failed result from a per-file exception."""

        return cls(
            source_path=source_path,
            action=FileAction.FAILED,
            success=False,
            error_kind=type(error).__name__,
            error_message=str(error),
        )


def log_processing(
    logger: logging.Logger,
    level: int,
    event: ProcessingEvent,
    message: str,
    *message_args: object,
    **context: Any,
) -> None:
    """Log ``message`` with a structured ``processing_event`` extra.

    Path values are stringified so file handlers and the Rich console agree.
    """

    extra: dict[str, Any] = {"processing_event": event.value}
    for key, value in context.items():
        extra[key] = str(value) if isinstance(value, Path) else value
    logger.log(level, message, *message_args, extra=extra, stacklevel=2)


__all__ = ["FileAction", "ProcessResult", "ProcessingEvent", "RunContext", "log_processing"]
