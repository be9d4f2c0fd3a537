# Where: trackdrop.shared.__init__
# What: Provide a concise import surface for shared dataclasses and helpers.
# Why: Both features build on the same record, errors and result types.

"""Shared cross-cutting types exposed at the package level."""

from .errors import (
    ConfigError,
    IOFailure,
    MissingRequiredTag,
    PER_FILE_ERRORS,
    PlanningError,
    TrackdropError,
)
from .processing_types import FileAction, ProcessResult, ProcessingEvent, RunContext
from .sanitizer import Sanitizer
from .tag_record import EMPTY_RECORD, TagName, TagRecord, join_names

__all__ = [
    "ConfigError",
    "EMPTY_RECORD",
    "FileAction",
    "IOFailure",
    "MissingRequiredTag",
    "PER_FILE_ERRORS",
    "PlanningError",
    "ProcessResult",
    "ProcessingEvent",
    "RunContext",
    "Sanitizer",
    "TagName",
    "TagRecord",
    "TrackdropError",
    "join_names",
]
