"""
Summary: Exception taxonomy shared by configuration, tagging and deposit flows.
Why: Runners decide between aborting the run and skipping one file by type alone.
"""

from __future__ import annotations

from pathlib import Path


class TrackdropError(Exception):
    """Base class for all errors raised deliberately by trackdrop."""


class ConfigError(TrackdropError):
    """Invalid configuration or template; fatal before any file is touched."""


class MissingRequiredTag(TrackdropError):
    """A file's tags cannot provide a value the pipeline requires."""

    def __init__(self, tag: str, path: Path | None = None) -> None:
        location = f" for {path}" if path is not None else ""
        super().__init__(f"Missing required tag '{tag}'{location}")
        self.tag: str = tag
        self.path: Path | None = path


class IOFailure(TrackdropError):
    """Reading, writing or moving a single file failed."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"{reason}: {path}")
        self.path: Path = path
        self.reason: str = reason


class PlanningError(TrackdropError):
    """A destination path could not be computed for a file."""


PER_FILE_ERRORS: tuple[type[TrackdropError], ...] = (MissingRequiredTag, IOFailure, PlanningError)


__all__ = [
    "ConfigError",
    "IOFailure",
    "MissingRequiredTag",
    "PER_FILE_ERRORS",
    "PlanningError",
    "TrackdropError",
]
