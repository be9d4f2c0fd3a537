"""Ports for tagging use cases.

Where: features/tagging/usecases.
What: Protocols and records describing the tag container access required by runners.
Why: Keep mutagen out of the use cases so tests can substitute in-memory stores.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Protocol, runtime_checkable

from trackdrop.shared.tag_record import TagRecord


@dataclass(frozen=True, slots=True)
class EmbeddedTags:
    """Tags read from a file's container.

    Attributes:
        record: Embedded tags mapped onto the TagRecord fields.
        raw_title: Unparsed title tag, None when the container has none.
        date: Raw date tag (e.g. "2024-04-17"), None when absent.
        supported: False when the file type carries no readable tag container.
    """

    record: TagRecord = field(default_factory=TagRecord)
    raw_title: str | None = None
    date: str | None = None
    supported: bool = True


@runtime_checkable
class TagStorePort(Protocol):
    """Read and write tag containers of media files."""

    def read(self, path: Path) -> EmbeddedTags:
        """Return embedded tags; raises IOFailure when the file cannot be read."""
        ...

    def write(self, path: Path, record: TagRecord, title: str) -> None:
        """Persist ``record`` with ``title`` as the title tag; raises IOFailure."""
        ...


__all__ = ["EmbeddedTags", "TagStorePort"]
