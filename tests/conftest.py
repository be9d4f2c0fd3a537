"""Shared pytest fixtures: an in-memory tag store standing in for mutagen."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

import pytest

from trackdrop.features.tagging.usecases.ports import EmbeddedTags
from trackdrop.shared.errors import IOFailure
from trackdrop.shared.tag_record import TagRecord


@dataclass
class MemoryTagStore:
    """TagStorePort keyed by file name; unknown names read as unsupported."""

    tags: dict[str, EmbeddedTags] = field(default_factory=dict)
    written: dict[str, tuple[TagRecord, str]] = field(default_factory=dict)
    failing: set[str] = field(default_factory=set)

    def read(self, path: Path) -> EmbeddedTags:
        if path.name in self.failing:
            raise IOFailure(path, "Cannot read tags (corrupt)")
        return self.tags.get(path.name, EmbeddedTags(supported=False))

    def write(self, path: Path, record: TagRecord, title: str) -> None:
        if path.name in self.failing:
            raise IOFailure(path, "Cannot write tags (corrupt)")
        self.written[path.name] = (record, title)


@pytest.fixture
def tag_store() -> MemoryTagStore:
    return MemoryTagStore()
