"""Mutagen-backed tag store.

Where: src/trackdrop/features/tagging/adapters/mutagen_store.py
What: Map easy-interface tags (ID3, MP4, Vorbis comments) to and from TagRecord.
Why: Confine container formats to one adapter behind TagStorePort.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any, ClassVar, cast, final

import mutagen
from mutagen import MutagenError

from trackdrop.shared.errors import IOFailure
from trackdrop.shared.tag_record import TagRecord

from ..usecases.ports import EmbeddedTags

LOGGER = logging.getLogger(__name__)


def _first(values: object) -> str | None:
    """Return the first string of a tag value list."""

    if isinstance(values, str):
        return values
    if isinstance(values, (list, tuple)):
        items = cast(list[object], list(values))
        return str(items[0]) if items else None
    return None


def _all(values: object) -> list[str]:
    if isinstance(values, str):
        return [values]
    if isinstance(values, (list, tuple)):
        return [str(item) for item in cast(list[object], list(values))]
    return []


@final
class MutagenTagStore:
    """Tag store using ``mutagen.File(..., easy=True)``."""

    # TagRecord field -> easy tag key
    TAG_MAPPING: ClassVar[dict[str, str]] = {
        "album": "album",
        "album_artist": "albumartist",
        "genre": "genre",
        "track": "tracknumber",
    }

    @staticmethod
    def _open(path: Path) -> Any:
        try:
            return mutagen.File(path, easy=True)  # pyright: ignore[reportPrivateImportUsage]
        except (MutagenError, OSError) as exc:
            raise IOFailure(path, f"Cannot read tags ({exc})") from exc

    def read(self, path: Path) -> EmbeddedTags:
        """Read the embedded tags of ``path``.

        Files mutagen does not recognize yield an empty, unsupported result.
        """
        audio = self._open(path)
        if audio is None:
            return EmbeddedTags(supported=False)

        tags = cast(Mapping[str, object], audio.tags or {})
        values: dict[str, Any] = {
            field: _first(tags.get(key)) for field, key in self.TAG_MAPPING.items()
        }

        # The first artist is primary, any further entries are featured artists
        artists = [name for name in _all(tags.get("artist")) if name.strip()]
        if artists:
            values["artist"] = artists[0]
            values["feat"] = tuple(artists[1:])

        date = _first(tags.get("date"))
        values["year"] = date

        # The title tag is handed over unparsed; TitleParser owns its structure
        raw_title = _first(tags.get("title"))
        record = TagRecord(**values)
        LOGGER.debug("Read tags from %s: %s", path, record.as_dict())
        return EmbeddedTags(record=record, raw_title=raw_title, date=date)

    def write(self, path: Path, record: TagRecord, title: str) -> None:
        """Write ``record`` into ``path`` with ``title`` as the title tag.

        The album artist falls back to the primary artist. Absent fields leave
        existing container values untouched, and a full date whose year already
        matches is kept rather than shortened to the year.
        """
        audio = self._open(path)
        if audio is None:
            raise IOFailure(path, "Unsupported tag container")
        if audio.tags is None:
            audio.add_tags()

        existing_date = _first(cast(Mapping[str, object], audio.tags).get("date"))
        date = record.year
        if date is not None and existing_date is not None and existing_date.strip()[:4] == date:
            date = None

        updates: dict[str, str | None] = {
            "title": title,
            "artist": record.artist,
            "albumartist": record.album_artist or record.artist,
            "date": date,
        }
        for field, key in self.TAG_MAPPING.items():
            if key not in updates:
                updates[key] = getattr(record, field)

        try:
            for key, value in updates.items():
                if value is not None:
                    audio[key] = [value]
            audio.save()
        except (MutagenError, OSError, KeyError, ValueError) as exc:
            raise IOFailure(path, f"Cannot write tags ({exc})") from exc


__all__ = ["MutagenTagStore"]
