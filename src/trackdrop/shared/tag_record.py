"""Canonical tag record shared by the tagging and deposit features.

Where: src/trackdrop/shared/tag_record.py
What: Define the closed TagName set and the immutable TagRecord dataclass.
Why: Every component exchanges metadata through one validated representation.
"""

from __future__ import annotations

import dataclasses
import logging
import re
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from enum import StrEnum
from typing import Any, Final, cast

LOGGER = logging.getLogger(__name__)

# ID3v2.4 separates multiple values with NUL; values must never carry it.
LIST_SEPARATOR: Final[str] = "\x00"

_YEAR_PREFIX: Final[re.Pattern[str]] = re.compile(r"^\s*(\d{4})(?!\d)")


class TagName(StrEnum):
    """Recognized tag names. Templates may only reference these."""

    ALBUM = "album"
    ALBUM_ARTIST = "album_artist"
    ARTIST = "artist"
    FEAT = "feat"
    GENRE = "genre"
    REMIX = "remix"
    TITLE = "title"
    TRACK = "track"
    YEAR = "year"

    @classmethod
    def lookup(cls, name: str) -> "TagName | None":
        """Return the member called ``name`` or None when it is not recognized."""

        try:
            return cls(name.strip().lower())
        except ValueError:
            return None


def join_names(names: Iterable[str]) -> str:
    """Join names as ``A``, ``A & B`` or ``A, B & C``."""

    items = list(names)
    if not items:
        return ""
    if len(items) == 1:
        return items[0]
    return f"{', '.join(items[:-1])} & {items[-1]}"


def _clean(value: object) -> str | None:
    if value is None:
        return None
    text = str(value).replace(LIST_SEPARATOR, "").strip()
    return text or None


def _normalize_year(value: object) -> str | None:
    text = _clean(value)
    if text is None:
        return None
    match = _YEAR_PREFIX.match(text)
    if match is None:
        LOGGER.debug("Discarding year value that is not four digits: %r", text)
        return None
    return match.group(1)


def _normalize_feat(feat: object, artist: str | None) -> tuple[str, ...]:
    if feat is None:
        return ()
    raw: Iterable[object] = [feat] if isinstance(feat, str) else cast(Iterable[object], feat)
    seen: set[str] = set()
    if artist:
        seen.add(artist.casefold())
    names: list[str] = []
    for candidate in raw:
        name = _clean(candidate)
        if name is None or name.casefold() in seen:
            continue
        seen.add(name.casefold())
        names.append(name)
    return tuple(names)


@dataclass(frozen=True, slots=True)
class TagRecord:
    """Structured, immutable tag set for one media file.

    Absent fields are ``None`` (``feat`` is an empty tuple); empty strings are
    never stored. ``feat`` never repeats ``artist`` and ``year`` is always a
    four-digit string when present.
    """

    album: str | None = None
    album_artist: str | None = None
    artist: str | None = None
    feat: tuple[str, ...] = ()
    genre: str | None = None
    remix: str | None = None
    title: str | None = None
    track: str | None = None
    year: str | None = None

    def __post_init__(self) -> None:
        for tag in TagName:
            if tag in (TagName.FEAT, TagName.YEAR):
                continue
            object.__setattr__(self, tag.value, _clean(getattr(self, tag.value)))
        object.__setattr__(self, "year", _normalize_year(self.year))
        object.__setattr__(self, "feat", _normalize_feat(self.feat, self.artist))

    @classmethod
    def from_mapping(cls, values: Mapping[str, Any]) -> "TagRecord":
        """Build a record from a loose mapping, ignoring unrecognized keys."""

        known: dict[str, Any] = {}
        for key, value in values.items():
            tag = TagName.lookup(key)
            if tag is not None:
                known[tag.value] = value
        return cls(**known)

    def raw(self, tag: TagName) -> str | tuple[str, ...] | None:
        """Return the stored value of ``tag`` (a tuple for ``feat``)."""

        return getattr(self, tag.value)

    def value(self, tag: TagName) -> str | None:
        """Return the display value of ``tag``, joining ``feat`` names."""

        if tag is TagName.FEAT:
            return join_names(self.feat) or None
        return getattr(self, tag.value)

    def is_present(self, tag: TagName) -> bool:
        return self.value(tag) is not None

    def replace(self, **changes: Any) -> "TagRecord":
        """Return a copy with ``changes`` applied; invariants are re-checked."""

        return dataclasses.replace(self, **changes)

    def as_dict(self) -> dict[str, str | tuple[str, ...]]:
        """Return present fields only, keyed by tag name."""

        present: dict[str, str | tuple[str, ...]] = {}
        for tag in TagName:
            raw = self.raw(tag)
            if raw:
                present[tag.value] = raw
        return present

    def is_empty(self) -> bool:
        return not self.as_dict()


EMPTY_RECORD: Final[TagRecord] = TagRecord()


__all__ = ["EMPTY_RECORD", "LIST_SEPARATOR", "TagName", "TagRecord", "join_names"]
