"""Heuristic title parsing.

Where: src/trackdrop/features/tagging/domain/title_parser.py
What: Turn a free-form title such as "Artist ft. Other - Song (2024) [Club Mix]"
      into a partial TagRecord.
Why: Uploaded media often carries everything in a single title tag; each
     extraction step is a separate match-and-remove so ordering stays explicit.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from typing import ClassVar, Final, final

from trackdrop.shared.tag_record import TagRecord

LOGGER = logging.getLogger(__name__)

_CLOSING: Final[dict[str, str]] = {"(": ")", "[": "]"}


@dataclass
class _TitleBuffer:
    """Working copy of the title that extraction steps consume."""

    text: str
    found: dict[str, str] = field(default_factory=dict)
    feat: list[str] = field(default_factory=list)

    def cut(self, start: int, end: int) -> str:
        """Remove ``text[start:end]`` and return it.

        Whitespace is collapsed at the cut point only; one space is kept there
        even at either end so an adjacent " - " separator survives.
        """

        removed = self.text[start:end]
        self.text = self.text[:start].rstrip() + " " + self.text[end:].lstrip()
        return removed


@final
class TitleParser:
    """Extract feat, year, remix, artist and title from a raw title string."""

    FEAT_MARKER: ClassVar[re.Pattern[str]] = re.compile(
        r"(?<!\w)(?:featuring(?=\s|$)|(?:feat|ft)(?:\.|(?=\s|$)))", re.IGNORECASE
    )
    # Where a feat list ends: the artist/title separator or any bracket
    FEAT_STOP: ClassVar[re.Pattern[str]] = re.compile(r"\s-(?=\s|$)|[()\[\]]")
    NAME_SPLIT: ClassVar[re.Pattern[str]] = re.compile(r"\s*[,&;]\s*")
    YEAR_GROUP: ClassVar[re.Pattern[str]] = re.compile(r"\((\d{4})\)")
    BRACKET_GROUP: ClassVar[re.Pattern[str]] = re.compile(r"\(([^()\[\]]*)\)|\[([^()\[\]]*)\]")
    SQUARE_GROUP: ClassVar[re.Pattern[str]] = re.compile(r"\[([^\[\]]*)\]")
    PAREN_GROUP: ClassVar[re.Pattern[str]] = re.compile(r"\(([^()]*)\)")
    NOISE: ClassVar[re.Pattern[str]] = re.compile(
        r"\b(?:official\s+)?(?:music\s+|lyric\s+)?video\b"
        r"|\blyrics?\b"
        r"|\b(?:official\s+)?audio\b"
        r"|\bvisuali[sz]er\b"
        r"|\bh[qd]\b"
        r"|(?<!\w)m/?v(?!\w)",
        re.IGNORECASE,
    )
    REMIX_KEYWORD: ClassVar[re.Pattern[str]] = re.compile(
        r"\b(?:re)?mix(?:ed)?\b|\bedit\b|\bremaster(?:ed)?\b|\bbootleg\b"
        r"|\binstrumental\b|\bversion\b|\blive\b|\bacoustic\b",
        re.IGNORECASE,
    )
    ARTIST_SEPARATOR: ClassVar[str] = " - "
    ARTIST_LIST_SPLIT: ClassVar[re.Pattern[str]] = re.compile(r"\s*(?:&|,)\s*")

    @classmethod
    def parse(cls, raw_title: str | None) -> TagRecord:
        """Parse ``raw_title`` into a partial record.

        Never raises. When no structure is recognized the record holds only
        ``title`` (the trimmed input).
        """

        original = " ".join((raw_title or "").split())
        if not original:
            return TagRecord()

        buffer = _TitleBuffer(original)
        cls._extract_feat(buffer)
        cls._extract_year(buffer)
        cls._strip_noise(buffer)
        cls._extract_remix(buffer)
        cls._split_artist_title(buffer)

        record = TagRecord(feat=tuple(buffer.feat), **buffer.found)
        if record.is_empty():
            record = TagRecord(title=original)

        LOGGER.debug("Parsed title %r into %s", original, record.as_dict())
        return record

    @classmethod
    def _extract_feat(cls, buffer: _TitleBuffer) -> None:
        match = cls.FEAT_MARKER.search(buffer.text)
        if match is None:
            return

        text = buffer.text
        start, capture_start = match.start(), match.end()
        before = text[:start].rstrip()
        opener = before[-1:] if before[-1:] in _CLOSING else ""

        close_index = text.find(_CLOSING[opener], capture_start) if opener else -1
        if close_index != -1:
            open_index = len(before) - 1
            capture = text[capture_start:close_index]
            _ = buffer.cut(open_index, close_index + 1)
        else:
            # An unclosed opener stays literal in the title
            stop = cls.FEAT_STOP.search(text, capture_start)
            end = stop.start() if stop is not None else len(text)
            capture = text[capture_start:end]
            _ = buffer.cut(start, end)

        names = [name.strip() for name in cls.NAME_SPLIT.split(capture)]
        buffer.feat.extend(name for name in names if name)

    @classmethod
    def _extract_year(cls, buffer: _TitleBuffer) -> None:
        match = cls.YEAR_GROUP.search(buffer.text)
        if match is None:
            return
        buffer.found["year"] = match.group(1)
        _ = buffer.cut(match.start(), match.end())

    @classmethod
    def _strip_noise(cls, buffer: _TitleBuffer) -> None:
        spans: list[tuple[int, int]] = []
        for match in cls.BRACKET_GROUP.finditer(buffer.text):
            content = match.group(1) if match.group(1) is not None else match.group(2)
            if not content.strip():
                spans.append(match.span())
            elif cls.NOISE.search(content) and not cls.REMIX_KEYWORD.search(content):
                spans.append(match.span())
        for start, end in reversed(spans):
            _ = buffer.cut(start, end)

    @classmethod
    def _extract_remix(cls, buffer: _TitleBuffer) -> None:
        match = cls.SQUARE_GROUP.search(buffer.text)
        if match is None:
            match = next(
                (
                    candidate
                    for candidate in cls.PAREN_GROUP.finditer(buffer.text)
                    if cls.REMIX_KEYWORD.search(candidate.group(1))
                ),
                None,
            )
        if match is None:
            return

        remix = match.group(1).strip()
        if remix:
            buffer.found["remix"] = remix
        _ = buffer.cut(match.start(), match.end())

    @classmethod
    def _split_artist_title(cls, buffer: _TitleBuffer) -> None:
        text = buffer.text
        left, separator, right = text.partition(cls.ARTIST_SEPARATOR)
        if not separator:
            if text.strip():
                buffer.found["title"] = text.strip()
            return

        artists = [name for name in cls.ARTIST_LIST_SPLIT.split(left.strip()) if name]
        if artists:
            buffer.found["artist"] = artists[0]
            # Co-artists named on the artist side come before explicit feat names
            buffer.feat[:0] = artists[1:]
        if right.strip():
            buffer.found["title"] = right.strip()


__all__ = ["TitleParser"]
