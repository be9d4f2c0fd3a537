"""Tag resolution use case.

Where: features/tagging/usecases/tag_resolver.py
What: Merge embedded tags with parsed title tags and render the standardized title and filename.
Why: The merge policy and both renders must agree for every file of a batch.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import ClassVar, final

from trackdrop.shared.errors import MissingRequiredTag
from trackdrop.shared.sanitizer import Sanitizer
from trackdrop.shared.tag_record import TagName, TagRecord

from ..domain.template import Template, render


@dataclass(frozen=True, slots=True)
class Resolution:
    """Finalized tags plus the rendered display title and filename stem."""

    record: TagRecord
    title: str
    filename: str


def merge_records(embedded: TagRecord, parsed: TagRecord, *, override_artist: bool) -> TagRecord:
    """Fill fields absent from ``embedded`` with ``parsed`` values.

    ``artist`` from ``parsed`` replaces the embedded one only when
    ``override_artist`` is set. ``feat`` names of both sides are kept,
    embedded names first.
    """

    merged: dict[str, str | tuple[str, ...] | None] = {}
    for tag in TagName:
        if tag is TagName.FEAT:
            continue
        current = embedded.raw(tag)
        candidate = parsed.raw(tag)
        if tag is TagName.ARTIST and override_artist and candidate is not None:
            merged[tag.value] = candidate
        else:
            merged[tag.value] = current if current is not None else candidate

    merged["feat"] = embedded.feat + parsed.feat
    return TagRecord(**merged)  # pyright: ignore[reportArgumentType]


@final
class TagResolver:
    """Resolve a file's final tags and names from embedded and parsed records."""

    # " - " left dangling at either end when a bare tag is absent
    DANGLING_SEPARATOR: ClassVar[re.Pattern[str]] = re.compile(r"^(?:\s*-\s+)+|(?:\s+-\s*)+$")

    title_template: Template
    filename_template: Template

    def __init__(self, title_template: Template, filename_template: Template) -> None:
        self.title_template = title_template
        self.filename_template = filename_template

    @classmethod
    def _finalize(cls, text: str) -> str:
        collapsed = " ".join(text.split())
        return cls.DANGLING_SEPARATOR.sub("", collapsed).strip()

    def render_title(self, record: TagRecord) -> str:
        return self._finalize(render(self.title_template, record))

    def render_filename(self, record: TagRecord, title: str) -> str:
        """Render the filename stem, feeding the rendered ``title`` as the title tag."""

        rendered = render(self.filename_template, record.replace(title=title))
        return Sanitizer.sanitize_filename(self._finalize(rendered))

    def resolve(
        self,
        embedded: TagRecord,
        parsed: TagRecord,
        override_artist: bool,
    ) -> Resolution:
        """Merge, validate and render.

        Raises:
            MissingRequiredTag: If no title is available after merging.
        """
        record = merge_records(embedded, parsed, override_artist=override_artist)
        if record.title is None:
            raise MissingRequiredTag(TagName.TITLE.value)

        title = self.render_title(record) or record.title
        filename = self.render_filename(record, title) or Sanitizer.sanitize_filename(title)
        return Resolution(record=record, title=title, filename=filename)


__all__ = ["Resolution", "TagResolver", "merge_records"]
