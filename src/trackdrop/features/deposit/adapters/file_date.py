"""Associated-date lookup for chronological organization."""

from __future__ import annotations

import re
from datetime import date, datetime
from pathlib import Path
from typing import Final

from trackdrop.shared.errors import IOFailure

_YEAR_MONTH: Final[re.Pattern[str]] = re.compile(r"^\s*(\d{4})-(\d{2})")


def parse_tag_date(value: str | None) -> date | None:
    """Return the first day of the month named by a ``YYYY-MM...`` tag value.

    Year-only values ("2024") carry no month and yield None.
    """
    if not value:
        return None
    match = _YEAR_MONTH.match(value)
    if match is None:
        return None
    year, month = int(match.group(1)), int(match.group(2))
    if not 1 <= month <= 12:
        return None
    return date(year, month, 1)


def associated_date(path: Path, embedded_date: str | None = None) -> date:
    """Return the embedded date when it has a month, else the modification time."""

    tagged = parse_tag_date(embedded_date)
    if tagged is not None:
        return tagged
    try:
        modified = path.stat().st_mtime
    except OSError as exc:
        raise IOFailure(path, f"Cannot read modification time ({exc.strerror or exc})") from exc
    return datetime.fromtimestamp(modified).date()


__all__ = ["associated_date", "parse_tag_date"]
