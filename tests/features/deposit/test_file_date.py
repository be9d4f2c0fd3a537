"""Tests for associated-date lookup."""

from __future__ import annotations

import os
from datetime import date, datetime
from pathlib import Path

import pytest

from trackdrop.features.deposit.adapters.file_date import associated_date, parse_tag_date
from trackdrop.shared.errors import IOFailure


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("2024-04-17", date(2024, 4, 1)),
        ("2024-04", date(2024, 4, 1)),
        ("2024", None),
        ("2024-13-01", None),
        ("", None),
        (None, None),
    ],
)
def test_parse_tag_date(value: str | None, expected: date | None) -> None:
    assert parse_tag_date(value) == expected


def test_embedded_date_wins(tmp_path: Path) -> None:
    path = tmp_path / "song.mp3"
    _ = path.write_bytes(b"")

    assert associated_date(path, "2019-11-02") == date(2019, 11, 1)


def test_falls_back_to_modification_time(tmp_path: Path) -> None:
    path = tmp_path / "song.mp3"
    _ = path.write_bytes(b"")
    stamp = datetime(2023, 5, 6, 12, 0).timestamp()
    os.utime(path, (stamp, stamp))

    assert associated_date(path, "2023") == date(2023, 5, 6)


def test_missing_file_without_tag_date(tmp_path: Path) -> None:
    with pytest.raises(IOFailure):
        _ = associated_date(tmp_path / "missing.mp3")
