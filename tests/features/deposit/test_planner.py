"""
Summary: Validate destination planning for the DROP, A-Z and DATE modes.
Why: Planned paths decide the library layout and must not touch the filesystem.
"""

from __future__ import annotations

from datetime import date
from pathlib import Path

import pytest

from trackdrop.features.deposit.domain.models import OrganizeMode
from trackdrop.features.deposit.domain.planner import DepositPlanner
from trackdrop.shared.errors import ConfigError, PlanningError
from trackdrop.shared.tag_record import TagRecord

ROOT = Path("/library")


def _plan(record: TagRecord, file_name: str, mode: OrganizeMode, file_date: date | None = None) -> Path:
    return DepositPlanner.plan(record, file_name, Path(file_name).suffix, mode, ROOT, file_date)


def test_drop_keeps_file_name() -> None:
    assert _plan(TagRecord(artist="Artist"), "song.mp3", OrganizeMode.DROP) == Path("song.mp3")


def test_alpha_with_artist_and_album() -> None:
    record = TagRecord(artist="Artist", album="Album")

    assert _plan(record, "song.mp3", OrganizeMode.ALPHA_BY_ARTIST) == Path("A/Artist/Album/song.mp3")


@pytest.mark.parametrize("file_name", ["cover.jpg", "front.PNG", "art.webp"])
def test_alpha_images_never_get_album_folder(file_name: str) -> None:
    record = TagRecord(artist="Artist", album="Album")

    assert _plan(record, file_name, OrganizeMode.ALPHA_BY_ARTIST) == Path("A/Artist") / file_name


def test_alpha_without_artist_uses_file_name_bucket() -> None:
    assert _plan(TagRecord(), "hello.mp3", OrganizeMode.ALPHA_BY_ARTIST) == Path("H/hello.mp3")


@pytest.mark.parametrize(
    ("artist", "bucket"),
    [("2Pac", "0-9#"), ("Émilie", "0-9#"), ("!!!", "0-9#"), ("abba", "A")],
)
def test_alpha_buckets(artist: str, bucket: str) -> None:
    planned = _plan(TagRecord(artist=artist), "x.mp3", OrganizeMode.ALPHA_BY_ARTIST)

    assert planned.parts[0] == bucket
    assert planned.parts[1] == artist


def test_alpha_folders_are_sanitized() -> None:
    record = TagRecord(artist="AC/DC", album="Back: In Black")

    assert _plan(record, "x.mp3", OrganizeMode.ALPHA_BY_ARTIST) == Path("A/ACDC/Back In Black/x.mp3")


def test_date_mode_uses_year_and_month() -> None:
    planned = _plan(TagRecord(), "song.mp3", OrganizeMode.CHRONOLOGICAL_BY_DATE, date(2024, 4, 17))

    assert planned == Path("2024/04/song.mp3")


def test_date_mode_without_date_fails() -> None:
    with pytest.raises(PlanningError):
        _ = _plan(TagRecord(), "song.mp3", OrganizeMode.CHRONOLOGICAL_BY_DATE)


def test_build_plan_reports_missing_directories_without_creating_them(tmp_path: Path) -> None:
    source = tmp_path / "inbox" / "song.mp3"
    record = TagRecord(artist="Artist")

    plan = DepositPlanner.build_plan(source, record, OrganizeMode.ALPHA_BY_ARTIST, tmp_path / "music")

    assert plan.target == tmp_path / "music" / "A" / "Artist" / "song.mp3"
    assert plan.create_directory
    assert not (tmp_path / "music").exists()

    (tmp_path / "music" / "A" / "Artist").mkdir(parents=True)
    again = DepositPlanner.build_plan(source, record, OrganizeMode.ALPHA_BY_ARTIST, tmp_path / "music")
    assert not again.create_directory


@pytest.mark.parametrize(
    ("value", "mode"),
    [
        (None, OrganizeMode.DROP),
        ("  ", OrganizeMode.DROP),
        ("a-z", OrganizeMode.ALPHA_BY_ARTIST),
        ("date", OrganizeMode.CHRONOLOGICAL_BY_DATE),
    ],
)
def test_organize_mode_from_user_input(value: str | None, mode: OrganizeMode) -> None:
    assert OrganizeMode.from_user_input(value) is mode


def test_invalid_organize_mode() -> None:
    with pytest.raises(ConfigError, match="Valid options"):
        _ = OrganizeMode.from_user_input("by-genre")
