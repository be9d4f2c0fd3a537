"""Tests for TagRecord invariants and helpers."""

from __future__ import annotations

import dataclasses
import logging

import pytest

from trackdrop.shared.tag_record import EMPTY_RECORD, TagName, TagRecord, join_names


def test_blank_values_are_absent() -> None:
    record = TagRecord(artist="  ", title=" Song ", album="")

    assert record.artist is None
    assert record.album is None
    assert record.title == "Song"


def test_year_is_normalized_to_leading_digits() -> None:
    assert TagRecord(year="2024-04-17").year == "2024"
    assert TagRecord(year="2024").year == "2024"


def test_invalid_year_is_dropped_with_debug_log(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.DEBUG, logger="trackdrop.shared.tag_record")

    record = TagRecord(year="sometime")

    assert record.year is None
    assert any("four digits" in message for message in caplog.messages)


def test_feat_excludes_artist_and_duplicates() -> None:
    record = TagRecord(artist="Alpha", feat=("beta", "ALPHA", "Beta", "Gamma", " "))

    assert record.feat == ("beta", "Gamma")


def test_list_separator_is_stripped() -> None:
    record = TagRecord(artist="Alpha\x00", genre="Pop\x00Rock")

    assert record.artist == "Alpha"
    assert record.genre == "PopRock"


def test_record_is_frozen() -> None:
    record = TagRecord(title="Song")

    with pytest.raises(dataclasses.FrozenInstanceError):
        record.title = "Other"  # pyright: ignore[reportAttributeAccessIssue]


@pytest.mark.parametrize(
    ("names", "expected"),
    [
        ((), ""),
        (("B",), "B"),
        (("B", "C"), "B & C"),
        (("B", "C", "D"), "B, C & D"),
    ],
)
def test_join_names(names: tuple[str, ...], expected: str) -> None:
    assert join_names(names) == expected


def test_value_joins_feat_and_reports_absence() -> None:
    record = TagRecord(title="Song", feat=("B", "C"))

    assert record.value(TagName.FEAT) == "B & C"
    assert record.value(TagName.ARTIST) is None
    assert record.is_present(TagName.TITLE)
    assert not record.is_present(TagName.REMIX)


def test_replace_rechecks_invariants() -> None:
    record = TagRecord(artist="A", feat=("B",))

    updated = record.replace(artist="B")

    assert updated.artist == "B"
    assert updated.feat == ()
    assert record.feat == ("B",)


def test_from_mapping_ignores_unknown_keys() -> None:
    record = TagRecord.from_mapping({"Artist": "A", "TITLE": "Song", "comment": "x"})

    assert record == TagRecord(artist="A", title="Song")


def test_as_dict_and_is_empty() -> None:
    assert EMPTY_RECORD.is_empty()
    assert TagRecord(title="Song", feat=("B",)).as_dict() == {"feat": ("B",), "title": "Song"}


def test_tag_name_lookup() -> None:
    assert TagName.lookup(" Album_Artist ") is TagName.ALBUM_ARTIST
    assert TagName.lookup("composer") is None
