"""
Summary: Validate the title parsing pipeline on realistic upload titles.
Why: Each extraction step shrinks the buffer, so ordering regressions show up as wrong fields.
"""

from __future__ import annotations

import pytest

from trackdrop.features.tagging.domain.title_parser import TitleParser
from trackdrop.shared.tag_record import TagRecord


def test_full_title_yields_every_field() -> None:
    record = TitleParser.parse("A ft. B - T (2024) [R]")

    assert record == TagRecord(artist="A", feat=("B",), title="T", year="2024", remix="R")


def test_plain_title_is_only_title() -> None:
    assert TitleParser.parse("Song") == TagRecord(title="Song")


@pytest.mark.parametrize("raw", ["", "   ", None])
def test_blank_input_yields_empty_record(raw: str | None) -> None:
    assert TitleParser.parse(raw).is_empty()


def test_bracketed_feat_group_is_consumed_whole() -> None:
    record = TitleParser.parse("Artist - Song (feat. Other & Another)")

    assert record == TagRecord(artist="Artist", title="Song", feat=("Other", "Another"))


@pytest.mark.parametrize("marker", ["ft", "ft.", "feat", "feat.", "featuring", "FEAT."])
def test_feat_markers(marker: str) -> None:
    record = TitleParser.parse(f"Artist {marker} Guest - Song")

    assert record.artist == "Artist"
    assert record.feat == ("Guest",)
    assert record.title == "Song"


def test_feat_names_split_on_commas_ampersands_and_semicolons() -> None:
    record = TitleParser.parse("Artist ft. B, C & D; E - Song")

    assert record.feat == ("B", "C", "D", "E")


def test_only_first_feat_marker_is_honoured() -> None:
    record = TitleParser.parse("A ft. B - Song ft. C")

    assert record.feat == ("B",)
    assert record.title == "Song ft. C"


def test_hyphenated_names_survive_feat_capture() -> None:
    record = TitleParser.parse("Artist ft. Jay-Z - Song")

    assert record.feat == ("Jay-Z",)
    assert record.artist == "Artist"
    assert record.title == "Song"


def test_words_containing_marker_are_not_feat() -> None:
    record = TitleParser.parse("Defeat the Soft Parts")

    assert record == TagRecord(title="Defeat the Soft Parts")


def test_year_must_be_exactly_four_digits() -> None:
    assert TitleParser.parse("Song (2024)") == TagRecord(title="Song", year="2024")
    assert TitleParser.parse("Song (20245)").year is None


def test_first_square_group_is_remix() -> None:
    record = TitleParser.parse("Song [Club Edit] (Radio Mix)")

    assert record.remix == "Club Edit"
    assert record.title == "Song (Radio Mix)"


def test_parenthesized_remix_is_used_without_square_group() -> None:
    record = TitleParser.parse("Song (Extended Mix)")

    assert record == TagRecord(title="Song", remix="Extended Mix")


def test_parenthesized_text_without_remix_keyword_stays_in_title() -> None:
    assert TitleParser.parse("Song (Part 2)") == TagRecord(title="Song (Part 2)")


@pytest.mark.parametrize(
    "raw",
    [
        "Song (Official Video)",
        "Song (Official Music Video)",
        "Song [Official Audio]",
        "Song (Lyrics)",
        "Song (Lyric Video)",
        "Song [HD]",
        "Song (Visualizer)",
        "Song [M/V]",
    ],
)
def test_upload_noise_is_stripped(raw: str) -> None:
    assert TitleParser.parse(raw) == TagRecord(title="Song")


def test_noise_with_remix_keyword_is_kept_as_remix() -> None:
    record = TitleParser.parse("Song (Live Video)")

    assert record == TagRecord(title="Song", remix="Live Video")


def test_empty_groups_are_removed() -> None:
    assert TitleParser.parse("Song () []") == TagRecord(title="Song")


def test_unmatched_bracket_stays_literal() -> None:
    assert TitleParser.parse("Song (unfinished") == TagRecord(title="Song (unfinished")


def test_artist_side_lists_put_co_artists_first_in_feat() -> None:
    record = TitleParser.parse("Artist & Band - Song ft. Guest")

    assert record.artist == "Artist"
    assert record.feat == ("Band", "Guest")


def test_only_first_separator_splits_artist_and_title() -> None:
    record = TitleParser.parse("Artist - Song - Live")

    assert record.artist == "Artist"
    assert record.title == "Song - Live"


def test_fully_consumed_text_keeps_other_fields_without_title() -> None:
    assert TitleParser.parse("(2024)") == TagRecord(year="2024")


def test_whitespace_is_collapsed() -> None:
    record = TitleParser.parse("  Artist   -   Big    Song  ")

    assert record == TagRecord(artist="Artist", title="Big Song")


def test_removal_next_to_trailing_separator_keeps_artist() -> None:
    assert TitleParser.parse("Artist - (2024)") == TagRecord(artist="Artist", year="2024")


def test_removal_next_to_leading_separator_keeps_title_clean() -> None:
    assert TitleParser.parse("ft. X - Song") == TagRecord(title="Song", feat=("X",))


def test_dotted_marker_without_space() -> None:
    record = TitleParser.parse("Artist feat.Guest - Song")

    assert record == TagRecord(artist="Artist", feat=("Guest",), title="Song")


def test_unclosed_feat_group_keeps_opener_literal() -> None:
    assert TitleParser.parse("Song (feat. X") == TagRecord(title="Song (", feat=("X",))
