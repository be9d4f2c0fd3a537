"""
Summary: Exercise the tag step against an in-memory tag store and a real temp directory.
Why: Confirmation, skipping and rename conflicts decide what happens to user files.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING

import pytest
from pytest_mock import MockerFixture

from trackdrop.features.tagging.domain.template import Template
from trackdrop.features.tagging.usecases.ports import EmbeddedTags
from trackdrop.features.tagging.usecases.tag_resolver import TagResolver
from trackdrop.features.tagging.usecases.tag_runner import TagRunner
from trackdrop.shared.processing_types import FileAction
from trackdrop.shared.tag_record import TagRecord

if TYPE_CHECKING:
    from conftest import MemoryTagStore

UPLOAD_TITLE = "A ft. B - T (2024) [R]"
RENAMED = "A - T (B) [R].mp3"


@pytest.fixture
def resolver() -> TagResolver:
    return TagResolver(
        Template.parse("{title} ({feat}) [{remix}]"),
        Template.parse("{artist} - {title}"),
    )


@pytest.fixture
def inbox(tmp_path: Path, tag_store: MemoryTagStore) -> Path:
    directory = tmp_path / "inbox"
    directory.mkdir()
    _ = (directory / "upload.mp3").write_bytes(b"audio")
    tag_store.tags["upload.mp3"] = EmbeddedTags(raw_title=UPLOAD_TITLE)
    return directory


def test_auto_tag_writes_tags_and_renames(
    inbox: Path, tag_store: MemoryTagStore, resolver: TagResolver
) -> None:
    results = TagRunner(tag_store, resolver, auto_tag=True).run(inbox)

    assert len(results) == 1
    result = results[0]
    assert result.action is FileAction.TAGGED
    assert result.target_path == inbox / RENAMED
    assert (inbox / RENAMED).read_bytes() == b"audio"
    assert not (inbox / "upload.mp3").exists()

    record, title = tag_store.written["upload.mp3"]
    assert title == "T (B) [R]"
    assert record.artist == "A"
    assert record.feat == ("B",)
    assert record.year == "2024"


def test_unconfirmed_proposals_are_skipped_without_prompt(
    inbox: Path, tag_store: MemoryTagStore, resolver: TagResolver
) -> None:
    results = TagRunner(tag_store, resolver).run(inbox)

    assert results[0].action is FileAction.SKIPPED
    assert results[0].success
    assert tag_store.written == {}
    assert (inbox / "upload.mp3").exists()


@pytest.mark.parametrize("accepted", [True, False])
def test_confirm_callback_decides(
    inbox: Path,
    tag_store: MemoryTagStore,
    resolver: TagResolver,
    mocker: MockerFixture,
    accepted: bool,
) -> None:
    confirm = mocker.Mock(return_value=accepted)

    results = TagRunner(tag_store, resolver, confirm=confirm).run(inbox)

    confirm.assert_called_once()
    path, embedded, resolution = confirm.call_args.args
    assert path == inbox / "upload.mp3"
    assert embedded.raw_title == UPLOAD_TITLE
    assert resolution.filename == "A - T (B) [R]"
    expected = FileAction.TAGGED if accepted else FileAction.SKIPPED
    assert results[0].action is expected
    assert ("upload.mp3" in tag_store.written) is accepted


def test_unsupported_and_untitled_files_are_skipped(
    inbox: Path, tag_store: MemoryTagStore, resolver: TagResolver
) -> None:
    _ = (inbox / "cover.jpg").write_bytes(b"img")
    _ = (inbox / "untitled.mp3").write_bytes(b"audio")
    tag_store.tags["untitled.mp3"] = EmbeddedTags(record=TagRecord(artist="A"))

    results = TagRunner(tag_store, resolver, auto_tag=True).run(inbox)

    by_name = {result.source_path.name: result for result in results}
    assert by_name["cover.jpg"].action is FileAction.SKIPPED
    assert by_name["cover.jpg"].warnings == ["unsupported file type"]
    assert by_name["untitled.mp3"].action is FileAction.SKIPPED
    assert by_name["untitled.mp3"].warnings == ["no title tag"]
    assert by_name["upload.mp3"].action is FileAction.TAGGED


def test_per_file_failures_do_not_stop_the_batch(
    inbox: Path,
    tag_store: MemoryTagStore,
    resolver: TagResolver,
    caplog: pytest.LogCaptureFixture,
) -> None:
    _ = (inbox / "broken.mp3").write_bytes(b"")
    _ = (inbox / "year-only.mp3").write_bytes(b"")
    tag_store.failing.add("broken.mp3")
    tag_store.tags["year-only.mp3"] = EmbeddedTags(raw_title="(2024)")
    caplog.set_level(logging.ERROR)

    results = TagRunner(tag_store, resolver, auto_tag=True).run(inbox)

    assert [result.source_path.name for result in results] == [
        "broken.mp3",
        "upload.mp3",
        "year-only.mp3",
    ]
    assert results[0].error_kind == "IOFailure"
    assert results[1].action is FileAction.TAGGED
    assert results[2].error_kind == "MissingRequiredTag"
    assert not results[2].success
    assert len(caplog.records) == 2
    assert all(
        getattr(record, "processing_event", None) == "processing.file.error"
        for record in caplog.records
    )


def test_rename_conflict_keeps_original_name(
    inbox: Path,
    tag_store: MemoryTagStore,
    resolver: TagResolver,
    caplog: pytest.LogCaptureFixture,
) -> None:
    # Not in the store, so the tag step itself leaves it alone
    _ = (inbox / RENAMED).write_bytes(b"existing")
    caplog.set_level(logging.WARNING)

    results = TagRunner(tag_store, resolver, auto_tag=True).run(inbox)

    upload = next(result for result in results if result.source_path.name == "upload.mp3")
    assert upload.action is FileAction.TAGGED
    assert upload.target_path == inbox / "upload.mp3"
    assert upload.warnings
    assert (inbox / RENAMED).read_bytes() == b"existing"
    assert any(
        getattr(record, "processing_event", None) == "processing.file.conflict"
        for record in caplog.records
    )


def test_rename_conflict_with_auto_overwrite_replaces(
    inbox: Path, tag_store: MemoryTagStore, resolver: TagResolver
) -> None:
    _ = (inbox / RENAMED).write_bytes(b"existing")

    results = TagRunner(tag_store, resolver, auto_tag=True, auto_overwrite=True).run(inbox)

    upload = next(result for result in results if result.source_path.name == "upload.mp3")
    assert upload.target_path == inbox / RENAMED
    assert (inbox / RENAMED).read_bytes() == b"audio"


def test_empty_directory_logs_no_files(
    tmp_path: Path,
    tag_store: MemoryTagStore,
    resolver: TagResolver,
    caplog: pytest.LogCaptureFixture,
) -> None:
    caplog.set_level(logging.INFO)

    assert TagRunner(tag_store, resolver).run(tmp_path) == []
    assert any(
        getattr(record, "processing_event", None) == "processing.run.no_files"
        for record in caplog.records
    )
