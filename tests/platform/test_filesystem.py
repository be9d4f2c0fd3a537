"""Tests for filesystem helpers."""

from __future__ import annotations

from pathlib import Path

import pytest

from trackdrop.platform.filesystem import ensure_directory, list_input_files, move_file
from trackdrop.shared.errors import IOFailure


def test_list_input_files_is_sorted_and_non_recursive(tmp_path: Path) -> None:
    for name in ("b.mp3", "A.mp3", "c.jpg"):
        _ = (tmp_path / name).write_bytes(b"")
    (tmp_path / "sub").mkdir()
    _ = (tmp_path / "sub" / "d.mp3").write_bytes(b"")

    assert [path.name for path in list_input_files(tmp_path)] == ["A.mp3", "b.mp3", "c.jpg"]


def test_list_input_files_missing_directory(tmp_path: Path) -> None:
    with pytest.raises(IOFailure, match="Cannot list input directory"):
        _ = list_input_files(tmp_path / "missing")


def test_move_file_creates_parents_and_replaces(tmp_path: Path) -> None:
    source = tmp_path / "song.mp3"
    _ = source.write_bytes(b"new")
    destination = tmp_path / "music" / "A" / "song.mp3"
    destination.parent.mkdir(parents=True)
    _ = destination.write_bytes(b"old")

    moved = move_file(source, destination)

    assert moved == destination
    assert destination.read_bytes() == b"new"
    assert not source.exists()


def test_move_missing_source_raises_io_failure(tmp_path: Path) -> None:
    with pytest.raises(IOFailure):
        _ = move_file(tmp_path / "missing.mp3", tmp_path / "out" / "missing.mp3")


def test_ensure_directory_rejects_files(tmp_path: Path) -> None:
    blocker = tmp_path / "blocker"
    _ = blocker.write_text("x")

    with pytest.raises(NotADirectoryError):
        _ = ensure_directory(blocker)
    assert ensure_directory(tmp_path / "new" / "dir").is_dir()
