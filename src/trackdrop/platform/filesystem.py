"""Filesystem helpers reused across multiple layers."""

from __future__ import annotations

import shutil
from pathlib import Path

from trackdrop.shared.errors import IOFailure


def ensure_directory(directory: Path) -> Path:
    """Ensure ``directory`` exists as a folder and return it."""

    if directory.exists():
        if not directory.is_dir():
            raise NotADirectoryError(f"Path exists but is not a directory: {directory}")
        return directory

    directory.mkdir(parents=True, exist_ok=True)
    return directory


def ensure_parent_directory(path: Path) -> Path:
    """Ensure the parent directory for ``path`` exists and return it."""

    return ensure_directory(path.parent)


def list_input_files(directory: Path) -> list[Path]:
    """Return regular files directly inside ``directory``, sorted by name.

    Subdirectories are ignored. Raises ``IOFailure`` when the directory
    cannot be read.
    """

    try:
        entries = list(directory.iterdir())
    except OSError as exc:
        raise IOFailure(directory, f"Cannot list input directory ({exc.strerror or exc})") from exc
    return sorted((entry for entry in entries if entry.is_file()), key=lambda entry: entry.name)


def move_file(source: Path, destination: Path) -> Path:
    """Move ``source`` to ``destination``, replacing an existing file.

    Parent directories are created as needed.
    """

    try:
        _ = ensure_parent_directory(destination)
        # A case-only rename on a case-insensitive filesystem targets the source itself
        if destination.is_file() and not destination.samefile(source):
            destination.unlink()
        return Path(shutil.move(str(source), str(destination)))
    except OSError as exc:
        raise IOFailure(source, f"Cannot move file to {destination} ({exc.strerror or exc})") from exc


__all__ = ["ensure_directory", "ensure_parent_directory", "list_input_files", "move_file"]
