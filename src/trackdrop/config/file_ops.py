"""Utility helpers for configuration file persistence."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

from trackdrop.shared.errors import ConfigError


def write_text_file(path: Path, content: str) -> None:
    """Persist textual content ensuring parent directories exist."""

    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        _ = path.write_text(content, encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"Cannot write {path}: {exc.strerror or exc}") from exc


def ensure_file_with_template(
    path: Path,
    *,
    template_provider: Callable[[], str],
    overwrite: bool = False,
) -> bool:
    """Create ``path`` from ``template_provider`` unless it already exists.

    Returns:
        bool: ``True`` when the file was written, ``False`` if it was kept.
    """

    if path.exists() and not overwrite:
        return False
    write_text_file(path, template_provider())
    return True


__all__ = ["ensure_file_with_template", "write_text_file"]
