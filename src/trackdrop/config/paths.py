"""Shared path utilities for library configuration and logs.

Every library keeps its settings next to its files:

- Config: ``<library_root>/.trackdrop/config.toml``
- Log file: ``<library_root>/.trackdrop/trackdrop.log``

The library root itself comes from ``--library``, then the
``TRACKDROP_LIBRARY`` environment variable, then the working directory.
"""

from __future__ import annotations

import os
from collections.abc import Callable, Mapping
from pathlib import Path
from typing import Final

CONFIG_DIR_NAME: Final[str] = ".trackdrop"
CONFIG_FILE_NAME: Final[str] = "config.toml"
LOG_FILE_NAME: Final[str] = "trackdrop.log"

_ENV_LIBRARY: Final[str] = "TRACKDROP_LIBRARY"


def resolve_overridable_path(
    *,
    explicit_path: Path | str | None,
    env: Mapping[str, str] | None,
    env_var: str | None,
    default_factory: Callable[[], Path],
) -> Path:
    """Resolve a path honoring explicit and environment overrides."""

    if explicit_path is not None:
        return Path(explicit_path).expanduser().resolve()

    mapping = env if env is not None else os.environ
    if env_var:
        candidate = (mapping.get(env_var) or "").strip()
        if candidate:
            return Path(candidate).expanduser().resolve()

    return default_factory().expanduser().resolve()


def resolve_library_root(
    explicit_path: Path | str | None = None,
    env: Mapping[str, str] | None = None,
) -> Path:
    """Return the library root for this run."""

    return resolve_overridable_path(
        explicit_path=explicit_path,
        env=env,
        env_var=_ENV_LIBRARY,
        default_factory=Path.cwd,
    )


def library_config_dir(library_root: Path) -> Path:
    return library_root / CONFIG_DIR_NAME


def library_config_path(library_root: Path) -> Path:
    """Get the path of the library's TOML config file."""

    return library_config_dir(library_root) / CONFIG_FILE_NAME


def library_log_file(library_root: Path) -> Path:
    """Get the path of the library's rotating log file."""

    return library_config_dir(library_root) / LOG_FILE_NAME


def resolve_library_path(library_root: Path, value: str | Path) -> Path:
    """Resolve a configured directory; relative values are taken from ``library_root``."""

    candidate = Path(value).expanduser()
    if not candidate.is_absolute():
        candidate = library_root / candidate
    return candidate.resolve()


__all__ = [
    "CONFIG_DIR_NAME",
    "library_config_dir",
    "library_config_path",
    "library_log_file",
    "resolve_library_path",
    "resolve_library_root",
    "resolve_overridable_path",
]
