"""Data structures that describe deposit plans."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Final

from trackdrop.shared.errors import ConfigError


class OrganizeMode(str, Enum):
    """How deposited files are arranged below the target directory."""

    DROP = "DROP"
    ALPHA_BY_ARTIST = "A-Z"
    CHRONOLOGICAL_BY_DATE = "DATE"

    @staticmethod
    def from_user_input(value: str | None) -> "OrganizeMode":
        """Translate a configuration or CLI value into the matching mode.

        ``None`` and blank values select ``DROP``.
        """

        if value is None or not value.strip():
            return OrganizeMode.DROP
        normalized = value.strip().upper()
        for mode in OrganizeMode:
            if mode.value == normalized:
                return mode
        valid: Final[str] = ", ".join(m.value for m in OrganizeMode)
        raise ConfigError(f"Invalid organization mode '{value}'. Valid options: {valid}")


class ConflictAction(str, Enum):
    """Outcome of a destination conflict check."""

    OVERWRITE = "overwrite"
    SKIP = "skip"


@dataclass(slots=True, frozen=True)
class DestinationPlan:
    """Where a single file goes.

    ``create_directory`` is True when the target's parent does not exist yet.
    """

    source: Path
    target: Path
    create_directory: bool


__all__ = ["ConflictAction", "DestinationPlan", "OrganizeMode"]
