"""Command line argument options."""

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Literal, final

from trackdrop.features.deposit.domain.models import OrganizeMode


@final
@dataclass(slots=True)
class InitArgs:
    """Command line arguments for the ``init`` subcommand."""

    command: Literal["init"]
    library: Path
    force: bool
    verbose: bool
    quiet: bool


@final
@dataclass(slots=True)
class RunArgs:
    """Command line arguments for the ``tag``, ``deposit`` and ``process`` subcommands."""

    command: Literal["tag", "deposit", "process"]
    library: Path
    verbose: bool
    quiet: bool
    non_interactive: bool
    organize: OrganizeMode | None = None
    auto_overwrite: bool = False
    auto_tag: bool = False
    override_artist: bool = False

    @property
    def interactive(self) -> bool:
        return not self.non_interactive

    def overrides(self) -> dict[str, Any]:
        """Return config overrides; unset flags leave the config file in charge."""

        return {
            "organize": self.organize,
            "auto_overwrite": True if self.auto_overwrite else None,
            "auto_tag": True if self.auto_tag else None,
            "override_artist": True if self.override_artist else None,
        }


CLIArgs = InitArgs | RunArgs

__all__ = ["CLIArgs", "InitArgs", "RunArgs"]
