"""Interactive confirmations backed by Rich prompts."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import final

from rich.console import Console
from rich.prompt import Confirm

from trackdrop.features.tagging.usecases.ports import EmbeddedTags
from trackdrop.features.tagging.usecases.tag_resolver import Resolution

from .proposal import build_proposal_table

LOGGER = logging.getLogger(__name__)


@final
class InteractivePrompts:
    """Yes/no collaborators handed to the runners in interactive runs.

    A closed input stream answers "no", so the file is skipped instead of
    aborting the batch.
    """

    console: Console

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console()

    def _ask(self, question: str, default: bool) -> bool:
        try:
            return Confirm.ask(question, default=default, console=self.console)
        except EOFError:
            LOGGER.warning("No input available, answering no to: %s", question)
            return False

    def confirm_proposal(self, path: Path, embedded: EmbeddedTags, resolution: Resolution) -> bool:
        """Show the proposal for ``path`` and ask whether to apply it."""

        self.console.print(build_proposal_table(path, embedded, resolution))
        return self._ask("Accept these changes?", default=True)

    def confirm_overwrite(self, source: Path, destination: Path) -> bool:
        """Ask whether ``destination`` may be replaced by ``source``."""

        return self._ask(
            f"[yellow]{destination}[/yellow] already exists. Replace it with {source.name}?",
            default=False,
        )


__all__ = ["InteractivePrompts"]
