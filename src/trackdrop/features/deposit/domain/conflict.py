"""
Summary: Decide whether an existing destination file is overwritten or the move is skipped.
Why: Conflicts must never overwrite silently when nobody can be asked.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from pathlib import Path
from typing import final

from trackdrop.shared.processing_types import ProcessingEvent, log_processing

from .models import ConflictAction

LOGGER = logging.getLogger(__name__)

AskCallback = Callable[[], bool]


@final
class ConflictResolver:
    """Resolve destination conflicts according to the overwrite policy."""

    @staticmethod
    def resolve(
        destination_exists: bool,
        auto_overwrite: bool,
        ask: AskCallback | None = None,
        *,
        destination: Path | None = None,
        source: Path | None = None,
    ) -> ConflictAction:
        """Return the action for one destination.

        Args:
            destination_exists: Whether a file already occupies the destination.
            auto_overwrite: Overwrite existing files without asking.
            ask: Synchronous yes/no collaborator; None in non-interactive runs.
            destination: Destination path, used for reporting only.
            source: Source path, used for reporting only.

        Returns:
            ConflictAction: ``OVERWRITE`` to proceed with the placement,
            ``SKIP`` to leave the source where it is.
        """
        if not destination_exists or auto_overwrite:
            return ConflictAction.OVERWRITE

        if ask is not None:
            return ConflictAction.OVERWRITE if ask() else ConflictAction.SKIP

        log_processing(
            LOGGER,
            logging.WARNING,
            ProcessingEvent.FILE_CONFLICT,
            "Destination already exists, skipping [src=%s, dest=%s]",
            source or "-",
            destination or "-",
            source_path=source,
            target_path=destination,
            reason="destination exists",
        )
        return ConflictAction.SKIP


__all__ = ["AskCallback", "ConflictResolver"]
