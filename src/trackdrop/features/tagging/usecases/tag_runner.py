"""src/trackdrop/features/tagging/usecases/tag_runner.py
What: Tag and rename every file of an input directory from its title tag.
Why: Keep the per-file tag flow (read, parse, resolve, confirm, write, rename) in one place.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from pathlib import Path
from typing import final

from trackdrop.features.deposit.domain.conflict import ConflictResolver
from trackdrop.features.deposit.domain.models import ConflictAction
from trackdrop.platform.filesystem import list_input_files, move_file
from trackdrop.shared.errors import PER_FILE_ERRORS
from trackdrop.shared.processing_types import (
    FileAction,
    ProcessResult,
    ProcessingEvent,
    RunContext,
    log_processing,
)

from ..domain.title_parser import TitleParser
from .ports import EmbeddedTags, TagStorePort
from .tag_resolver import Resolution, TagResolver

logger = logging.getLogger(__name__)

ProposalPrompt = Callable[[Path, EmbeddedTags, Resolution], bool]
OverwritePrompt = Callable[[Path, Path], bool]


@final
class TagRunner:
    """Resolve, confirm and persist standardized tags for a batch of files."""

    STEP: str = "tag"

    def __init__(
        self,
        tag_store: TagStorePort,
        resolver: TagResolver,
        *,
        override_artist: bool = False,
        auto_tag: bool = False,
        auto_overwrite: bool = False,
        confirm: ProposalPrompt | None = None,
        ask_overwrite: OverwritePrompt | None = None,
    ) -> None:
        """Initialize the runner.

        Args:
            tag_store: Reads and writes tag containers.
            resolver: Merges tags and renders the title and filename.
            override_artist: Prefer the artist parsed from the title over the embedded one.
            auto_tag: Apply proposals without calling ``confirm``.
            auto_overwrite: Replace a file already holding the new name.
            confirm: Asked to accept each proposal when ``auto_tag`` is off.
                Without it such proposals are left unapplied.
            ask_overwrite: Asked before replacing an existing file on rename.
        """
        self.tag_store = tag_store
        self.resolver = resolver
        self.override_artist = override_artist
        self.auto_tag = auto_tag
        self.auto_overwrite = auto_overwrite
        self.confirm = confirm
        self.ask_overwrite = ask_overwrite

    def run(self, input_dir: Path) -> list[ProcessResult]:
        """Tag each regular file directly inside ``input_dir``."""

        files = list_input_files(input_dir)
        results: list[ProcessResult] = []
        if not files:
            log_processing(
                logger,
                logging.INFO,
                ProcessingEvent.RUN_NO_FILES,
                "No files to tag [path=%s]",
                input_dir,
                step=self.STEP,
                directory=input_dir,
            )
            return results

        context = RunContext(step=self.STEP, directory=input_dir, total_files=len(files))
        log_processing(
            logger,
            logging.INFO,
            ProcessingEvent.RUN_START,
            "Tagging started [files=%d, path=%s]",
            len(files),
            input_dir,
            **context.summary_extra(),
        )

        for sequence, path in enumerate(files, start=1):
            result = self.tag_file(path, sequence=sequence, total=len(files), source_root=input_dir)
            context.record(result)
            results.append(result)

        log_processing(
            logger,
            logging.INFO,
            ProcessingEvent.RUN_COMPLETE,
            "Tagging complete [processed=%d, skipped=%d, failed=%d]",
            context.processed,
            context.skipped,
            context.failed,
            **context.summary_extra(),
        )
        return results

    def tag_file(
        self,
        path: Path,
        *,
        sequence: int | None = None,
        total: int | None = None,
        source_root: Path | None = None,
    ) -> ProcessResult:
        """Tag and rename a single file."""

        position: dict[str, object] = {
            "sequence": sequence,
            "total_files": total,
            "source_path": path,
            "source_base_path": source_root,
            "target_base_path": source_root,
        }
        log_processing(
            logger, logging.DEBUG, ProcessingEvent.FILE_START, "Tagging %s", path.name, **position
        )

        try:
            embedded = self.tag_store.read(path)
            if not embedded.supported:
                return self._skip(path, "unsupported file type", position)
            if embedded.raw_title is None:
                return self._skip(path, "no title tag", position, embedded=embedded)

            parsed = TitleParser.parse(embedded.raw_title)
            resolution = self.resolver.resolve(embedded.record, parsed, self.override_artist)
            logger.debug(
                "Resolved %s: title=%r, filename=%r, tags=%s",
                path.name,
                resolution.title,
                resolution.filename,
                resolution.record.as_dict(),
            )

            if not self.auto_tag:
                if self.confirm is None:
                    return self._skip(path, "confirmation required", position, embedded=embedded)
                if not self.confirm(path, embedded, resolution):
                    return self._skip(path, "proposal declined", position, embedded=embedded)

            self.tag_store.write(path, resolution.record, resolution.title)
            final_path, warnings = self._rename(path, resolution.filename)
        except PER_FILE_ERRORS as exc:
            log_processing(
                logger,
                logging.ERROR,
                ProcessingEvent.FILE_ERROR,
                "Failed to tag %s: %s",
                path.name,
                exc,
                error_message=str(exc),
                **position,
            )
            return ProcessResult.failure(path, exc)

        log_processing(
            logger,
            logging.INFO,
            ProcessingEvent.FILE_TAGGED,
            "Tagged %s -> %s",
            path,
            final_path,
            target_path=final_path,
            **position,
        )
        return ProcessResult(
            source_path=path,
            action=FileAction.TAGGED,
            target_path=final_path,
            record=resolution.record,
            title=resolution.title,
            filename=final_path.name,
            warnings=warnings,
        )

    def _rename(self, path: Path, stem: str) -> tuple[Path, list[str]]:
        """Rename ``path`` to ``stem`` plus its extension; an empty stem keeps the name."""

        if not stem:
            return path, ["Rendered filename is empty, kept original name"]

        target = path.with_name(f"{stem}{path.suffix}")
        if target == path:
            return path, []

        # Case-only renames on case-insensitive filesystems see the file itself
        occupied = target.exists() and not target.samefile(path)
        ask = self.ask_overwrite
        action = ConflictResolver.resolve(
            occupied,
            self.auto_overwrite,
            (lambda: ask(path, target)) if ask is not None else None,
            destination=target,
            source=path,
        )
        if action is ConflictAction.SKIP:
            return path, [f"Kept original name, {target.name} already exists"]
        return move_file(path, target), []

    def _skip(
        self,
        path: Path,
        reason: str,
        position: dict[str, object],
        *,
        embedded: EmbeddedTags | None = None,
    ) -> ProcessResult:
        log_processing(
            logger,
            logging.INFO,
            ProcessingEvent.FILE_SKIP,
            "Skipped %s (%s)",
            path.name,
            reason,
            reason=reason,
            **position,
        )
        return ProcessResult(
            source_path=path,
            action=FileAction.SKIPPED,
            record=embedded.record if embedded is not None else None,
            warnings=[reason],
        )


__all__ = ["OverwritePrompt", "ProposalPrompt", "TagRunner"]
