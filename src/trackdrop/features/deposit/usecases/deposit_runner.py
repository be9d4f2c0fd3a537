"""src/trackdrop/features/deposit/usecases/deposit_runner.py
What: Move every input file into its planned place below the target directory.
Why: Orchestrate planner, conflict policy and filesystem moves for one batch.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import date
from pathlib import Path
from typing import final

from trackdrop.features.tagging.usecases.ports import EmbeddedTags, TagStorePort
from trackdrop.platform.filesystem import list_input_files, move_file
from trackdrop.shared.errors import PER_FILE_ERRORS
from trackdrop.shared.processing_types import (
    FileAction,
    ProcessResult,
    ProcessingEvent,
    RunContext,
    log_processing,
)

from ..adapters.file_date import associated_date
from ..domain.conflict import ConflictResolver
from ..domain.models import ConflictAction, OrganizeMode
from ..domain.planner import DepositPlanner

logger = logging.getLogger(__name__)

OverwritePrompt = Callable[[Path, Path], bool]
DateLookup = Callable[[Path, str | None], date]


@final
class DepositRunner:
    """Deposit the files of an input directory into a target directory."""

    STEP: str = "deposit"

    def __init__(
        self,
        tag_store: TagStorePort,
        *,
        mode: OrganizeMode = OrganizeMode.DROP,
        auto_overwrite: bool = False,
        ask_overwrite: OverwritePrompt | None = None,
        date_lookup: DateLookup = associated_date,
    ) -> None:
        """Initialize the runner.

        Args:
            tag_store: Reads the tags used for A-Z and DATE organization.
            mode: Organization mode applied to every file.
            auto_overwrite: Replace existing destination files without asking.
            ask_overwrite: Prompt called with ``(source, destination)`` on a
                conflict; None disables prompting and conflicts are skipped.
            date_lookup: Resolves the associated date of a file.
        """
        self.tag_store = tag_store
        self.mode = mode
        self.auto_overwrite = auto_overwrite
        self.ask_overwrite = ask_overwrite
        self.date_lookup = date_lookup

    def run(self, input_dir: Path, target_dir: Path) -> list[ProcessResult]:
        """Deposit each regular file directly inside ``input_dir``.

        Per-file failures are recorded in the results; the batch continues.
        """
        files = list_input_files(input_dir)
        results: list[ProcessResult] = []
        if not files:
            log_processing(
                logger,
                logging.INFO,
                ProcessingEvent.RUN_NO_FILES,
                "No files to deposit [path=%s]",
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
            "Deposit started [files=%d, mode=%s, path=%s]",
            len(files),
            self.mode.value,
            input_dir,
            **context.summary_extra(),
        )

        for sequence, source in enumerate(files, start=1):
            result = self.deposit_file(
                source,
                target_dir,
                sequence=sequence,
                total=len(files),
                source_root=input_dir,
            )
            context.record(result)
            results.append(result)

        log_processing(
            logger,
            logging.INFO,
            ProcessingEvent.RUN_COMPLETE,
            "Deposit complete [processed=%d, skipped=%d, failed=%d]",
            context.processed,
            context.skipped,
            context.failed,
            **context.summary_extra(),
        )
        return results

    def deposit_file(
        self,
        source: Path,
        target_root: Path,
        *,
        sequence: int | None = None,
        total: int | None = None,
        source_root: Path | None = None,
    ) -> ProcessResult:
        """Plan and execute the move of a single file."""

        position: dict[str, object] = {
            "sequence": sequence,
            "total_files": total,
            "source_path": source,
            "source_base_path": source_root,
            "target_base_path": target_root,
        }
        log_processing(
            logger, logging.DEBUG, ProcessingEvent.FILE_START, "Depositing %s", source.name, **position
        )

        try:
            embedded = self._read_tags(source)
            file_date = self._file_date(source, embedded)
            plan = DepositPlanner.build_plan(
                source, embedded.record, self.mode, target_root, file_date
            )
            target = plan.target

            if target.resolve() == source.resolve():
                return ProcessResult(
                    source_path=source,
                    action=FileAction.UNCHANGED,
                    target_path=target,
                    record=embedded.record,
                )

            action = ConflictResolver.resolve(
                target.exists(),
                self.auto_overwrite,
                self._ask_for(source, target),
                destination=target,
                source=source,
            )
            if action is ConflictAction.SKIP:
                log_processing(
                    logger,
                    logging.INFO if self.ask_overwrite is not None else logging.DEBUG,
                    ProcessingEvent.FILE_SKIP,
                    "Kept existing destination [src=%s, dest=%s]",
                    source,
                    target,
                    reason="destination exists",
                    **position,
                )
                return ProcessResult(
                    source_path=source,
                    action=FileAction.SKIPPED,
                    target_path=target,
                    record=embedded.record,
                    warnings=[f"Destination already exists: {target}"],
                )

            log_processing(
                logger,
                logging.INFO,
                ProcessingEvent.FILE_MOVE,
                "Moving %s -> %s",
                source,
                target,
                target_path=target,
                **position,
            )
            moved = move_file(source, target)
        except PER_FILE_ERRORS as exc:
            log_processing(
                logger,
                logging.ERROR,
                ProcessingEvent.FILE_ERROR,
                "Failed to deposit %s: %s",
                source.name,
                exc,
                error_message=str(exc),
                **position,
            )
            return ProcessResult.failure(source, exc)

        return ProcessResult(
            source_path=source,
            action=FileAction.MOVED,
            target_path=moved,
            record=embedded.record,
        )

    def _read_tags(self, source: Path) -> EmbeddedTags:
        # Only A-Z and DATE look at tags
        if self.mode is OrganizeMode.DROP:
            return EmbeddedTags(supported=False)
        return self.tag_store.read(source)

    def _file_date(self, source: Path, embedded: EmbeddedTags) -> date | None:
        if self.mode is not OrganizeMode.CHRONOLOGICAL_BY_DATE:
            return None
        return self.date_lookup(source, embedded.date)

    def _ask_for(self, source: Path, target: Path) -> Callable[[], bool] | None:
        prompt = self.ask_overwrite
        if prompt is None:
            return None
        return lambda: prompt(source, target)


__all__ = ["DateLookup", "DepositRunner", "OverwritePrompt"]
