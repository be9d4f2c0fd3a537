"""src/trackdrop/ui/cli/commands/executor.py
What: Provide shared wiring for CLI command executors.
Why: Reuse runner construction, prompts and presentation helpers across commands.
"""

import sys
from abc import ABC, abstractmethod

from rich.console import Console

from trackdrop.config.config import LibraryConfig
from trackdrop.features.deposit.usecases.deposit_runner import DepositRunner
from trackdrop.features.tagging.adapters.mutagen_store import MutagenTagStore
from trackdrop.features.tagging.usecases.ports import TagStorePort
from trackdrop.features.tagging.usecases.tag_resolver import TagResolver
from trackdrop.features.tagging.usecases.tag_runner import TagRunner
from trackdrop.shared.processing_types import ProcessResult
from trackdrop.ui.cli.args.options import RunArgs
from trackdrop.ui.cli.display.prompts import InteractivePrompts
from trackdrop.ui.cli.display.result import ResultDisplay


class CommandExecutor(ABC):
    """Base class for command execution."""

    args: RunArgs
    config: LibraryConfig
    tag_store: TagStorePort
    prompts: InteractivePrompts | None
    result_display: ResultDisplay

    def __init__(
        self,
        args: RunArgs,
        config: LibraryConfig,
        *,
        tag_store: TagStorePort | None = None,
        console: Console | None = None,
    ) -> None:
        """Initialize command executor.

        Args:
            args: Command line arguments.
            config: Library configuration with CLI overrides applied.
            tag_store: Tag container access; mutagen when omitted.
            console: Console for prompts and summaries.
        """
        self.args = args
        self.config = config
        self.tag_store = tag_store or MutagenTagStore()
        shared_console = console or Console()
        # Prompts need a terminal; piped or closed stdin runs unattended
        interactive = args.interactive and sys.stdin is not None and sys.stdin.isatty()
        self.prompts = InteractivePrompts(shared_console) if interactive else None
        self.result_display = ResultDisplay(shared_console)

    @abstractmethod
    def execute(self) -> list[ProcessResult]:
        """Execute the command.

        Returns:
            List of processing results.
        """
        pass

    def build_tag_runner(self) -> TagRunner:
        return TagRunner(
            self.tag_store,
            TagResolver(self.config.title_template, self.config.filename_template),
            override_artist=self.config.override_artist,
            auto_tag=self.config.auto_tag,
            auto_overwrite=self.config.auto_overwrite,
            confirm=self.prompts.confirm_proposal if self.prompts else None,
            ask_overwrite=self.prompts.confirm_overwrite if self.prompts else None,
        )

    def build_deposit_runner(self) -> DepositRunner:
        return DepositRunner(
            self.tag_store,
            mode=self.config.organize,
            auto_overwrite=self.config.auto_overwrite,
            ask_overwrite=self.prompts.confirm_overwrite if self.prompts else None,
        )

    def display_results(self, results: list[ProcessResult], header_label: str) -> None:
        self.result_display.show_results(results, header_label, quiet=self.args.quiet)
