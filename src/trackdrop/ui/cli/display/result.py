"""src/trackdrop/ui/cli/display/result.py
What: Render user-facing summaries for tag and deposit runs.
Why: Keep console output formatting consistent across the interface.
"""

from __future__ import annotations

from typing import final

from rich.console import Console

from trackdrop.shared.processing_types import ProcessResult

from .summary import render_processing_summary


@final
class ResultDisplay:
    """Handles result display in CLI."""

    console: Console

    def __init__(self, console: Console | None = None) -> None:
        """Initialize result display."""
        self.console = console or Console()

    def show_results(
        self,
        results: list[ProcessResult],
        header_label: str,
        quiet: bool = False,
    ) -> None:
        """Display processing results.

        Args:
            results: List of processing results.
            header_label: Title of the summary table.
            quiet: Whether to suppress non-error output.
        """
        if quiet:
            return

        render_processing_summary(console=self.console, results=results, header_label=header_label)
