"""Utilities for rendering shared CLI display content."""

from __future__ import annotations

from collections import Counter
from collections.abc import Sequence

from rich import box
from rich.console import Console
from rich.table import Table

from trackdrop.shared.processing_types import FileAction, ProcessResult

_ACTION_STYLES: dict[FileAction, str] = {
    FileAction.TAGGED: "green",
    FileAction.MOVED: "green",
    FileAction.UNCHANGED: "dim",
    FileAction.SKIPPED: "yellow",
    FileAction.FAILED: "red",
}


def render_processing_summary(
    console: Console,
    results: Sequence[ProcessResult],
    header_label: str,
    total_label: str = "Total files processed",
) -> None:
    """Render a formatted summary of processing outcomes.

    Args:
        console: Rich console instance used to render output.
        results: Sequence of processing results to summarize.
        header_label: Label rendered in the summary header.
        total_label: Label describing the total count of processed items.
    """
    counts = Counter(result.action for result in results)

    table = Table(title=header_label, box=box.SIMPLE_HEAD, show_header=True, header_style="bold")
    table.add_column("Outcome")
    table.add_column("Files", justify="right")
    for action, style in _ACTION_STYLES.items():
        if counts[action]:
            table.add_row(f"[{style}]{action.value}[/{style}]", str(counts[action]))
    table.add_row(f"[bold]{total_label}[/bold]", f"[bold]{len(results)}[/bold]")
    console.print(table)

    for result in results:
        if not result.success:
            console.print(f"[red]  • {result.source_path}: {result.error_message}[/red]")
        elif result.warnings and result.action is not FileAction.SKIPPED:
            for warning in result.warnings:
                console.print(f"[yellow]  • {result.source_path.name}: {warning}[/yellow]")
