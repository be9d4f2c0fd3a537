"""src/trackdrop/ui/cli/display/proposal.py
What: Render a tag proposal as a current-versus-proposed Rich table.
Why: Users confirm each proposal from the table before tags are written.
"""

from __future__ import annotations

from pathlib import Path

from rich import box
from rich.table import Table
from rich.text import Text

from trackdrop.features.tagging.usecases.ports import EmbeddedTags
from trackdrop.features.tagging.usecases.tag_resolver import Resolution
from trackdrop.shared.tag_record import TagName


def _format_current(value: str | None) -> Text:
    if value is None:
        return Text("N/A", style="dim")
    return Text(value)


def _format_proposed(current: str | None, proposed: str | None) -> Text:
    if proposed is None:
        return Text("N/A", style="dim")
    if proposed == current:
        return Text(proposed, style="green")
    return Text(proposed, style="bold cyan")


def build_proposal_table(path: Path, embedded: EmbeddedTags, resolution: Resolution) -> Table:
    """Build the proposal table for ``path``; rows with nothing on either side are left out."""

    table = Table(
        title=f"Proposed tags for {path.name}",
        show_header=True,
        header_style="bold magenta",
        box=box.SIMPLE_HEAD,
    )
    table.add_column("Field", style="bold")
    table.add_column("Current")
    table.add_column("Proposed")

    new_name = f"{resolution.filename}{path.suffix}" if resolution.filename else path.name
    rows: list[tuple[str, str | None, str | None]] = [
        ("filename", path.name, new_name),
        ("title", embedded.raw_title, resolution.title),
    ]
    for tag in TagName:
        if tag is TagName.TITLE:
            continue
        rows.append((tag.value, embedded.record.value(tag), resolution.record.value(tag)))

    for name, current, proposed in rows:
        if current is None and proposed is None:
            continue
        table.add_row(name, _format_current(current), _format_proposed(current, proposed))
    return table


__all__ = ["build_proposal_table"]
