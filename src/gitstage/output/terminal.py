"""Rich terminal reporter — one table per view, colored by change kind."""

from __future__ import annotations

from typing import Iterable, Optional

from rich.console import Console
from rich.table import Table
from rich.text import Text

from gitstage.status.entry import StatusEntry


def _entry_text(entry: StatusEntry) -> Text:
    return Text(entry.display_text(), style=entry.kind.color)


def build_table(title: str, entries: Iterable[StatusEntry]) -> Table:
    table = Table(
        title=title,
        title_style="bold",
        border_style="dim",
        show_header=True,
    )
    table.add_column("Kind", style="dim", min_width=10)
    table.add_column("Change")
    for entry in entries:
        table.add_row(entry.kind.value, _entry_text(entry))
    return table


def render(
    sections: Iterable[tuple[str, list[StatusEntry]]],
    *,
    console: Optional[Console] = None,
) -> None:
    """Print each ``(title, entries)`` section as a table."""
    console = console or Console()
    for title, entries in sections:
        console.print()
        if not entries:
            console.print(f"[bold]{title}[/bold]  [dim]nothing to show[/dim]")
            continue
        console.print(build_table(title, entries))
