"""Rich UI components for the CLI.

Why separate components:
- Keeps command logic apart from visual details.
- Lets several commands reuse the same tables.
"""

from __future__ import annotations

from pathlib import Path

from rich.table import Table

from core.domain.formats import Format
from core.domain.models import Zoo


def build_zoo_table(zoo: Zoo, *, source: Path | None = None, fmt: Format | None = None) -> Table:
    """Table with the fields of a single zoo."""

    title = "Zoo"
    if source is not None:
        title = f"Zoo ({source}{f', {fmt.value}' if fmt else ''})"

    table = Table(title=title)
    table.add_column("Field", style="cyan", no_wrap=True)
    table.add_column("Value", style="white")
    table.add_row("name", zoo.name)
    table.add_row("location", zoo.location or "[dim](unset)[/dim]")
    return table


def build_checks_table(title: str) -> Table:
    table = Table(title=title)
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")
    return table
