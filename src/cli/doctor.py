"""Doctor command: round-trips a sample zoo through every codec."""

from __future__ import annotations

import tempfile
from pathlib import Path

import typer
from rich.console import Console

from adapters.file_store import ZooFileStore
from cli.ui_components import build_checks_table
from core.config import AppSettings
from core.domain.errors import ZooStoreError
from core.domain.formats import Format
from core.domain.models import ZooBuilder

app = typer.Typer(no_args_is_help=True, help="Environment diagnostics and codec checks.")

_console = Console()


def check_round_trip(store: ZooFileStore, fmt: Format, directory: Path) -> tuple[bool, str]:
    """Save and reload a sample zoo; report whether it came back equal."""

    sample = ZooBuilder("Kyiv Zoo").location("Kyiv").build()
    path = directory / f"doctor{fmt.suffix}"
    try:
        store.save(sample, path, fmt)
        loaded = store.load(path, fmt)
    except ZooStoreError as exc:
        return False, f"{type(exc).__name__}: {exc}"
    if loaded != sample:
        return False, f"read back {loaded}"
    return True, f"{path.stat().st_size} bytes"


@app.command()
def run() -> None:
    """Run codec diagnostics and show the active configuration."""

    settings = AppSettings()
    store = ZooFileStore(settings=settings)

    table = build_checks_table("zoo-store Doctor")
    table.add_row("Default format", "OK", settings.default_format.value)
    table.add_row("JSON indent", "OK", str(settings.json_indent))

    failed = False
    with tempfile.TemporaryDirectory(prefix="zoo-store-") as tmp:
        for fmt in Format:
            ok, detail = check_round_trip(store, fmt, Path(tmp))
            failed = failed or not ok
            table.add_row(f"{fmt.value} round-trip", "OK" if ok else "FAIL", detail)

    _console.print(table)
    if failed:
        raise typer.Exit(code=1)
