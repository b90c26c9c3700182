"""zoo-store command line.

Thin wrapper over `adapters.file_store.ZooFileStore`: every command resolves a
format, calls `save`/`load`, and turns `ZooStoreError` into a red message and
exit code 1.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from adapters.file_store import ZooFileStore
from cli import doctor
from cli.logging_setup import configure_logging
from cli.ui_components import build_zoo_table
from core.config import AppSettings
from core.domain.errors import UnsupportedFormat, ZooStoreError
from core.domain.formats import Format
from core.domain.models import ZooBuilder

app = typer.Typer(no_args_is_help=True, help="Save and load zoo records as JSON, XML or flat text.")
app.add_typer(doctor.app, name="doctor")

_console = Console()
_err_console = Console(stderr=True)


def _resolve_format(flag: Optional[str], path: Path, settings: AppSettings) -> Format:
    """Flag first, then the file suffix, then the configured default."""

    if flag:
        return Format.coerce(flag)
    try:
        return Format.from_path(path)
    except UnsupportedFormat:
        return settings.default_format


def _fail(exc: ZooStoreError) -> typer.Exit:
    _err_console.print(f"[red]{type(exc).__name__}:[/red] {exc}")
    return typer.Exit(code=1)


@app.callback()
def main(
    log_level: Optional[str] = typer.Option(None, "--log-level", help="Override ZOO_STORE_LOG_LEVEL."),
) -> None:
    settings = AppSettings()
    configure_logging(log_level or settings.log_level)


@app.command()
def save(
    name: str = typer.Argument(..., help="Zoo name."),
    output: Path = typer.Option(..., "--output", "-o", help="File to write."),
    location: Optional[str] = typer.Option(None, "--location", "-l", help="Zoo location."),
    fmt: Optional[str] = typer.Option(None, "--format", "-f", help="json, xml or txt."),
) -> None:
    """Build a zoo and write it to a file."""

    settings = AppSettings()
    try:
        resolved = _resolve_format(fmt, output, settings)
        zoo = ZooBuilder(name).location(location).build()
        ZooFileStore(settings=settings).save(zoo, output, resolved)
    except ZooStoreError as exc:
        raise _fail(exc) from exc

    _console.print(f"[green]Saved[/green] {zoo} to {output} ({resolved.value})")


@app.command()
def show(
    path: Path = typer.Argument(..., help="File to read."),
    fmt: Optional[str] = typer.Option(None, "--format", "-f", help="json, xml or txt."),
) -> None:
    """Load a zoo from a file and print it."""

    settings = AppSettings()
    try:
        resolved = _resolve_format(fmt, path, settings)
        zoo = ZooFileStore(settings=settings).load(path, resolved)
    except ZooStoreError as exc:
        raise _fail(exc) from exc

    _console.print(build_zoo_table(zoo, source=path, fmt=resolved))


@app.command()
def convert(
    source: Path = typer.Argument(..., help="File to read."),
    target: Path = typer.Argument(..., help="File to write."),
    from_fmt: Optional[str] = typer.Option(None, "--from", help="Format of SOURCE."),
    to_fmt: Optional[str] = typer.Option(None, "--to", help="Format of TARGET."),
) -> None:
    """Re-encode a zoo file in another format."""

    settings = AppSettings()
    try:
        src_format = _resolve_format(from_fmt, source, settings)
        dst_format = _resolve_format(to_fmt, target, settings)
        zoo = ZooFileStore(settings=settings).convert(
            source,
            target,
            source_format=src_format,
            target_format=dst_format,
        )
    except ZooStoreError as exc:
        raise _fail(exc) from exc

    _console.print(
        f"[green]Converted[/green] {zoo}: {source} ({src_format.value}) -> {target} ({dst_format.value})"
    )


def run() -> None:
    app()


if __name__ == "__main__":
    run()
