"""Typer CLI entrypoint for pocket2wallabag."""

from __future__ import annotations

import logging
from pathlib import Path

import typer
from pydantic import ValidationError

from pocket2wallabag.builder import convert_export
from pocket2wallabag.config import DEFAULT_CHUNK_SIZE, RunContext, new_run_tag

app = typer.Typer(help="Convert Pocket CSV exports into wallabag JSON import files.", no_args_is_help=True)


@app.callback()
def main(verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging.")) -> None:
    """pocket2wallabag command group."""

    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s - %(levelname)s - %(message)s",
    )


@app.command()
def convert(
    input_dir: Path = typer.Option(..., exists=True, file_okay=False, readable=True),
    favorite_tag: str | None = typer.Option(None, help="Tag that marks an item as starred."),
    chunk_size: int = typer.Option(DEFAULT_CHUNK_SIZE, min=1),
    run_tag: str | None = typer.Option(None, help="Override the time-derived run tag."),
) -> None:
    """Convert every CSV export in INPUT_DIR into chunked wallabag JSON files."""

    try:
        context = RunContext(
            run_tag=run_tag or new_run_tag(),
            favorite_tag=favorite_tag,
            chunk_size=chunk_size,
        )
    except ValidationError as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(code=2) from exc

    try:
        report = convert_export(input_dir, context)
    except Exception as exc:
        typer.echo(f"Conversion failed: {exc}", err=True)
        raise typer.Exit(code=1) from exc

    typer.echo(
        f"Converted {report.total} of {report.records} record(s) from {report.files_read} file(s): "
        f"{report.archived} archived, {report.unread} unread, {report.dropped} dropped."
    )
    if report.starred is not None:
        typer.echo(f"Starred: {report.starred}")
    for path in report.outputs:
        typer.echo(f"Output: {path}")
