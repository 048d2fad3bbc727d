"""mcpcatalog list / show — inspect extracted records without rendering."""

from __future__ import annotations

import json

import typer

from mcpcatalog.catalog import CatalogError, CatalogExtractor, CatalogRecord, to_list
from mcpcatalog.cli.build import configure_logging
from mcpcatalog.config import ConfigLoadError, load_config


def _load_records(path: str, config: str) -> list[CatalogRecord]:
    configure_logging(quiet=True)
    try:
        settings = load_config(config or None)
    except ConfigLoadError as exc:
        typer.secho(f"Error: {exc}", fg="red", err=True)
        raise typer.Exit(2) from None
    try:
        return to_list(CatalogExtractor(settings.extractor).scan_directory(path or None))
    except (CatalogError, OSError, UnicodeDecodeError) as exc:
        typer.secho(f"Error: {exc}", fg="red", err=True)
        raise typer.Exit(1) from None


def list_command(
    path: str = typer.Argument("", help="Samples directory (defaults to extractor.samples_dir)."),
    config: str = typer.Option("", "--config", help="Path to mcpcatalog.yaml."),
    json_output: bool = typer.Option(False, "--json", help="Print records as JSON."),
) -> None:
    """List catalog records found in the samples directory."""
    records = _load_records(path, config)
    if json_output:
        typer.echo(json.dumps([record.to_dict() for record in records], ensure_ascii=False, indent=2))
        return
    if not records:
        typer.echo("No servers found.")
        return
    for record in records:
        typer.echo(f"  {record.id}: {record.name} ({len(record.tools)} tools)")


def show_command(
    record_id: str = typer.Argument(..., help="Catalog id to show."),
    path: str = typer.Argument("", help="Samples directory (defaults to extractor.samples_dir)."),
    config: str = typer.Option("", "--config", help="Path to mcpcatalog.yaml."),
) -> None:
    """Print one catalog record as JSON."""
    for record in _load_records(path, config):
        if record.id == record_id:
            typer.echo(json.dumps(record.to_dict(), ensure_ascii=False, indent=2))
            return
    typer.secho(f"Error: no server with id '{record_id}'", fg="red", err=True)
    raise typer.Exit(1)
