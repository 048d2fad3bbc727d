"""CLI tools — mcpcatalog build, list, show."""

from importlib import metadata

import typer

from mcpcatalog.cli.build import build_command
from mcpcatalog.cli.records import list_command, show_command

app = typer.Typer(
    name="mcpcatalog",
    help="Build a browsable catalog of MCP sample servers.",
)


def _version_callback(value: bool) -> None:
    if not value:
        return
    try:
        version = metadata.version("mcp-catalog")
    except metadata.PackageNotFoundError:
        version = "unknown"
    typer.echo(f"mcpcatalog {version}")
    raise typer.Exit(0)


@app.callback()
def main_callback(
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show version and exit.",
    ),
) -> None:
    """Build a browsable catalog of MCP sample servers."""


app.command("build")(build_command)
app.command("list")(list_command)
app.command("show")(show_command)


def main() -> None:
    """CLI entry point."""
    app()
