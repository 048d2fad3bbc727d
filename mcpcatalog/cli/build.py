"""mcpcatalog build — extract the catalog and render the static site."""

from __future__ import annotations

import json
import logging
from pathlib import Path

import typer

from mcpcatalog.catalog import CatalogBuilder, CatalogError, CatalogExtractor
from mcpcatalog.config import ConfigLoadError, load_config
from mcpcatalog.site import SiteGenerator

logger = logging.getLogger(__name__)


def configure_logging(*, verbose: bool = False, quiet: bool = False) -> None:
    level = logging.DEBUG if verbose else logging.WARNING if quiet else logging.INFO
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s", force=True)


def build_command(
    path: str = typer.Argument("", help="Samples directory (defaults to extractor.samples_dir)."),
    config: str = typer.Option("", "--config", help="Path to mcpcatalog.yaml."),
    output: str = typer.Option("", "--output", "-o", help="Output directory (defaults to site.output_dir)."),
    base_url: str = typer.Option("", "--base-url", help="Base URL used in the sitemap."),
    page_size: int = typer.Option(0, "--page-size", help="Servers per listing page."),
    json_only: bool = typer.Option(False, "--json-only", help="Write catalog.json without rendering pages."),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug diagnostics."),
    quiet: bool = typer.Option(False, "--quiet", help="Suppress informational output."),
) -> None:
    """Build catalog.json and the static catalog site."""
    configure_logging(verbose=verbose, quiet=quiet)
    try:
        settings = load_config(config or None)
    except ConfigLoadError as exc:
        typer.secho(f"Error: {exc}", fg="red", err=True)
        raise typer.Exit(2) from None

    site = settings.site
    output_dir = Path(output or site.output_dir)
    builder = CatalogBuilder(CatalogExtractor(settings.extractor))
    try:
        catalog = builder.build(path or None)
    except (CatalogError, OSError, UnicodeDecodeError) as exc:
        typer.secho(f"Error: build failed: {exc}", fg="red", err=True)
        raise typer.Exit(1) from None

    output_dir.mkdir(parents=True, exist_ok=True)
    catalog_path = output_dir / "catalog.json"
    catalog_path.write_text(json.dumps(catalog, ensure_ascii=False, indent=2), encoding="utf-8")
    logger.info("Wrote %s", catalog_path)

    if not json_only:
        SiteGenerator().generate(
            servers=catalog["servers"],
            output_dir=output_dir,
            title=site.title,
            base_url=base_url or site.base_url,
            page_size=page_size or site.page_size,
            generated_at=catalog["generated_at"],
            assets_dirs=[Path(entry) for entry in site.assets_dirs],
        )
    if not quiet:
        typer.secho(f"Built {catalog['total_servers']} servers into {output_dir}", fg="green")
