"""Static site generator for the MCP server catalog."""

from __future__ import annotations

import logging
import re
import shutil
from dataclasses import dataclass
from datetime import date, datetime, timezone
from pathlib import Path
from typing import Any
from xml.sax.saxutils import escape

from jinja2 import Environment, FileSystemLoader, select_autoescape

from mcpcatalog.catalog.display import decode_html_entities

logger = logging.getLogger(__name__)

_UNSAFE_SLUG_CHARS = re.compile(r"[^A-Za-z0-9._-]+")


@dataclass(frozen=True)
class CatalogPage:
    """Rendered page info."""

    url_path: str
    file_path: Path


def format_date(value: Any, fmt: str | None = None) -> str:
    """Render an ISO date; ``M/D/YYYY`` yields e.g. ``1/5/2025``."""
    if not value:
        return ""
    if isinstance(value, datetime):
        parsed = value.date()
    elif isinstance(value, date):
        parsed = value
    else:
        try:
            parsed = date.fromisoformat(str(value)[:10])
        except ValueError:
            return str(value)
    if fmt == "M/D/YYYY":
        return f"{parsed.month}/{parsed.day}/{parsed.year}"
    return parsed.isoformat()


def locale_string(value: Any) -> str:
    """Render a number with thousands separators."""
    if not value:
        return ""
    try:
        return f"{int(value):,}"
    except (TypeError, ValueError):
        return str(value)


def decode_html(value: Any) -> str:
    if not value:
        return ""
    return decode_html_entities(str(value))


def slugify(value: str) -> str:
    slug = _UNSAFE_SLUG_CHARS.sub("-", value).strip("-")
    return slug or "server"


def unique_slugs(ids: list[str]) -> list[str]:
    """Slugify ids, suffixing ``-2``, ``-3`` ... when a slug is already taken."""
    used: set[str] = set()
    slugs: list[str] = []
    for value in ids:
        base = slugify(value)
        slug, counter = base, 1
        while slug in used:
            counter += 1
            slug = f"{base}-{counter}"
        used.add(slug)
        slugs.append(slug)
    return slugs


class SiteGenerator:
    """Generate static HTML pages from the catalog list."""

    def __init__(self, templates_dir: Path | None = None) -> None:
        default_templates = Path(__file__).resolve().parent / "templates"
        self.templates_dir = templates_dir or default_templates
        self._env = Environment(
            loader=FileSystemLoader(str(self.templates_dir)),
            autoescape=select_autoescape(["html", "xml"]),
            trim_blocks=True,
            lstrip_blocks=True,
        )
        self._env.filters["date"] = format_date
        self._env.filters["locale_string"] = locale_string
        self._env.filters["decode_html"] = decode_html

    def generate(
        self,
        *,
        servers: list[dict[str, Any]],
        output_dir: Path,
        title: str = "MCP Server Catalog",
        base_url: str = "https://mcp-catalog.local",
        page_size: int = 12,
        generated_at: str = "",
        assets_dirs: list[Path] | None = None,
    ) -> list[CatalogPage]:
        """Render listing and detail pages, copy assets and write the sitemap."""
        output_dir.mkdir(parents=True, exist_ok=True)
        generated_at = generated_at or datetime.now(timezone.utc).isoformat()
        pages = self._render_pages(
            servers=servers,
            output_dir=output_dir,
            title=title,
            page_size=page_size,
            generated_at=generated_at,
        )
        for assets_dir in assets_dirs or []:
            self._copy_assets(assets_dir, output_dir / assets_dir.name)
        sitemap_path = output_dir / "sitemap.xml"
        sitemap_path.write_text(self._build_sitemap(pages=pages, base_url=base_url), encoding="utf-8")
        logger.info("Rendered %d pages into %s", len(pages), output_dir)
        return pages

    def _render_pages(
        self,
        *,
        servers: list[dict[str, Any]],
        output_dir: Path,
        title: str,
        page_size: int,
        generated_at: str,
    ) -> list[CatalogPage]:
        pages: list[CatalogPage] = []
        slugs = unique_slugs([str(item.get("id", "")) for item in servers])
        entries = [dict(item, slug=slug) for item, slug in zip(servers, slugs)]

        index_template = self._env.get_template("index.html")
        paged = self._paginate(entries, page_size=page_size)
        pages_dir = output_dir / "pages"
        if len(paged) > 1:
            pages_dir.mkdir(parents=True, exist_ok=True)
        for page_no, page_servers in enumerate(paged, start=1):
            file_path = output_dir / "index.html" if page_no == 1 else pages_dir / f"page-{page_no}.html"
            prev_url = "/index.html" if page_no == 2 else f"/pages/page-{page_no - 1}.html"
            next_url = f"/pages/page-{page_no + 1}.html"
            file_path.write_text(
                index_template.render(
                    title=title,
                    servers=page_servers,
                    total_servers=len(entries),
                    generated_at=generated_at,
                    page_no=page_no,
                    total_pages=len(paged),
                    prev_url=prev_url if page_no > 1 else "",
                    next_url=next_url if page_no < len(paged) else "",
                ),
                encoding="utf-8",
            )
            url_path = "/index.html" if page_no == 1 else f"/pages/page-{page_no}.html"
            pages.append(CatalogPage(url_path=url_path, file_path=file_path))

        detail_template = self._env.get_template("server_detail.html")
        servers_dir = output_dir / "servers"
        servers_dir.mkdir(parents=True, exist_ok=True)
        for item in entries:
            file_name = f"{item['slug']}.html"
            detail_path = servers_dir / file_name
            detail_path.write_text(
                detail_template.render(title=title, server=item, generated_at=generated_at),
                encoding="utf-8",
            )
            pages.append(CatalogPage(url_path=f"/servers/{file_name}", file_path=detail_path))

        return pages

    @staticmethod
    def _paginate(servers: list[dict[str, Any]], *, page_size: int) -> list[list[dict[str, Any]]]:
        if page_size <= 0:
            page_size = 12
        if not servers:
            return [[]]
        return [servers[index : index + page_size] for index in range(0, len(servers), page_size)]

    @staticmethod
    def _copy_assets(source: Path, target: Path) -> None:
        if not source.is_dir():
            logger.warning("Assets directory not found, skipping copy: %s", source)
            return
        shutil.copytree(source, target, dirs_exist_ok=True)

    @staticmethod
    def _build_sitemap(*, pages: list[CatalogPage], base_url: str) -> str:
        now = datetime.now(timezone.utc).date().isoformat()
        urls = [
            "<url>"
            f"<loc>{escape(base_url.rstrip('/') + page.url_path)}</loc>"
            f"<lastmod>{now}</lastmod>"
            "</url>"
            for page in pages
        ]
        return (
            '<?xml version="1.0" encoding="UTF-8"?>'
            "<urlset xmlns=\"http://www.sitemaps.org/schemas/sitemap/0.9\">"
            f"{''.join(urls)}"
            "</urlset>"
        )
