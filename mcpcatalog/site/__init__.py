"""Static site rendering for the MCP catalog."""

from mcpcatalog.site.generator import CatalogPage, SiteGenerator

__all__ = ["CatalogPage", "SiteGenerator"]
