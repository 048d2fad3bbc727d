"""MCP catalog: extract sample server metadata and render a browsable catalog."""

from mcpcatalog.catalog import (
    CatalogBuilder,
    CatalogExtractor,
    CatalogRecord,
    ToolDescriptor,
    to_list,
)
from mcpcatalog.config import CatalogConfig, ExtractorConfig, SiteConfig, load_config

__all__ = [
    "CatalogBuilder",
    "CatalogConfig",
    "CatalogExtractor",
    "CatalogRecord",
    "ExtractorConfig",
    "SiteConfig",
    "ToolDescriptor",
    "load_config",
    "to_list",
]
