"""Configuration for the MCP catalog."""

from mcpcatalog.config.loader import ConfigLoadError, YAMLConfigLoader, load_config
from mcpcatalog.config.models import CatalogConfig, ExtractorConfig, SiteConfig

__all__ = [
    "CatalogConfig",
    "ConfigLoadError",
    "ExtractorConfig",
    "SiteConfig",
    "YAMLConfigLoader",
    "load_config",
]
