"""Configuration models for the MCP catalog."""

from __future__ import annotations

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class ExtractorConfig(BaseModel):
    """Catalog extraction configuration."""

    samples_dir: str = Field(default="mcp", description="Directory scanned for sample sources.")
    extension: str = Field(default=".cs", description="Extension of sample source files.")
    comment_marker: str = Field(default="//", min_length=1)
    sentinel: str = Field(default="// ---", min_length=1, description="Front-matter delimiter line.")
    tool_marker: str = Field(default="[McpServerTool", min_length=1)
    tool_lookahead: int = Field(default=9, ge=0, le=100)
    strict_ids: bool = Field(default=False, description="Fail the build when two files share an id.")


class SiteConfig(BaseModel):
    """Static site rendering configuration."""

    output_dir: str = Field(default="_site")
    base_url: str = Field(default="https://mcp-catalog.local")
    title: str = Field(default="MCP Server Catalog")
    page_size: int = Field(default=12, ge=1, le=500)
    assets_dirs: list[str] = Field(
        default_factory=list,
        description="Directories copied as-is into the output, each under its own name.",
    )


class CatalogConfig(BaseSettings):
    """Root configuration model for the MCP catalog."""

    extractor: ExtractorConfig = Field(default_factory=ExtractorConfig)
    site: SiteConfig = Field(default_factory=SiteConfig)

    model_config = SettingsConfigDict(
        env_prefix="MCPCATALOG_",
        env_nested_delimiter="__",
        extra="ignore",
    )
