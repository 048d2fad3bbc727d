"""Core models for catalog extraction."""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from datetime import date, datetime, timezone
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

DEFAULT_DESCRIPTION = "MCP Server"
DEFAULT_STATUS = "stable"
DEFAULT_VERSION = "1.0.0"
DEFAULT_AUTHOR = "Unknown"
DEFAULT_LICENSE = "MIT"


def _to_text(value: Any) -> Any:
    """Coerce YAML scalars typed eagerly by the loader back to text."""
    if value is None or isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float)):
        return str(value)
    if isinstance(value, (date, datetime)):
        return value.isoformat()
    return value


class FrontMatter(BaseModel):
    """Decoded front-matter block; every field is optional."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore", frozen=True)

    id: str | None = None
    name: str | None = None
    description: str | None = None
    long_description: str | None = Field(default=None, alias="longDescription")
    tags: list[str] | None = None
    status: str | None = None
    downloads: int | None = None
    last_updated: str | None = Field(default=None, alias="lastUpdated")
    version: str | None = None
    author: str | None = None
    license: str | None = None
    created_date: str | None = Field(default=None, alias="createdDate")
    env_vars: list[str] | None = Field(default=None, alias="envVars")

    @field_validator(
        "id",
        "name",
        "description",
        "long_description",
        "status",
        "last_updated",
        "version",
        "author",
        "license",
        "created_date",
        mode="before",
    )
    @classmethod
    def _coerce_text(cls, value: Any) -> Any:
        return _to_text(value)

    @field_validator("tags", "env_vars", mode="before")
    @classmethod
    def _coerce_sequence(cls, value: Any) -> Any:
        if isinstance(value, list):
            return [_to_text(item) for item in value if item is not None]
        if not value:
            return None
        if isinstance(value, dict):
            return value
        return [_to_text(value)]


@dataclass(frozen=True)
class ToolDescriptor:
    """One tool declared by a source file."""

    name: str
    description: str


@dataclass(frozen=True)
class CatalogMetadata:
    """Front matter with every field resolved."""

    id: str
    name: str
    description: str
    long_description: str
    tags: list[str]
    status: str
    downloads: int
    last_updated: str
    version: str
    author: str
    license: str
    created_date: str
    env_vars: list[str]


@dataclass(frozen=True)
class CatalogRecord:
    """Fully resolved catalog entry for one source file."""

    id: str
    name: str
    description: str
    long_description: str
    tags: list[str]
    status: str
    downloads: int
    last_updated: str
    version: str
    author: str
    license: str
    created_date: str
    env_vars: list[str]
    tools: list[ToolDescriptor] = field(default_factory=list)
    code: str = ""
    display_code: str = ""

    @classmethod
    def from_metadata(
        cls,
        metadata: CatalogMetadata,
        *,
        tools: list[ToolDescriptor],
        code: str,
        display_code: str,
    ) -> CatalogRecord:
        return cls(**asdict(metadata), tools=list(tools), code=code, display_code=display_code)

    def to_dict(self) -> dict[str, Any]:
        """Return the record with the key names used by the site templates."""
        return {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "longDescription": self.long_description,
            "tags": list(self.tags),
            "status": self.status,
            "downloads": self.downloads,
            "lastUpdated": self.last_updated,
            "version": self.version,
            "author": self.author,
            "license": self.license,
            "createdDate": self.created_date,
            "envVars": list(self.env_vars),
            "tools": [asdict(tool) for tool in self.tools],
            "code": self.code,
            "displayCode": self.display_code,
        }


def utc_today() -> str:
    """Return the current UTC date as ``YYYY-MM-DD``."""
    return datetime.now(timezone.utc).date().isoformat()


def resolve_front_matter(
    front_matter: FrontMatter,
    *,
    stem: str,
    extension: str,
    today: str,
) -> CatalogMetadata:
    """Apply fallback defaults to decoded front matter.

    ``long_description`` falls back to the resolved description and
    ``created_date`` to the resolved ``last_updated``, so the order of the
    assignments below matters.
    """
    description = front_matter.description or DEFAULT_DESCRIPTION
    last_updated = front_matter.last_updated or today
    return CatalogMetadata(
        id=front_matter.id or stem,
        name=front_matter.name or f"{stem}{extension}",
        description=description,
        long_description=front_matter.long_description or description,
        tags=list(front_matter.tags or []),
        status=front_matter.status or DEFAULT_STATUS,
        downloads=front_matter.downloads or 0,
        last_updated=last_updated,
        version=front_matter.version or DEFAULT_VERSION,
        author=front_matter.author or DEFAULT_AUTHOR,
        license=front_matter.license or DEFAULT_LICENSE,
        created_date=front_matter.created_date or last_updated,
        env_vars=list(front_matter.env_vars or []),
    )
