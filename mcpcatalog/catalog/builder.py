"""Catalog builder for catalog.json generation."""

from __future__ import annotations

from datetime import datetime, timezone
from pathlib import Path
from typing import Any

from mcpcatalog.catalog.assembler import to_list
from mcpcatalog.catalog.extractor import CatalogExtractor

CATALOG_FORMAT_VERSION = "1.0"


class CatalogBuilder:
    """Build the catalog payload from a samples directory."""

    def __init__(self, extractor: CatalogExtractor | None = None) -> None:
        self.extractor = extractor or CatalogExtractor()

    def build(self, path: str | Path | None = None) -> dict[str, Any]:
        """Extract, assemble and return the JSON-serialisable catalog."""
        servers = [record.to_dict() for record in to_list(self.extractor.scan_directory(path))]
        return {
            "version": CATALOG_FORMAT_VERSION,
            "generated_at": datetime.now(timezone.utc).isoformat(),
            "total_servers": len(servers),
            "servers": servers,
        }
