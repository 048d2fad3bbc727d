"""Catalog extraction: front matter, tools and display code from sample sources."""

from mcpcatalog.catalog.assembler import to_list
from mcpcatalog.catalog.builder import CatalogBuilder
from mcpcatalog.catalog.display import decode_html_entities, derive_display_code
from mcpcatalog.catalog.exceptions import CatalogError, DuplicateRecordError, MetadataDecodeError
from mcpcatalog.catalog.extractor import CatalogExtractor, Reporter
from mcpcatalog.catalog.frontmatter import (
    FieldIssue,
    FrontMatterSpan,
    decode_front_matter,
    decode_front_matter_fields,
    find_front_matter,
)
from mcpcatalog.catalog.models import (
    CatalogMetadata,
    CatalogRecord,
    FrontMatter,
    ToolDescriptor,
    resolve_front_matter,
)
from mcpcatalog.catalog.tools import ToolScanner, extract_tools

__all__ = [
    "CatalogBuilder",
    "CatalogError",
    "CatalogExtractor",
    "CatalogMetadata",
    "CatalogRecord",
    "DuplicateRecordError",
    "FieldIssue",
    "FrontMatter",
    "FrontMatterSpan",
    "MetadataDecodeError",
    "Reporter",
    "ToolDescriptor",
    "ToolScanner",
    "decode_front_matter",
    "decode_front_matter_fields",
    "decode_html_entities",
    "derive_display_code",
    "extract_tools",
    "find_front_matter",
    "resolve_front_matter",
    "to_list",
]
