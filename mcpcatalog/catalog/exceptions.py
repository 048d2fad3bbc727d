"""Catalog extraction exceptions."""


class CatalogError(Exception):
    """Base exception for catalog extraction."""

    pass


class MetadataDecodeError(CatalogError):
    """Raised when a front-matter block cannot be decoded into metadata."""

    def __init__(self, source: str, message: str) -> None:
        self.source = source
        super().__init__(f"Failed to decode front matter in {source}: {message}")


class DuplicateRecordError(CatalogError):
    """Raised when two source files resolve to the same catalog id."""

    def __init__(self, record_id: str, first: str, second: str) -> None:
        self.record_id = record_id
        self.first = first
        self.second = second
        super().__init__(f"Duplicate catalog id '{record_id}' in {second} (already loaded from {first})")
