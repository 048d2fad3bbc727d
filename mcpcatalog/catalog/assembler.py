"""Flatten the id-to-record mapping into an ordered catalog list."""

from __future__ import annotations

from dataclasses import replace
from typing import Mapping

from mcpcatalog.catalog.models import CatalogRecord


def to_list(records: Mapping[str, CatalogRecord]) -> list[CatalogRecord]:
    """Return records in mapping order with each key re-asserted as ``id``."""
    return [replace(record, id=record_id) for record_id, record in records.items()]
