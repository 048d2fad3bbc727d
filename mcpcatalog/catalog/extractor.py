"""Catalog extractor: turn a directory of sample sources into catalog records."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable

from mcpcatalog.catalog.display import derive_display_code
from mcpcatalog.catalog.exceptions import DuplicateRecordError, MetadataDecodeError
from mcpcatalog.catalog.frontmatter import decode_front_matter_fields, find_front_matter
from mcpcatalog.catalog.models import CatalogRecord, FrontMatter, resolve_front_matter, utc_today
from mcpcatalog.catalog.tools import ToolScanner
from mcpcatalog.config.models import ExtractorConfig

logger = logging.getLogger(__name__)

Reporter = Callable[..., None]
"""Callable with the signature of ``Logger.log``: ``(level, msg, *args)``."""


class CatalogExtractor:
    """Scan a samples directory and build one ``CatalogRecord`` per source file."""

    def __init__(
        self,
        config: ExtractorConfig | None = None,
        *,
        reporter: Reporter | None = None,
        today: Callable[[], str] | None = None,
    ) -> None:
        self.config = config or ExtractorConfig()
        self.reporter = reporter or logger.log
        self._today = today or utc_today
        self._tool_scanner = ToolScanner(marker=self.config.tool_marker, lookahead=self.config.tool_lookahead)

    def scan_directory(self, path: str | Path | None = None) -> dict[str, CatalogRecord]:
        """Return a mapping of catalog id to record for every eligible file.

        A missing or unreadable directory is reported and yields an empty
        mapping. Once a file is selected, read errors propagate.

        Raises:
            OSError: a selected file could not be read.
            UnicodeDecodeError: a selected file is not valid UTF-8.
            DuplicateRecordError: two files share an id and ``strict_ids`` is set.
        """
        root = Path(path) if path is not None else Path(self.config.samples_dir)
        records: dict[str, CatalogRecord] = {}
        sources: dict[str, Path] = {}
        self.reporter(logging.INFO, "Looking for %s files in: %s", self.config.extension, root)
        try:
            files = sorted(entry for entry in root.iterdir() if entry.suffix == self.config.extension)
        except OSError as exc:
            self.reporter(logging.WARNING, "No samples directory found or failed to read %s: %s", root, exc)
            return records
        self.reporter(logging.INFO, "Found %s files: %s", self.config.extension, [entry.name for entry in files])

        for file_path in files:
            contents = file_path.read_text(encoding="utf-8")
            record = self.parse_record(contents, file_path)
            self.reporter(logging.INFO, "Parsed record: %s %s", record.id, record.name)
            if record.id in records:
                if self.config.strict_ids:
                    raise DuplicateRecordError(record.id, str(sources[record.id]), str(file_path))
                self.reporter(
                    logging.DEBUG,
                    "Catalog id '%s' from %s replaces %s",
                    record.id,
                    file_path,
                    sources[record.id],
                )
            records[record.id] = record
            sources[record.id] = file_path

        self.reporter(logging.INFO, "Total records loaded: %d", len(records))
        return records

    def parse_record(self, contents: str, file_path: str | Path) -> CatalogRecord:
        """Build one catalog record from a source file's text.

        A front-matter block that fails to decode is reported and the
        record falls back to defaults for every field. A single field with
        the wrong type is reported and falls back on its own.
        """
        path = Path(file_path)
        span = find_front_matter(
            contents.split("\n"),
            sentinel=self.config.sentinel,
            marker=self.config.comment_marker,
        )
        try:
            front_matter, issues = decode_front_matter_fields(span.lines, source=str(path))
        except MetadataDecodeError as exc:
            self.reporter(logging.WARNING, "%s", exc)
            self.reporter(logging.DEBUG, "Front matter content:\n%s", "\n".join(span.lines))
            front_matter, issues = FrontMatter(), []
        for issue in issues:
            self.reporter(
                logging.WARNING,
                "Ignoring front matter field '%s' in %s: %s",
                issue.name,
                path,
                issue.message,
            )

        metadata = resolve_front_matter(
            front_matter,
            stem=_stem(path, self.config.extension),
            extension=self.config.extension,
            today=self._today(),
        )
        return CatalogRecord.from_metadata(
            metadata,
            tools=self._tool_scanner.scan(contents),
            code=contents,
            display_code=derive_display_code(
                contents,
                sentinel=self.config.sentinel,
                marker=self.config.comment_marker,
            ),
        )


def _stem(path: Path, extension: str) -> str:
    name = path.name
    if extension and name.endswith(extension):
        return name[: -len(extension)]
    return name
