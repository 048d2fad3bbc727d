"""Unit tests for the catalog extractor."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Callable

import pytest

from mcpcatalog.catalog import CatalogExtractor, DuplicateRecordError, ToolDescriptor
from mcpcatalog.config import ExtractorConfig


class _RecordingReporter:
    def __init__(self) -> None:
        self.events: list[tuple[int, str]] = []

    def __call__(self, level: int, msg: str, *args: Any) -> None:
        self.events.append((level, msg % args if args else msg))

    def messages(self, level: int) -> list[str]:
        return [message for event_level, message in self.events if event_level == level]


def _extractor(reporter: _RecordingReporter | None = None, **config: Any) -> CatalogExtractor:
    return CatalogExtractor(ExtractorConfig(**config), reporter=reporter, today=lambda: "2026-03-04")


def test_parse_record_end_to_end_scenario() -> None:
    contents = "// ---\n// id: sample-one\n// tags:\n//     - alpha\n//     - beta\n// ---\n... body ...\n"
    record = _extractor().parse_record(contents, "mcp/whatever.cs")
    assert record.id == "sample-one"
    assert record.tags == ["alpha", "beta"]
    assert record.status == "stable"
    assert record.version == "1.0.0"
    assert record.author == "Unknown"
    assert record.license == "MIT"
    assert record.env_vars == []
    assert record.downloads == 0
    assert record.name == "whatever.cs"
    assert record.last_updated == record.created_date == "2026-03-04"
    assert record.code == contents
    assert record.display_code == "... body ..."


def test_parse_record_sample_server(sample_server: str) -> None:
    record = _extractor().parse_record(sample_server, Path("mcp/date-times-mcp.cs"))
    assert record.id == "date-times-mcp"
    assert record.description == "Provides date and time utilities"
    assert record.long_description == "Provides date and time utilities"
    assert record.version == "1.2.0"
    assert record.author == "XAKPC Dev Labs"
    assert [tool.name for tool in record.tools] == ["GetCurrentDateTime", "DateDifference"]
    assert record.display_code.startswith("#:package ModelContextProtocol")


def test_parse_record_without_sentinel_uses_defaults() -> None:
    contents = "  using System;\n[McpServerTool, Description(\"Echo\")]\npublic static string Echo(string s)\n"
    record = _extractor().parse_record(contents, "mcp/plain.cs")
    assert record.id == "plain"
    assert record.name == "plain.cs"
    assert record.description == "MCP Server"
    assert record.display_code == contents.strip()
    assert record.tools == [ToolDescriptor(name="Echo", description="Echo")]


def test_parse_record_malformed_metadata_falls_back_and_reports() -> None:
    reporter = _RecordingReporter()
    contents = "// ---\n// id: [unclosed\n// description: broken\n// ---\nbody"
    record = _extractor(reporter).parse_record(contents, "mcp/broken.cs")
    assert record.id == "broken"
    assert record.description == "MCP Server"
    assert record.display_code == "body"
    warnings = reporter.messages(logging.WARNING)
    assert len(warnings) == 1
    assert "broken.cs" in warnings[0]
    assert any("id: [unclosed" in message for message in reporter.messages(logging.DEBUG))


def test_parse_record_invalid_field_keeps_other_fields() -> None:
    reporter = _RecordingReporter()
    contents = "// ---\n// id: explicit-id\n// description: Foo\n// downloads: 1,234\n// ---\nbody"
    record = _extractor(reporter).parse_record(contents, "mcp/file.cs")
    assert record.id == "explicit-id"
    assert record.description == "Foo"
    assert record.long_description == "Foo"
    assert record.downloads == 0
    assert record.display_code == "body"
    warnings = reporter.messages(logging.WARNING)
    assert len(warnings) == 1
    assert "'downloads'" in warnings[0]
    assert "file.cs" in warnings[0]


def test_scan_directory_invalid_field_keeps_explicit_id(write_source: Callable[..., Path]) -> None:
    directory = write_source("file.cs", "// ---\n// id: explicit-id\n// downloads: many\n// ---\n").parent
    records = _extractor().scan_directory(directory)
    assert list(records) == ["explicit-id"]


def test_scan_directory_collects_eligible_files(write_source: Callable[..., Path], sample_server: str) -> None:
    write_source("date-times-mcp.cs", sample_server)
    write_source("plain.cs", "using System;\n")
    write_source("README.md", "# not a sample\n")
    records = _extractor().scan_directory(write_source("other.cs", "").parent)
    assert list(records) == ["date-times-mcp", "other", "plain"]
    assert records["plain"].name == "plain.cs"


def test_scan_directory_defaults_to_configured_samples_dir(
    write_source: Callable[..., Path],
    tmp_path: Path,
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    write_source("one.cs", "// ---\n// id: first\n// ---\n", directory="samples")
    monkeypatch.chdir(tmp_path)
    records = _extractor(samples_dir="samples").scan_directory()
    assert list(records) == ["first"]


def test_scan_directory_missing_directory_returns_empty(tmp_path: Path) -> None:
    reporter = _RecordingReporter()
    assert _extractor(reporter).scan_directory(tmp_path / "missing") == {}
    assert any("missing" in message for message in reporter.messages(logging.WARNING))


def test_scan_directory_reports_progress(write_source: Callable[..., Path], sample_server: str) -> None:
    reporter = _RecordingReporter()
    directory = write_source("date-times-mcp.cs", sample_server).parent
    _extractor(reporter).scan_directory(directory)
    info = reporter.messages(logging.INFO)
    assert any(str(directory) in message for message in info)
    assert any("date-times-mcp.cs" in message for message in info)
    assert "Parsed record: date-times-mcp date-times-mcp.cs" in info
    assert info[-1] == "Total records loaded: 1"


def test_default_reporter_logs_to_module_logger(
    write_source: Callable[..., Path],
    caplog: pytest.LogCaptureFixture,
) -> None:
    caplog.set_level(logging.INFO, logger="mcpcatalog.catalog.extractor")
    directory = write_source("plain.cs", "using System;\n").parent
    CatalogExtractor().scan_directory(directory)
    assert "Total records loaded: 1" in caplog.text


def test_scan_directory_id_collision_last_file_wins(write_source: Callable[..., Path]) -> None:
    reporter = _RecordingReporter()
    write_source("alpha.cs", "// ---\n// description: first\n// ---\n")
    write_source("beta.cs", "// ---\n// id: alpha\n// description: second\n// ---\n")
    write_source("gamma.cs", "")
    records = _extractor(reporter).scan_directory(write_source("gamma.cs", "").parent)
    assert list(records) == ["alpha", "gamma"]
    assert records["alpha"].description == "second"
    assert not reporter.messages(logging.WARNING)


def test_scan_directory_id_collision_strict(write_source: Callable[..., Path]) -> None:
    write_source("alpha.cs", "")
    directory = write_source("beta.cs", "// ---\n// id: alpha\n// ---\n").parent
    with pytest.raises(DuplicateRecordError, match="alpha"):
        _extractor(strict_ids=True).scan_directory(directory)


def test_scan_directory_unreadable_file_propagates(write_source: Callable[..., Path]) -> None:
    directory = write_source("good.cs", "using System;\n").parent
    (directory / "bad.cs").write_bytes(b"\xff\xfe\xfa invalid utf-8")
    with pytest.raises(UnicodeDecodeError):
        _extractor().scan_directory(directory)


def test_scan_directory_selected_directory_entry_propagates(write_source: Callable[..., Path]) -> None:
    directory = write_source("good.cs", "using System;\n").parent
    (directory / "nested.cs").mkdir()
    with pytest.raises(OSError):
        _extractor().scan_directory(directory)


def test_scan_directory_custom_extension(write_source: Callable[..., Path]) -> None:
    write_source("tool.py", "# ---\n# id: py-tool\n# ---\nprint('hi')\n")
    directory = write_source("skip.cs", "").parent
    records = _extractor(extension=".py", sentinel="# ---", comment_marker="#").scan_directory(directory)
    assert list(records) == ["py-tool"]
    assert records["py-tool"].name == "tool.py"
    assert records["py-tool"].display_code == "print('hi')"
