"""Shared test fixtures for the MCP catalog."""

from __future__ import annotations

from pathlib import Path
from typing import Callable

import pytest

SAMPLE_SERVER = """// ---
// id: date-times-mcp
// description: Provides date and time utilities
// tags:
//   - datetime
//   - utilities
// status: stable
// version: 1.2.0
// author: XAKPC Dev Labs
// license: MIT
// ---
#:package ModelContextProtocol@0.3.0-preview.3
using ModelContextProtocol.Server;
using System.ComponentModel;

[McpServerToolType]
public static class DateTimeTools
{
    [McpServerTool, Description("Gets current date and time in various formats")]
    public static CurrentDateTimeResult GetCurrentDateTime(
        [Description("Date format string")] string format = "yyyy-MM-dd HH:mm:ss")
    {
        return new CurrentDateTimeResult(DateTime.Now.ToString(format));
    }

    [McpServerTool, Description("Calculates the difference between two dates")]
    public static DateDifferenceResult DateDifference(DateTime startDate, DateTime endDate)
    {
        var diff = endDate - startDate;
        return new DateDifferenceResult(diff.Days, diff.Hours, diff.Minutes);
    }
}
"""


@pytest.fixture
def sample_server() -> str:
    return SAMPLE_SERVER


@pytest.fixture
def write_source(tmp_path: Path) -> Callable[..., Path]:
    """Write a sample source file under ``tmp_path/mcp`` and return its path."""

    def _write(name: str, contents: str, directory: str = "mcp") -> Path:
        target_dir = tmp_path / directory
        target_dir.mkdir(parents=True, exist_ok=True)
        target = target_dir / name
        target.write_text(contents, encoding="utf-8")
        return target

    return _write
