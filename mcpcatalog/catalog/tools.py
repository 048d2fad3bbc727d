"""Tool declaration scanner.

Finds attribute lines such as::

    [McpServerTool, Description("Gets current date and time")]
    public static CurrentDateTimeResult GetCurrentDateTime(

and pairs each description with the first public static method signature
that follows within the lookahead window.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum

from mcpcatalog.catalog.models import ToolDescriptor

_DESCRIPTION_PATTERN = re.compile(r'Description\("([^"]+)"\)')
_METHOD_PATTERN = re.compile(r"public static\s+\w+\s+(\w+)\s*\(")

DEFAULT_TOOL_MARKER = "[McpServerTool"
DEFAULT_LOOKAHEAD = 9


class ScanState(str, Enum):
    """Tool scanner state."""

    IDLE = "idle"
    SAW_ATTRIBUTE = "saw_attribute"


@dataclass
class _PendingAttribute:
    description: str
    remaining: int


class ToolScanner:
    """Scan source text for tool declarations."""

    def __init__(self, marker: str = DEFAULT_TOOL_MARKER, lookahead: int = DEFAULT_LOOKAHEAD) -> None:
        self.marker = marker
        self.lookahead = lookahead

    def scan(self, contents: str) -> list[ToolDescriptor]:
        """Return tool descriptors in declaration order.

        Attributes without a quoted description, or without a method
        signature inside the window, are skipped.
        """
        tools: list[ToolDescriptor] = []
        pending: list[_PendingAttribute] = []
        state = ScanState.IDLE
        for raw in contents.split("\n"):
            line = raw.strip()
            if state is ScanState.SAW_ATTRIBUTE:
                method_name = self._method_name(line)
                still_pending: list[_PendingAttribute] = []
                for attribute in pending:
                    if method_name is not None:
                        tools.append(ToolDescriptor(name=method_name, description=attribute.description))
                        continue
                    attribute.remaining -= 1
                    if attribute.remaining > 0:
                        still_pending.append(attribute)
                pending = still_pending
                state = ScanState.SAW_ATTRIBUTE if pending else ScanState.IDLE
            description = self._description(line)
            if description is not None and self.lookahead > 0:
                pending.append(_PendingAttribute(description=description, remaining=self.lookahead))
                state = ScanState.SAW_ATTRIBUTE
        return tools

    def _description(self, line: str) -> str | None:
        if self.marker not in line or "Description(" not in line:
            return None
        match = _DESCRIPTION_PATTERN.search(line)
        return match.group(1) if match else None

    @staticmethod
    def _method_name(line: str) -> str | None:
        if "public static" not in line or "(" not in line:
            return None
        match = _METHOD_PATTERN.search(line)
        return match.group(1) if match else None


def extract_tools(
    contents: str,
    *,
    marker: str = DEFAULT_TOOL_MARKER,
    lookahead: int = DEFAULT_LOOKAHEAD,
) -> list[ToolDescriptor]:
    """Shortcut for ``ToolScanner(marker, lookahead).scan(contents)``."""
    return ToolScanner(marker=marker, lookahead=lookahead).scan(contents)
