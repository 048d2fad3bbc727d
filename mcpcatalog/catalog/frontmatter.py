"""Front-matter span detection and decoding for commented source files.

A front-matter block sits between two sentinel lines (``// ---`` by
default) and every metadata line inside it carries the line-comment
marker::

    // ---
    // id: sample-one
    // tags:
    //     - alpha
    // ---
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

import yaml  # type: ignore[import-untyped]
from pydantic import ValidationError

from mcpcatalog.catalog.exceptions import MetadataDecodeError
from mcpcatalog.catalog.models import FrontMatter


class SpanState(str, Enum):
    """Position of the scanner relative to the front-matter block."""

    BEFORE_BLOCK = "before_block"
    IN_BLOCK = "in_block"
    AFTER_BLOCK = "after_block"


@dataclass(frozen=True)
class FrontMatterSpan:
    """Location and raw content of a front-matter block.

    ``start`` and ``end`` are the line indexes of the opening and closing
    sentinels; either is ``None`` when that sentinel was never seen.
    """

    start: int | None = None
    end: int | None = None
    lines: list[str] = field(default_factory=list)

    @property
    def closed(self) -> bool:
        return self.end is not None


def trim_line(line: str) -> str:
    return line.strip().lstrip("\ufeff").strip()


def strip_comment_marker(line: str, marker: str = "//") -> str:
    """Remove the comment marker from one trimmed metadata line.

    A remainder that starts with a space is kept verbatim so YAML
    indentation survives.
    """
    remainder = line[len(marker) :]
    if remainder.startswith(" "):
        return remainder
    if remainder.strip():
        return remainder.strip()
    return ""


def find_front_matter(lines: list[str], *, sentinel: str = "// ---", marker: str = "//") -> FrontMatterSpan:
    """Locate the front-matter block and collect its metadata lines."""
    state = SpanState.BEFORE_BLOCK
    start: int | None = None
    end: int | None = None
    collected: list[str] = []
    for index, raw in enumerate(lines):
        line = trim_line(raw)
        if line == sentinel:
            if state is SpanState.BEFORE_BLOCK:
                state = SpanState.IN_BLOCK
                start = index
                continue
            state = SpanState.AFTER_BLOCK
            end = index
            break
        if state is SpanState.IN_BLOCK and line.startswith(marker):
            collected.append(strip_comment_marker(line, marker))
    return FrontMatterSpan(start=start, end=end, lines=collected)


@dataclass(frozen=True)
class FieldIssue:
    """One front-matter field rejected during decoding."""

    name: str
    message: str


def decode_front_matter_fields(
    lines: list[str], *, source: str = "<string>"
) -> tuple[FrontMatter, list[FieldIssue]]:
    """Decode metadata lines, keeping every field that validates.

    A field that fails type validation is dropped, so it falls back to its
    default, and returned as a ``FieldIssue``.

    Raises:
        MetadataDecodeError: on YAML syntax errors or a non-mapping document.
    """
    if not lines:
        return FrontMatter(), []
    text = "\n".join(lines)
    try:
        loaded: Any = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        mark = getattr(exc, "problem_mark", None)
        if mark is not None:
            raise MetadataDecodeError(source, f"invalid YAML at line {mark.line + 1}, column {mark.column + 1}") from exc
        raise MetadataDecodeError(source, "invalid YAML") from exc
    if not loaded:
        return FrontMatter(), []
    if not isinstance(loaded, dict):
        raise MetadataDecodeError(source, f"front matter must be a mapping, got {type(loaded).__name__}")

    data = dict(loaded)
    issues: list[FieldIssue] = []
    while True:
        try:
            return FrontMatter.model_validate(data), issues
        except ValidationError as exc:
            rejected: dict[str, str] = {}
            for error in exc.errors():
                key = str(error["loc"][0]) if error["loc"] else ""
                if key in data and key not in rejected:
                    rejected[key] = error["msg"]
            if not rejected:
                raise MetadataDecodeError(source, str(exc)) from exc
            for key, message in rejected.items():
                issues.append(FieldIssue(name=key, message=message))
                del data[key]


def decode_front_matter(lines: list[str], *, source: str = "<string>") -> FrontMatter:
    """Decode collected metadata lines into a typed ``FrontMatter``.

    Fields that fail validation are dropped; use
    ``decode_front_matter_fields`` to see which.
    """
    front_matter, _issues = decode_front_matter_fields(lines, source=source)
    return front_matter
