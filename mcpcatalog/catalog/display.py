"""Display code derivation."""

from __future__ import annotations

from mcpcatalog.catalog.frontmatter import find_front_matter

# &amp; must stay last so "&amp;lt;" decodes to "&lt;" and not "<".
HTML_ENTITIES: tuple[tuple[str, str], ...] = (
    ("&quot;", '"'),
    ("&#39;", "'"),
    ("&lt;", "<"),
    ("&gt;", ">"),
    ("&amp;", "&"),
)


def decode_html_entities(text: str) -> str:
    """Decode the fixed set of HTML entities found in sample sources."""
    for entity, replacement in HTML_ENTITIES:
        text = text.replace(entity, replacement)
    return text


def derive_display_code(contents: str, *, sentinel: str = "// ---", marker: str = "//") -> str:
    """Return the source body without its front-matter block.

    When no closing sentinel exists the whole text is used.
    """
    lines = contents.split("\n")
    span = find_front_matter(lines, sentinel=sentinel, marker=marker)
    if span.end is not None:
        code = "\n".join(lines[span.end + 1 :]).strip()
    else:
        code = contents.strip()
    return decode_html_entities(code)
