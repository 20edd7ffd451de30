"""Frontmatter extraction for component markdown documents.

Pulls a leading ``---`` delimited header off a document and decodes it
into a flat ``key -> value`` mapping. The header format is deliberately
lenient: every ``key: value`` line starts a new key, and any other line
continues the previous value. There is no YAML here; values are plain
strings and structured data (JSON lists for galleries) is decoded later
by the component that needs it.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field

__all__ = [
    "FrontmatterResult",
    "extract_frontmatter",
    "split_frontmatter",
]

# Opening line, optional header region, closing line (newline or end of text)
_FRONTMATTER_RE = re.compile(
    r"\A[ \t]*---[ \t]*\r?\n(?:(?P<header>.*?)\r?\n)??[ \t]*---[ \t]*(?:\r?\n|\Z)",
    re.DOTALL,
)
_KEY_LINE_RE = re.compile(r"^(\w+):\s*(.*)")
_QUOTED_RE = re.compile(r"^(['\"])(.*)\1$", re.DOTALL)


@dataclass(frozen=True)
class FrontmatterResult:
    """Decoded frontmatter and the document body that follows it.

    Attributes:
        attributes: Header keys mapped to their string values.
        content: The document with the frontmatter span removed.
    """

    attributes: dict[str, str] = field(default_factory=dict)
    content: str = ""


def _unquote(value: str) -> str:
    """Strip one layer of matching wrapping quotes and surrounding space."""
    value = value.strip()
    match = _QUOTED_RE.match(value)
    if match:
        value = match.group(2)
    return value.strip()


def _parse_header(header: str) -> dict[str, str]:
    """Collect ``key: value`` lines, folding other lines into the previous key."""
    values: dict[str, list[str]] = {}
    current: str | None = None

    for line in header.splitlines():
        match = _KEY_LINE_RE.match(line)
        if match:
            current = match.group(1)
            values[current] = [match.group(2)]
        elif current is not None:
            values[current].append(line)
        # Lines before the first key have nothing to continue

    return {key: _unquote("\n".join(lines)) for key, lines in values.items()}


def extract_frontmatter(text: str) -> FrontmatterResult | None:
    """Extract the frontmatter header from the start of a document.

    Args:
        text: Full document text.

    Returns:
        FrontmatterResult with the decoded header and the remaining body,
        or None if the document does not start with a ``---`` line
        followed by a closing ``---`` line.

    Example:
        >>> result = extract_frontmatter("---\\ntitle: Hi\\n---\\nBody")
        >>> result.attributes
        {'title': 'Hi'}
        >>> result.content
        'Body'
    """
    match = _FRONTMATTER_RE.match(text)
    if match is None:
        return None

    header = match.group("header") or ""
    return FrontmatterResult(
        attributes=_parse_header(header),
        content=text[match.end() :],
    )


def split_frontmatter(text: str) -> tuple[dict[str, str], str]:
    """Split a document into (attributes, body).

    Same as :func:`extract_frontmatter` but returns ``({}, text)`` when
    the document has no frontmatter.
    """
    result = extract_frontmatter(text)
    if result is None:
        return {}, text
    return result.attributes, result.content
