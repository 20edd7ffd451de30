"""Attribute string parsing for component tags.

Decodes the text between ``{`` and ``}`` of a component tag into a flat
``dict[str, str]``. Scanning is lenient: anything that is not a
``key=value`` token is skipped.
"""

from __future__ import annotations

import re

__all__ = ["parse_attributes"]

_ATTRIBUTE_RE = re.compile(
    r"""
    (?P<key>\w+)\s*=\s*
    (?:
        "(?P<double>(?:[^"\\]|\\.)*)"     # "double quoted", \" allowed
      | '(?P<single>(?:[^'\\]|\\.)*)'     # 'single quoted', \' allowed
      | (?P<bare>[^\s}]*)                 # bare run up to whitespace or }
    )
    """,
    re.VERBOSE | re.DOTALL,
)


def parse_attributes(inner: str) -> dict[str, str]:
    """Parse ``key=value`` pairs from a component tag's attribute text.

    Args:
        inner: Raw text between the tag's braces.

    Returns:
        Mapping of attribute names to trimmed string values. A key that
        appears more than once keeps its last value.

    Example:
        >>> parse_attributes('src="a.png" width=300 alt=\\'A cat\\'')
        {'src': 'a.png', 'width': '300', 'alt': 'A cat'}
    """
    attributes: dict[str, str] = {}

    for match in _ATTRIBUTE_RE.finditer(inner):
        if match.group("double") is not None:
            value = match.group("double").replace('\\"', '"')
        elif match.group("single") is not None:
            value = match.group("single").replace("\\'", "'")
        else:
            value = match.group("bare")
        attributes[match.group("key")] = value.strip()

    return attributes
