"""Tokenizer for component markup.

Finds the next component token in a document. Three token kinds can
overlap (``:name{...}``, ``::name{...}`` and a bare ``::``), so every
kind is searched and the leftmost match wins. Matches starting at the
same index are ordered by a fixed precedence: block open, block close,
inline.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum

__all__ = [
    "Token",
    "TokenKind",
    "Tokenizer",
]

# Attribute body runs up to the first "}", across lines
_ATTR_BODY = r"[^}]*"

_INLINE_RE = re.compile(
    r":(?P<name>[\w-]+)\{(?P<attrs>" + _ATTR_BODY + r")\}",
    re.DOTALL,
)
_BLOCK_OPEN_RE = re.compile(
    r"::(?!:)(?P<name>[\w-]+)(?:\{(?P<attrs>" + _ATTR_BODY + r")\})?"
    r"[ \t]*(?:\r?\n)?",
    re.DOTALL,
)
_BLOCK_CLOSE_RE = re.compile(r"(?:\r?\n)?(?P<tag>::)(?![\w-])[ \t]*(?:\r?\n)?")


class TokenKind(Enum):
    """Token kinds, in tie-break precedence order."""

    BLOCK_OPEN = "block_open"
    BLOCK_CLOSE = "block_close"
    INLINE = "inline"


_PATTERNS: tuple[tuple[TokenKind, re.Pattern[str]], ...] = (
    (TokenKind.BLOCK_OPEN, _BLOCK_OPEN_RE),
    (TokenKind.BLOCK_CLOSE, _BLOCK_CLOSE_RE),
    (TokenKind.INLINE, _INLINE_RE),
)


@dataclass(frozen=True)
class Token:
    """A recognized component token.

    Attributes:
        kind: What the token is.
        start: Offset of the first character the token consumes.
        end: Offset just past the token.
        name: Component name (empty for closing tokens).
        attrs: Raw attribute text between the braces, if any.
        raw: The tag itself, without the line breaks the token absorbs.
    """

    kind: TokenKind
    start: int
    end: int
    name: str = ""
    attrs: str = ""
    raw: str = ""


def _to_token(kind: TokenKind, match: re.Match[str]) -> Token:
    if kind is TokenKind.BLOCK_CLOSE:
        return Token(kind, match.start(), match.end(), raw=match.group("tag"))

    return Token(
        kind,
        match.start(),
        match.end(),
        name=match.group("name"),
        attrs=match.group("attrs") or "",
        raw=match.group(0).strip(),
    )


class Tokenizer:
    """Leftmost-match tokenizer over a single document.

    Keeps the most recent match per token kind and reuses it while it
    still starts at or after the requested position; a regex search from
    an earlier offset that found a match at ``s >= pos`` is also the
    leftmost match from ``pos``. The cache lives only as long as the
    tokenizer, which is created per parse call.
    """

    def __init__(self, text: str) -> None:
        self.text = text
        self._cache: dict[TokenKind, re.Match[str] | None] = {}
        self._searched_from: dict[TokenKind, int] = {}

    def _match(
        self, kind: TokenKind, pattern: re.Pattern[str], pos: int
    ) -> re.Match[str] | None:
        cached = self._cache.get(kind)
        searched_from = self._searched_from.get(kind)

        if searched_from is not None and searched_from <= pos:
            if cached is None:
                # Nothing of this kind anywhere after an earlier offset
                return None
            if cached.start() >= pos:
                return cached

        match = pattern.search(self.text, pos)
        self._cache[kind] = match
        self._searched_from[kind] = pos
        return match

    def next_token(self, pos: int) -> Token | None:
        """Return the token that starts nearest to ``pos``.

        Args:
            pos: Offset to start searching from.

        Returns:
            The leftmost token at or after ``pos``, or None when no more
            tokens remain.
        """
        best: tuple[TokenKind, re.Match[str]] | None = None

        for kind, pattern in _PATTERNS:
            match = self._match(kind, pattern, pos)
            # Strict comparison keeps the earlier kind on ties
            if match is not None and (best is None or match.start() < best[1].start()):
                best = (kind, match)

        if best is None:
            return None
        return _to_token(*best)

    def __iter__(self):
        pos = 0
        while (token := self.next_token(pos)) is not None:
            yield token
            pos = token.end
