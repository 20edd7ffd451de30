"""Component tree parser.

Turns component markdown into a sequence of text runs and component
nodes. A single forward scan over the tokens keeps a stack of open
blocks; a bare ``::`` closes whatever block is innermost. Malformed
input never raises: stray closing tags, unclosed blocks and excessive
nesting become nodes that carry an ``error`` message.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from wbmark.infrastructure.attributes import parse_attributes
from wbmark.modules.parser.nodes import BlockComponent, InlineComponent, Node
from wbmark.modules.parser.tokens import Token, TokenKind, Tokenizer

__all__ = [
    "DEFAULT_MAX_DEPTH",
    "parse_components",
]

DEFAULT_MAX_DEPTH = 64


@dataclass
class _Frame:
    """An open block on the parser stack."""

    name: str
    attributes: dict[str, str]
    raw: str
    children: list[Node] = field(default_factory=list)

    def freeze(self, error: str | None = None) -> BlockComponent:
        return BlockComponent(
            name=self.name,
            attributes=self.attributes,
            children=tuple(self.children),
            error=error,
            raw=self.raw,
        )


def _append_text(target: list[Node], text: str) -> None:
    if not text:
        return
    if target and isinstance(target[-1], str):
        target[-1] += text
    else:
        target.append(text)


class _TreeBuilder:
    """Builds the node tree for one parse call."""

    def __init__(self, max_depth: int) -> None:
        self.max_depth = max_depth
        self.root: list[Node] = []
        self.stack: list[_Frame] = []
        # Openers rejected by the depth guard whose closers are still pending
        self.suppressed = 0

    @property
    def target(self) -> list[Node]:
        return self.stack[-1].children if self.stack else self.root

    def text(self, text: str) -> None:
        _append_text(self.target, text)

    def inline(self, token: Token) -> None:
        self.target.append(
            InlineComponent(
                name=token.name,
                attributes=parse_attributes(token.attrs),
                raw=token.raw,
            )
        )

    def open(self, token: Token) -> None:
        if len(self.stack) >= self.max_depth:
            self.suppressed += 1
            self.target.append(
                InlineComponent(
                    name=token.name,
                    error=(
                        f"Maximum nesting depth of {self.max_depth} "
                        f"exceeded at '{token.name}'"
                    ),
                    raw=token.raw,
                )
            )
            return

        self.stack.append(
            _Frame(
                name=token.name,
                attributes=parse_attributes(token.attrs),
                raw=token.raw,
            )
        )

    def close(self, token: Token, source: str) -> None:
        if self.suppressed:
            self.suppressed -= 1
            # Kept verbatim, line breaks included
            self.text(source)
            return

        if not self.stack:
            self.root.append(
                InlineComponent(
                    name="",
                    error=f"Unexpected closing tag '{token.raw}' without an open block",
                    raw=token.raw,
                )
            )
            return

        block = self.stack.pop().freeze()
        self.target.append(block)

    def finish(self) -> list[Node]:
        while self.stack:
            frame = self.stack.pop()
            self.target.append(
                frame.freeze(error=f"Unclosed block component '{frame.name}'")
            )
        return self.root


def parse_components(text: str, *, max_depth: int = DEFAULT_MAX_DEPTH) -> list[Node]:
    """Parse component markdown into text runs and component nodes.

    Args:
        text: Document body (frontmatter already removed).
        max_depth: Maximum number of simultaneously open blocks. Deeper
            openers become error nodes instead of growing the stack.

    Returns:
        Top-level nodes in source order. Strings are literal markdown
        text; components are InlineComponent or BlockComponent.

    Example:
        >>> parse_components('Hi :photo{src="a.png"}')
        ['Hi ', InlineComponent(name='photo', attributes={'src': 'a.png'}, error=None, raw=':photo{src="a.png"}')]
    """
    builder = _TreeBuilder(max_depth=max_depth)
    pos = 0

    for token in Tokenizer(text):
        builder.text(text[pos : token.start])
        if token.kind is TokenKind.INLINE:
            builder.inline(token)
        elif token.kind is TokenKind.BLOCK_OPEN:
            builder.open(token)
        else:
            builder.close(token, text[token.start : token.end])
        pos = token.end

    builder.text(text[pos:])
    return builder.finish()
