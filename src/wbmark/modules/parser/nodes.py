"""Node types produced by the component parser."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from dataclasses import dataclass, field

__all__ = [
    "BlockComponent",
    "ComponentNode",
    "InlineComponent",
    "Node",
    "iter_components",
]


@dataclass(frozen=True)
class InlineComponent:
    """A self-closing ``:name{attrs}`` component.

    Also used for parser diagnostics (stray closing tags, nesting that
    is too deep); those carry an ``error`` and the offending ``raw`` text.

    Attributes:
        name: Component name following the colon.
        attributes: Decoded tag attributes.
        error: Diagnostic message when the node represents malformed input.
        raw: Source text of the token.
    """

    name: str
    attributes: dict[str, str] = field(default_factory=dict)
    error: str | None = None
    raw: str = ""

    @property
    def is_block(self) -> bool:
        return False


@dataclass(frozen=True)
class BlockComponent:
    """A ``::name{attrs} ... ::`` component with nested children.

    Attributes:
        name: Component name following the double colon.
        attributes: Decoded tag attributes (empty when no braces given).
        children: Text runs and nested components, in source order.
        error: Set when the block was never closed.
        raw: Source text of the opening token.
    """

    name: str
    attributes: dict[str, str] = field(default_factory=dict)
    children: tuple[Node, ...] = ()
    error: str | None = None
    raw: str = ""

    @property
    def is_block(self) -> bool:
        return True


ComponentNode = InlineComponent | BlockComponent
Node = str | InlineComponent | BlockComponent


def iter_components(nodes: Sequence[Node]) -> Iterator[ComponentNode]:
    """Yield every component node in the tree, depth first, parents first."""
    for node in nodes:
        if isinstance(node, str):
            continue
        yield node
        if isinstance(node, BlockComponent):
            yield from iter_components(node.children)
