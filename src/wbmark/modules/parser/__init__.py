"""Component markdown parsing.

Public API:
    parse_components: Turn a document body into text runs and components.
    InlineComponent, BlockComponent: Component node types.
"""

from wbmark.modules.parser.nodes import (
    BlockComponent,
    ComponentNode,
    InlineComponent,
    Node,
    iter_components,
)
from wbmark.modules.parser.tree import DEFAULT_MAX_DEPTH, parse_components

__all__ = [
    "DEFAULT_MAX_DEPTH",
    "BlockComponent",
    "ComponentNode",
    "InlineComponent",
    "Node",
    "iter_components",
    "parse_components",
]
