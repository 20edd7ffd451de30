"""Component rendering module."""

from wbmark.modules.render.components import create_default_registry
from wbmark.modules.render.registry import (
    ComponentRegistry,
    ComponentRenderer,
    RenderContext,
    RenderError,
    error_fragment,
)
from wbmark.modules.render.renderer import DocumentRenderer

__all__ = [
    "ComponentRegistry",
    "ComponentRenderer",
    "DocumentRenderer",
    "RenderContext",
    "RenderError",
    "create_default_registry",
    "error_fragment",
]
