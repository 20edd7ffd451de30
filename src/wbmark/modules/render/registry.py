"""Component renderer registry and render context."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from dataclasses import dataclass, replace
from html import escape
from pathlib import Path
from typing import TYPE_CHECKING

from wbmark.infrastructure.similarity import suggest_names

if TYPE_CHECKING:
    from jinja2 import Environment
    from markdown_it import MarkdownIt

    from wbmark.infrastructure.config import RenderConfig
    from wbmark.infrastructure.paths import ProjectLayout
    from wbmark.modules.render.renderer import DocumentRenderer

__all__ = [
    "ComponentRegistry",
    "ComponentRenderer",
    "RenderContext",
    "RenderError",
    "error_fragment",
]


class RenderError(Exception):
    """Raised when a component or document cannot be rendered."""


def error_fragment(message: str) -> str:
    """Visible, non-fatal diagnostic shown in place of a component."""
    return f'<div class="component-error">{escape(message)}</div>'


@dataclass(frozen=True)
class RenderContext:
    """Everything a component renderer may need besides its attributes.

    Attributes:
        document_path: Document being rendered; relative media paths
            resolve against its directory.
        project: Layout of the project the document belongs to.
        templates: Jinja2 environment holding the component templates.
        markdown: Markdown renderer for text runs.
        config: Rendering configuration.
        renderer: Renderer driving this pass (used by ``include``).
        include_depth: How many includes deep this document is.
    """

    document_path: Path
    project: ProjectLayout
    templates: Environment
    markdown: MarkdownIt
    config: RenderConfig
    renderer: DocumentRenderer
    include_depth: int = 0

    def for_include(self, path: Path) -> RenderContext:
        """Context for rendering an included file."""
        return replace(self, document_path=path, include_depth=self.include_depth + 1)


ComponentRenderer = Callable[[dict[str, str], RenderContext], str]


class ComponentRegistry:
    """Maps component names to the functions that render them.

    Block components receive their rendered children as the ``content``
    attribute.
    """

    def __init__(self) -> None:
        self._renderers: dict[str, ComponentRenderer] = {}

    def register(self, name: str, renderer: ComponentRenderer) -> None:
        """Register (or replace) the renderer for a component name."""
        self._renderers[name] = renderer

    def component(self, name: str) -> Callable[[ComponentRenderer], ComponentRenderer]:
        """Decorator form of :meth:`register`."""

        def decorator(renderer: ComponentRenderer) -> ComponentRenderer:
            self.register(name, renderer)
            return renderer

        return decorator

    def get(self, name: str) -> ComponentRenderer | None:
        return self._renderers.get(name)

    def names(self) -> list[str]:
        """Registered component names, sorted."""
        return sorted(self._renderers)

    def suggest(self, name: str) -> list[str]:
        """Registered names similar to an unknown one."""
        return suggest_names(name, self._renderers)

    def __contains__(self, name: object) -> bool:
        return name in self._renderers

    def __iter__(self) -> Iterator[str]:
        return iter(self.names())

    def __len__(self) -> int:
        return len(self._renderers)
