"""Document rendering: frontmatter, component tree and markdown to HTML."""

from __future__ import annotations

import json
import re
from html import escape
from pathlib import Path

import structlog
from jinja2 import Environment, FileSystemLoader, TemplateError, select_autoescape
from markdown_it import MarkdownIt

from wbmark.infrastructure.config import RenderConfig
from wbmark.infrastructure.frontmatter import extract_frontmatter
from wbmark.infrastructure.paths import ProjectLayout
from wbmark.infrastructure.resources import (
    get_component_templates_dir,
    get_stylesheet,
    get_templates_dir,
)
from wbmark.modules.parser import BlockComponent, Node, parse_components
from wbmark.modules.render.components import create_default_registry
from wbmark.modules.render.filters import install_filters
from wbmark.modules.render.registry import (
    ComponentRegistry,
    RenderContext,
    RenderError,
    error_fragment,
)

__all__ = ["DocumentRenderer"]

logger = structlog.get_logger()

# Frontmatter keys turned into sections after the body: key -> (component, heading)
_FRONTMATTER_SECTIONS: dict[str, tuple[str, str]] = {
    "images": ("gallery", "Фото"),
    "video": ("video-gallery", "Видео"),
}
_USE_CASE_SPLIT_RE = re.compile(r"\n|,")
_USE_CASE_STRIP = " \t-"


def _create_markdown(config: RenderConfig) -> MarkdownIt:
    md = MarkdownIt("js-default", {"html": True, "linkify": config.linkify})
    if config.linkify:
        md.enable("linkify")
    return md


def _create_environment(markdown: MarkdownIt, config: RenderConfig) -> Environment:
    env = Environment(
        loader=FileSystemLoader(
            [str(get_component_templates_dir()), str(get_templates_dir())]
        ),
        autoescape=select_autoescape(["html"]),
        trim_blocks=True,
        lstrip_blocks=True,
    )
    install_filters(env, markdown, locale=config.date_locale)
    return env


def _split_use_cases(raw: str) -> list[str]:
    if raw.lstrip().startswith("["):
        try:
            data = json.loads(raw)
            if isinstance(data, list):
                return [str(item).strip() for item in data if str(item).strip()]
        except json.JSONDecodeError as e:
            logger.warning("use_cases_invalid_json", error=str(e))

    items = (part.strip(_USE_CASE_STRIP) for part in _USE_CASE_SPLIT_RE.split(raw))
    return [item for item in items if item]


class DocumentRenderer:
    """Renders component markdown documents to HTML.

    The renderer owns its component registry, markdown converter and
    template environment; nothing is shared between instances.
    """

    def __init__(
        self,
        registry: ComponentRegistry | None = None,
        config: RenderConfig | None = None,
        project_root: Path | None = None,
    ) -> None:
        """Initialize the renderer.

        Args:
            registry: Component renderers (defaults to the built-ins).
            config: Rendering configuration (defaults to RenderConfig()).
            project_root: Root of the content project (defaults to cwd).

        Raises:
            ResourceError: If the bundled templates cannot be found.
        """
        self.registry = registry if registry is not None else create_default_registry()
        self.config = config or RenderConfig()
        self.project = ProjectLayout(
            project_root or Path.cwd(),
            content_dir=self.config.content_dir,
            media_dir=self.config.media_dir,
        )
        self.markdown = _create_markdown(self.config)
        self.templates = _create_environment(self.markdown, self.config)

    def context_for(self, document_path: Path) -> RenderContext:
        """Top-level render context for a document."""
        return RenderContext(
            document_path=document_path,
            project=self.project,
            templates=self.templates,
            markdown=self.markdown,
            config=self.config,
            renderer=self,
        )

    def render_node(self, node: Node, ctx: RenderContext) -> str:
        """Render one text run or component node."""
        if isinstance(node, str):
            return ctx.markdown.render(node)

        if node.error:
            return error_fragment(node.error)

        renderer = self.registry.get(node.name)
        if renderer is None:
            message = f"Render not found for component: {node.name}"
            suggestions = self.registry.suggest(node.name)
            if suggestions:
                message += f" (did you mean: {', '.join(suggestions)}?)"
            return error_fragment(message)

        attrs = dict(node.attributes)
        if isinstance(node, BlockComponent):
            attrs["content"] = "".join(self.render_node(child, ctx) for child in node.children)

        try:
            return renderer(attrs, ctx)
        except RenderError as e:
            logger.warning("component_render_failed", component=node.name, error=str(e))
            return error_fragment(str(e))

    def render_nodes(self, text: str, ctx: RenderContext) -> str:
        """Parse components out of text and render every node."""
        nodes = parse_components(text, max_depth=self.config.max_depth)
        return "".join(self.render_node(node, ctx) for node in nodes)

    def _frontmatter_section(self, key: str, value: str) -> str:
        component, heading = _FRONTMATTER_SECTIONS[key]
        try:
            data = json.loads(value)
        except json.JSONDecodeError as e:
            logger.warning("frontmatter_attribute_invalid", attribute=key, error=str(e))
            return error_fragment(f'Invalid format in frontmatter attribute "{key}": {e}')

        # Tags end at the first "}", so braces travel as JSON escapes
        payload = (
            json.dumps(data, ensure_ascii=False)
            .replace("'", "\\'")
            .replace("}", "\\u007d")
        )
        return (
            f"<h2>{heading}\n</h2>\n"
            f'<div class="frontmatter-{key}">\n'
            f":{component}{{data='{payload}'}}\n"
            "</div>\n"
        )

    def _use_cases_list(self, raw: str, ctx: RenderContext) -> str:
        solutions = ctx.project.solutions_dir(ctx.document_path)
        items = []
        for name in _split_use_cases(raw):
            exists = (solutions / f"{name}.md").is_file()
            css = "valid-use-case" if exists else "invalid-use-case"
            items.append(f'<li><span class="{css}">{escape(name)}</span></li>')
        return f"<ul>{''.join(items)}</ul>"

    def preprocess(self, text: str, ctx: RenderContext) -> str:
        """Replace the frontmatter block with its rendered header.

        Header keys ``images`` and ``video`` become gallery sections
        appended after the body; ``use_cases`` becomes a list marking
        which solution pages exist.
        """
        result = extract_frontmatter(text)
        if result is None:
            return text

        body = result.content if result.content.strip() else ""
        attributes = dict(result.attributes)

        sections = "".join(
            self._frontmatter_section(key, attributes.pop(key))
            for key in _FRONTMATTER_SECTIONS
            if attributes.get(key)
        )

        if attributes.get("use_cases"):
            attributes["use_cases"] = self._use_cases_list(attributes["use_cases"], ctx)

        renderer = self.registry.get("frontmatter")
        if renderer is None:
            header = error_fragment("Render not found for component: frontmatter")
        else:
            try:
                header = renderer(attributes, ctx)
            except RenderError as e:
                header = error_fragment(str(e))

        return header + body + sections

    def render_fragment(self, text: str, document_path: Path) -> str:
        """Render a document to an HTML fragment (no page wrapper)."""
        ctx = self.context_for(document_path)
        return self.render_nodes(self.preprocess(text, ctx), ctx)

    def render(self, text: str, document_path: Path) -> str:
        """Render a document to a complete HTML page.

        Failures while rendering the body are shown on the page rather
        than raised.

        Raises:
            RenderError: If the page template itself cannot be rendered.
        """
        try:
            styles = get_stylesheet()
            content = self.render_fragment(text, document_path)
            return self._page(styles=styles, content=content, error=None)
        except Exception as e:
            logger.exception("render_failed", document=str(document_path))
            return self._page(styles="", content="", error=f"Error: {e}")

    def _page(self, **values: str | None) -> str:
        try:
            return self.templates.get_template("main.html").render(**values)
        except TemplateError as e:
            raise RenderError(f"Page template failed: {e}") from e
