"""Built-in component renderers.

Each renderer takes the component's attribute map and a RenderContext
and returns an HTML fragment rendered from a bundled Jinja2 template.
Block components get their rendered children as ``attrs["content"]``.
"""

from __future__ import annotations

import json
import re
from typing import Any

import structlog
from jinja2 import TemplateError, TemplateNotFound

from wbmark.modules.render.registry import (
    ComponentRegistry,
    RenderContext,
    RenderError,
    error_fragment,
)

__all__ = [
    "create_default_registry",
    "normalize_size",
    "resolve_media",
]

logger = structlog.get_logger()

_PARAGRAPH_TAG_RE = re.compile(r"</?p>")


def normalize_size(value: str | None, fallback: str) -> str:
    """CSS size from an attribute value; bare numbers are pixels."""
    if not value or not value.strip():
        return fallback
    trimmed = value.strip()
    return f"{trimmed}px" if trimmed[-1].isdigit() else trimmed


def _float_class(attrs: dict[str, str]) -> str:
    value = attrs.get("float", "")
    return f"float-{value}" if value else ""


def resolve_media(src: str | None, ctx: RenderContext) -> str:
    """URL for a media reference, or "" if the file does not exist.

    URLs pass through; ``img/...`` resolves under the project media
    directory and anything else relative to the current document.
    """
    if not src:
        return ""
    if ctx.project.is_external(src):
        return src

    path = ctx.project.media_file(src, ctx.document_path)
    if not path.is_file():
        logger.warning("media_not_found", src=src, path=str(path))
        return ""
    return path.resolve().as_uri()


def _render_template(ctx: RenderContext, name: str, **values: Any) -> str:
    try:
        return ctx.templates.get_template(name).render(**values)
    except TemplateNotFound as e:
        raise RenderError(f"Component template not found: {e}") from e
    except TemplateError as e:
        raise RenderError(f"Template {name} failed: {e}") from e


def _load_json_list(raw: str | None) -> list[Any]:
    data = json.loads(raw or "[]")
    if not isinstance(data, list):
        raise ValueError("expected a JSON array")
    return data


def _as_row(item: Any) -> list[Any]:
    """Gallery entries are arrays; a lone string is a one-item row."""
    if isinstance(item, list):
        return item
    if isinstance(item, str):
        return [item]
    raise TypeError(f"invalid gallery entry: {item!r}")


def render_photo(attrs: dict[str, str], ctx: RenderContext) -> str:
    return _render_template(
        ctx,
        "photo.html",
        src=resolve_media(attrs.get("src"), ctx),
        alt=attrs.get("alt", ""),
        caption=attrs.get("caption"),
        width=normalize_size(attrs.get("width"), "100%"),
        float_class=_float_class(attrs),
        error=None,
    )


def render_gallery(attrs: dict[str, str], ctx: RenderContext) -> str:
    try:
        images = []
        for item in _load_json_list(attrs.get("data")):
            src, alt = (_as_row(item) + ["", ""])[:2]
            images.append(
                {
                    "src": resolve_media(str(src), ctx),
                    "alt": alt or "",
                    "caption": alt or "",
                }
            )
    except (ValueError, TypeError) as e:
        logger.warning("gallery_data_invalid", error=str(e), data=attrs.get("data"))
        return _render_template(
            ctx, "gallery.html", images=[], error="Invalid gallery data format"
        )

    return _render_template(ctx, "gallery.html", images=images, error=None)


def render_video_player(attrs: dict[str, str], ctx: RenderContext) -> str:
    cover = attrs.get("cover", "")
    return _render_template(
        ctx,
        "video-player.html",
        url=attrs.get("url", ""),
        width=normalize_size(attrs.get("width"), "500px"),
        height=normalize_size(attrs.get("height"), "280px"),
        float_class=_float_class(attrs),
        cover=resolve_media(cover, ctx) if cover else "",
        cover_is_set=bool(cover),
        error=None,
    )


def render_video_gallery(attrs: dict[str, str], ctx: RenderContext) -> str:
    try:
        videos = []
        for item in _load_json_list(attrs.get("data")):
            url, caption, cover = (_as_row(item) + [None, None, None])[:3]
            videos.append(
                {
                    "url": str(url),
                    "caption": caption or "",
                    "has_caption": bool(caption),
                    "cover": resolve_media(str(cover), ctx) if cover else "",
                    "cover_is_set": bool(cover),
                }
            )
    except (ValueError, TypeError) as e:
        logger.warning("video_gallery_data_invalid", error=str(e))
        return _render_template(
            ctx, "video-gallery.html", videos=[], error="Invalid video gallery format"
        )

    return _render_template(ctx, "video-gallery.html", videos=videos, error=None)


def render_frontmatter(attrs: dict[str, str], ctx: RenderContext) -> str:
    title = attrs.get("title", "")
    items = {
        key: resolve_media(value, ctx) if key in ("cover", "logo") else value
        for key, value in attrs.items()
        if key != "title"
    }
    html = _render_template(
        ctx,
        "frontmatter.html",
        title=title,
        cover=items.get("cover", ""),
        items=items,
        error=None,
    )
    return html + "\n\n"


def _wrapper(template: str, *, titled: bool = False):
    """Renderer for a block component that only wraps its content."""

    def render(attrs: dict[str, str], ctx: RenderContext) -> str:
        values: dict[str, Any] = {"content": attrs.get("content", ""), "error": None}
        if titled:
            values["title"] = attrs.get("title", "")
        return _render_template(ctx, template, **values)

    return render


def render_summary(attrs: dict[str, str], ctx: RenderContext) -> str:
    content = _PARAGRAPH_TAG_RE.sub("", attrs.get("content", "")).strip()
    return _render_template(ctx, "summary.html", content=content, error=None)


def render_include(attrs: dict[str, str], ctx: RenderContext) -> str:
    include_path = attrs.get("path", "")
    if not include_path:
        return error_fragment("Include path is missing")

    if ctx.include_depth >= ctx.config.max_include_depth:
        return error_fragment(
            f"Include depth limit of {ctx.config.max_include_depth} reached at: "
            f"{include_path}"
        )

    try:
        target = ctx.project.include_file(include_path, ctx.document_path)
    except ValueError as e:
        return error_fragment(f"Include error: {e}")

    if not target.is_file():
        logger.warning("include_not_found", path=str(target))
        return error_fragment(f"Include file not found: {target}")

    try:
        text = target.read_text(encoding="utf-8")
    except OSError as e:
        return error_fragment(f"Include error: {e}")

    logger.debug("include_rendered", path=str(target), depth=ctx.include_depth + 1)
    return ctx.renderer.render_nodes(text, ctx.for_include(target))


def create_default_registry() -> ComponentRegistry:
    """Registry with every built-in component."""
    registry = ComponentRegistry()
    registry.register("photo", render_photo)
    registry.register("gallery", render_gallery)
    registry.register("video-player", render_video_player)
    registry.register("video-gallery", render_video_gallery)
    registry.register("frontmatter", render_frontmatter)
    registry.register("product", _wrapper("product.html"))
    registry.register("product-section", _wrapper("product-section.html", titled=True))
    registry.register("description", _wrapper("description.html"))
    registry.register("info", _wrapper("info.html"))
    registry.register("spoiler", _wrapper("spoiler.html", titled=True))
    registry.register("summary", render_summary)
    registry.register("content", _wrapper("content.html"))
    registry.register("include", render_include)
    return registry
