"""Jinja2 filters available to component templates."""

from __future__ import annotations

from datetime import date, datetime
from typing import Any

from markdown_it import MarkdownIt
from markupsafe import Markup

__all__ = [
    "format_date",
    "grid_cols",
    "install_filters",
]

_RU_MONTHS = (
    "января",
    "февраля",
    "марта",
    "апреля",
    "мая",
    "июня",
    "июля",
    "августа",
    "сентября",
    "октября",
    "ноября",
    "декабря",
)


def _parse_date(value: str) -> date:
    return datetime.fromisoformat(value.strip()).date()


def format_date(value: Any, locale: str = "ru") -> str:
    """Format an ISO date as a long human-readable date.

    ``2024-03-05`` becomes ``5 марта 2024 г.`` for ``ru`` and
    ``March 5, 2024`` otherwise. Values that are not dates come back
    unchanged.
    """
    if not value:
        return ""
    if isinstance(value, datetime):
        parsed = value.date()
    elif isinstance(value, date):
        parsed = value
    else:
        try:
            parsed = _parse_date(str(value))
        except ValueError:
            return str(value)

    if locale.startswith("ru"):
        return f"{parsed.day} {_RU_MONTHS[parsed.month - 1]} {parsed.year} г."
    return f"{parsed.strftime('%B')} {parsed.day}, {parsed.year}"


def grid_cols(items: Any) -> int:
    """Number of grid columns for a list of items (at most 4)."""
    if not isinstance(items, (list, tuple)):
        return 1
    return min(len(items), 4)


def install_filters(env: Any, markdown: MarkdownIt, *, locale: str) -> None:
    """Register the wbmark filters on a Jinja2 environment."""
    env.filters["md"] = lambda text: Markup(markdown.render(text or ""))
    env.filters["format_date"] = lambda value: format_date(value, locale)
    env.filters["grid_cols"] = grid_cols
