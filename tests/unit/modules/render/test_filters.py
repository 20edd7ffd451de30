"""Tests for template filters."""

from __future__ import annotations

from datetime import date, datetime

from jinja2 import Environment
from markdown_it import MarkdownIt

from wbmark.modules.render.filters import format_date, grid_cols, install_filters


class TestFormatDate:
    """Tests for format_date function."""

    def test_russian_format(self) -> None:
        """Russian dates use genitive month names."""
        assert format_date("2024-03-05") == "5 марта 2024 г."
        assert format_date("2023-12-31", "ru") == "31 декабря 2023 г."

    def test_english_format(self) -> None:
        """Other locales get Month D, YYYY."""
        assert format_date("2024-03-05", "en") == "March 5, 2024"

    def test_datetime_string(self) -> None:
        """ISO timestamps keep only the date part."""
        assert format_date("2024-05-01T10:30:00") == "1 мая 2024 г."

    def test_date_objects(self) -> None:
        """date and datetime values are accepted."""
        assert format_date(date(2024, 1, 2)) == "2 января 2024 г."
        assert format_date(datetime(2024, 1, 2, 8, 0)) == "2 января 2024 г."

    def test_unparsable_value_unchanged(self) -> None:
        """Non-dates come back as they were."""
        assert format_date("next spring") == "next spring"

    def test_empty_value(self) -> None:
        """Empty values render as nothing."""
        assert format_date("") == ""
        assert format_date(None) == ""


class TestGridCols:
    """Tests for grid_cols function."""

    def test_counts_items(self) -> None:
        """Small lists get one column per item."""
        assert grid_cols(["a", "b"]) == 2

    def test_caps_at_four(self) -> None:
        """Never more than four columns."""
        assert grid_cols(list(range(9))) == 4

    def test_non_list(self) -> None:
        """Anything else is a single column."""
        assert grid_cols("abc") == 1
        assert grid_cols(None) == 1


class TestInstallFilters:
    """Tests for install_filters function."""

    def test_registers_filters(self) -> None:
        """All filters are available to templates."""
        env = Environment(autoescape=True)

        install_filters(env, MarkdownIt(), locale="en")

        assert {"md", "format_date", "grid_cols"} <= set(env.filters)

    def test_md_filter_is_not_escaped(self) -> None:
        """Rendered markdown is marked safe."""
        env = Environment(autoescape=True)
        install_filters(env, MarkdownIt(), locale="ru")

        result = env.from_string("{{ text|md }}").render(text="*hi*")

        assert result == "<p><em>hi</em></p>\n"

    def test_format_date_uses_locale(self) -> None:
        """The date filter is bound to the configured locale."""
        env = Environment()
        install_filters(env, MarkdownIt(), locale="en")

        result = env.from_string("{{ d|format_date }}").render(d="2024-03-05")

        assert result == "March 5, 2024"
