"""Tests for document CLI commands."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest
from typer.testing import CliRunner

from wbmark.cli.app import app
from wbmark.cli.context import CLIContext
from wbmark.cli.document import Diagnostic, _collect_diagnostics
from wbmark.infrastructure.config import RenderConfig
from wbmark.modules.parser import parse_components
from wbmark.modules.render import create_default_registry

if TYPE_CHECKING:
    from pathlib import Path

runner = CliRunner()


@pytest.fixture
def document(project_root: Path) -> Path:
    path = project_root / "content" / "en" / "about.md"
    path.write_text(
        "---\ntitle: About\nauthor: Team\n---\n"
        "Intro\n\n::info\nSee :photo{src=/img/logo.png}\n::\n",
        encoding="utf-8",
    )
    return path


class TestCollectDiagnostics:
    """Tests for _collect_diagnostics function."""

    def test_clean_document(self) -> None:
        """Known, well-formed components produce no diagnostics."""
        nodes = parse_components("::info\n:photo{src=a}\n::")

        assert _collect_diagnostics(nodes, create_default_registry()) == []

    def test_unknown_component(self) -> None:
        """Unknown names are reported with suggestions."""
        nodes = parse_components(":galery{}")

        result = _collect_diagnostics(nodes, create_default_registry())

        assert result == [
            Diagnostic(
                "galery",
                "No renderer for component 'galery' (did you mean: gallery?)",
            )
        ]

    def test_parser_errors(self) -> None:
        """Stray closes and unclosed blocks are reported."""
        nodes = parse_components("::\n::info\nx")

        result = _collect_diagnostics(nodes, create_default_registry())

        assert [d.component for d in result] == ["::", "info"]
        assert "Unexpected closing tag" in result[0].message
        assert result[1].message == "Unclosed block component 'info'"

    def test_nested_components_checked(self) -> None:
        """Components inside blocks are checked too."""
        nodes = parse_components("::info\n::nope\nx\n::\n::")

        result = _collect_diagnostics(nodes, create_default_registry())

        assert [d.component for d in result] == ["nope"]


class TestRenderCommand:
    """Tests for the render command."""

    def test_renders_fragment_to_stdout(self, document: Path, project_root: Path) -> None:
        """--fragment prints the body HTML only."""
        result = runner.invoke(
            app, ["render", str(document), "--root", str(project_root), "--fragment"]
        )

        assert result.exit_code == 0
        assert '<h1 class="frontmatter-title">About</h1>' in result.output
        assert '<div class="info">' in result.output
        assert "<!DOCTYPE html>" not in result.output

    def test_renders_page(self, document: Path, project_root: Path) -> None:
        """Without --fragment a full page is printed."""
        result = runner.invoke(app, ["render", str(document), "-r", str(project_root)])

        assert result.exit_code == 0
        assert "<!DOCTYPE html>" in result.output

    def test_writes_output_file(self, document: Path, temp_dir: Path) -> None:
        """-o writes the HTML to a file."""
        output = temp_dir / "out" / "about.html"

        result = runner.invoke(app, ["render", str(document), "-o", str(output)])

        assert result.exit_code == 0
        assert "Rendered" in result.output
        assert output.read_text(encoding="utf-8").startswith("<!DOCTYPE html>")

    def test_refuses_to_overwrite(self, document: Path, temp_dir: Path) -> None:
        """Existing output files need --force."""
        output = temp_dir / "about.html"
        output.write_text("old", encoding="utf-8")

        result = runner.invoke(app, ["render", str(document), "-o", str(output)])

        assert result.exit_code == 1
        assert "File exists" in result.output
        assert output.read_text(encoding="utf-8") == "old"

    def test_force_overwrites(self, document: Path, temp_dir: Path) -> None:
        """--force replaces an existing output file."""
        output = temp_dir / "about.html"
        output.write_text("old", encoding="utf-8")

        result = runner.invoke(
            app, ["render", str(document), "-o", str(output), "--force"]
        )

        assert result.exit_code == 0
        assert output.read_text(encoding="utf-8") != "old"

    def test_missing_file(self, temp_dir: Path) -> None:
        """A missing document is a usage error."""
        result = runner.invoke(app, ["render", str(temp_dir / "nope.md")])

        assert result.exit_code != 0

    def test_undecodable_file(self, temp_dir: Path) -> None:
        """Binary files are reported, not rendered."""
        path = temp_dir / "binary.md"
        path.write_bytes(b"\xff\xfe\x00bad")

        result = runner.invoke(app, ["render", str(path)])

        assert result.exit_code == 1
        assert "Cannot read" in result.output


class TestTreeCommand:
    """Tests for the tree command."""

    def test_shows_components(self, document: Path) -> None:
        """The tree lists blocks, inline components and text."""
        result = runner.invoke(app, ["tree", str(document)])

        assert result.exit_code == 0
        assert "about.md" in result.output
        assert "info" in result.output
        assert "photo" in result.output
        assert "text" in result.output
        # Frontmatter is not part of the tree
        assert "author" not in result.output

    def test_shows_errors(self, temp_dir: Path) -> None:
        """Error nodes are labelled with their message."""
        path = temp_dir / "broken.md"
        path.write_text("::info\nunclosed", encoding="utf-8")

        result = runner.invoke(app, ["tree", str(path)])

        assert result.exit_code == 0
        assert "Unclosed block component" in result.output


class TestFrontmatterCommand:
    """Tests for the frontmatter command."""

    def test_table(self, document: Path) -> None:
        """Attributes are shown as a table."""
        result = runner.invoke(app, ["frontmatter", str(document)])

        assert result.exit_code == 0
        assert "title" in result.output
        assert "About" in result.output
        assert "Team" in result.output

    def test_yaml(self, document: Path) -> None:
        """--yaml prints the attributes as YAML."""
        result = runner.invoke(app, ["frontmatter", str(document), "--yaml"])

        assert result.exit_code == 0
        assert result.output == "title: About\nauthor: Team\n"

    def test_no_frontmatter(self, project_root: Path) -> None:
        """Documents without a header are reported, not failed."""
        result = runner.invoke(
            app, ["frontmatter", str(project_root / "content" / "en" / "page.md")]
        )

        assert result.exit_code == 0
        assert "No frontmatter" in result.output


class TestCheckCommand:
    """Tests for the check command."""

    def test_clean_document(self, document: Path) -> None:
        """A valid document passes."""
        result = runner.invoke(app, ["check", str(document)])

        assert result.exit_code == 0
        assert "No problems found" in result.output

    def test_reports_problems(self, temp_dir: Path) -> None:
        """Problems are listed and the exit code is 1."""
        path = temp_dir / "bad.md"
        path.write_text(":phto{src=a}\n\n::info\nopen", encoding="utf-8")

        result = runner.invoke(app, ["check", str(path)])

        assert result.exit_code == 1
        assert "phto" in result.output
        assert "Unclosed block component" in result.output
        assert "2 problem(s) found" in result.output

    def test_uses_configured_depth(
        self, temp_dir: Path, cli_context: CLIContext
    ) -> None:
        """The nesting limit comes from the loaded config."""
        cli_context.config = RenderConfig(max_depth=1)
        path = temp_dir / "deep.md"
        path.write_text("::info\n::info\nx\n::\n::", encoding="utf-8")

        result = runner.invoke(app, ["check", str(path)])

        assert result.exit_code == 1
        assert "Maximum nesting depth" in result.output
