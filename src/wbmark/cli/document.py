"""Document CLI commands: render, tree, frontmatter, check."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING, Annotated

import typer
import yaml
from rich.markup import escape

from wbmark.cli.context import CLIContext
from wbmark.cli.formatters import (
    build_node_tree,
    console,
    print_error,
    print_info,
    print_key_value_table,
    print_success,
    print_warning,
)
from wbmark.infrastructure.frontmatter import split_frontmatter
from wbmark.infrastructure.resources import ResourceError
from wbmark.modules.parser import iter_components, parse_components
from wbmark.modules.render import (
    ComponentRegistry,
    DocumentRenderer,
    RenderError,
    create_default_registry,
)

if TYPE_CHECKING:
    from collections.abc import Sequence

    from wbmark.modules.parser import Node

__all__ = [
    "check",
    "frontmatter",
    "render",
    "tree",
]

FileArgument = Annotated[
    Path,
    typer.Argument(
        help="Markdown document",
        exists=True,
        dir_okay=False,
        readable=True,
    ),
]


@dataclass(frozen=True)
class Diagnostic:
    """A problem found in a document.

    Attributes:
        component: Component name, or the raw tag for stray closers.
        message: Human-readable description.
    """

    component: str
    message: str


def _read(path: Path) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        print_error(f"Cannot read {path}: {e}")
        raise typer.Exit(1) from e


def _collect_diagnostics(
    nodes: Sequence[Node], registry: ComponentRegistry
) -> list[Diagnostic]:
    """Parser errors plus components that have no registered renderer."""
    found: list[Diagnostic] = []
    for node in iter_components(nodes):
        label = node.name or node.raw
        if node.error:
            found.append(Diagnostic(label, node.error))
        elif node.name not in registry:
            message = f"No renderer for component '{node.name}'"
            suggestions = registry.suggest(node.name)
            if suggestions:
                message += f" (did you mean: {', '.join(suggestions)}?)"
            found.append(Diagnostic(label, message))
    return found


def render(
    file: FileArgument,
    output: Annotated[
        Path | None,
        typer.Option("--output", "-o", help="Output file (default: stdout)"),
    ] = None,
    root: Annotated[
        Path | None,
        typer.Option("--root", "-r", help="Project root (default: current directory)"),
    ] = None,
    fragment: Annotated[
        bool,
        typer.Option("--fragment", help="Render without the page wrapper"),
    ] = False,
    force: Annotated[
        bool,
        typer.Option("--force", "-f", help="Overwrite existing output file"),
    ] = False,
) -> None:
    """Render a component markdown document to HTML.

    \b
    Examples:
        wbmark render content/en/about.md -o about.html
        wbmark render page.md --fragment --root ./site
    """
    text = _read(file)

    if output is not None and output.exists() and not force:
        print_error(f"File exists: {output}")
        console.print("[dim]Use --force to overwrite[/dim]")
        raise typer.Exit(1)

    config = CLIContext.get().get_config()
    try:
        renderer = DocumentRenderer(config=config, project_root=root or Path.cwd())
        document_path = file.resolve()
        if fragment:
            html = renderer.render_fragment(text, document_path)
        else:
            html = renderer.render(text, document_path)
    except (RenderError, ResourceError) as e:
        print_error(str(e))
        raise typer.Exit(1) from e

    if output is None:
        typer.echo(html, nl=False)
        return

    try:
        output.parent.mkdir(parents=True, exist_ok=True)
        output.write_text(html, encoding="utf-8")
    except OSError as e:
        print_error(f"Cannot write output file: {e}")
        raise typer.Exit(1) from e

    print_success(f"Rendered: {output}")


def tree(file: FileArgument) -> None:
    """Show the component tree of a document.

    Frontmatter is skipped; error nodes are shown in red.
    """
    _, body = split_frontmatter(_read(file))
    config = CLIContext.get().get_config()
    nodes = parse_components(body, max_depth=config.max_depth)
    console.print(build_node_tree(file.name, nodes))


def frontmatter(
    file: FileArgument,
    as_yaml: Annotated[
        bool,
        typer.Option("--yaml", help="Print as YAML instead of a table"),
    ] = False,
) -> None:
    """Show the frontmatter attributes of a document."""
    attributes, _ = split_frontmatter(_read(file))

    if not attributes:
        print_info(f"No frontmatter in {file}")
        raise typer.Exit(0)

    if as_yaml:
        typer.echo(
            yaml.safe_dump(
                attributes,
                default_flow_style=False,
                allow_unicode=True,
                sort_keys=False,
                width=1000,
            ),
            nl=False,
        )
        return

    print_key_value_table(attributes)


def check(file: FileArgument) -> None:
    """Report malformed components and unknown component names.

    Exits with status 1 when problems are found.
    """
    _, body = split_frontmatter(_read(file))
    config = CLIContext.get().get_config()
    nodes = parse_components(body, max_depth=config.max_depth)
    diagnostics = _collect_diagnostics(nodes, create_default_registry())

    if not diagnostics:
        print_success(f"No problems found in {file}")
        return

    for diagnostic in diagnostics:
        print_warning(
            f"[cyan]{escape(diagnostic.component)}[/cyan]: {escape(diagnostic.message)}"
        )
    print_error(f"{len(diagnostics)} problem(s) found in {file}")
    raise typer.Exit(1)
