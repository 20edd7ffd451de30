"""Rich console output formatting utilities."""

from __future__ import annotations

from typing import TYPE_CHECKING

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table
from rich.tree import Tree

from wbmark.cli.context import CLIContext
from wbmark.modules.parser import BlockComponent

if TYPE_CHECKING:
    from collections.abc import Sequence

    from wbmark.modules.parser import Node
    from wbmark.modules.render.catalog import AttributeDoc, ComponentDoc

__all__ = [
    "build_node_tree",
    "console",
    "error_console",
    "print_component_info",
    "print_component_table",
    "print_did_you_mean",
    "print_error",
    "print_info",
    "print_key_value_table",
    "print_success",
    "print_warning",
]

# Shared console instance
console = Console()
error_console = Console(stderr=True)

# Text runs longer than this are shortened in the tree view
_PREVIEW_LENGTH = 60


def print_success(message: str) -> None:
    """Print a success message."""
    console.print(f"[green]✓[/green] {message}")


def print_error(message: str) -> None:
    """Print an error message to stderr."""
    error_console.print(f"[red]✗[/red] {message}")


def print_warning(message: str) -> None:
    """Print a warning message."""
    console.print(f"[yellow]![/yellow] {message}")


def print_info(message: str) -> None:
    """Print an info message.

    Suppressed when --quiet flag is set.
    """
    if not CLIContext.get().quiet:
        console.print(f"[blue]i[/blue] {message}")


def print_did_you_mean(suggestions: list[str]) -> None:
    """Print 'Did you mean?' suggestions."""
    if not suggestions:
        return

    console.print()
    console.print("[dim]Did you mean?[/dim]")
    for name in suggestions:
        console.print(f"  [cyan]{name}[/cyan]")


def _preview(text: str) -> str:
    flat = text.replace("\n", "⏎")
    if len(flat) > _PREVIEW_LENGTH:
        flat = flat[: _PREVIEW_LENGTH - 1] + "…"
    return escape(repr(flat))


def _node_label(node: Node) -> str:
    if isinstance(node, str):
        return f"[dim]text[/dim] {_preview(node)}"

    kind = "block" if isinstance(node, BlockComponent) else "inline"
    name = escape(node.name) if node.name else escape(node.raw)
    label = f"[cyan]{name}[/cyan] [dim]{kind}[/dim]"
    if node.attributes:
        attrs = " ".join(f"{k}={v!r}" for k, v in node.attributes.items())
        label += f" [green]{escape(attrs)}[/green]"
    if node.error:
        label += f" [red]✗ {escape(node.error)}[/red]"
    return label


def _add_nodes(tree: Tree, nodes: Sequence[Node]) -> None:
    for node in nodes:
        branch = tree.add(_node_label(node))
        if isinstance(node, BlockComponent):
            _add_nodes(branch, node.children)


def build_node_tree(title: str, nodes: Sequence[Node]) -> Tree:
    """Build a rich Tree showing the parsed node structure.

    Args:
        title: Label for the tree root (usually the file name).
        nodes: Top-level nodes from parse_components.
    """
    tree = Tree(f"[bold]{escape(title)}[/bold]")
    _add_nodes(tree, nodes)
    return tree


def print_key_value_table(rows: dict[str, str]) -> None:
    """Print a two-column Key/Value table (frontmatter, settings)."""
    table = Table(show_header=True, header_style="bold")
    table.add_column("Key", style="cyan")
    table.add_column("Value")

    for key, value in rows.items():
        table.add_row(key, escape(value))

    console.print(table)


def print_component_table(
    names: list[str], docs: dict[str, ComponentDoc]
) -> None:
    """Print registered components with their kind and description."""
    table = Table(show_header=True, header_style="bold")
    table.add_column("Component", style="cyan")
    table.add_column("Kind")
    table.add_column("Description")

    for name in names:
        doc = docs.get(name)
        if doc is None:
            table.add_row(name, "-", "[dim]no documentation[/dim]")
            continue
        kind = "[magenta]block[/magenta]" if doc.block else "[blue]inline[/blue]"
        table.add_row(name, kind, doc.description)

    console.print(table)


def print_component_info(
    name: str, doc: ComponentDoc, attributes: dict[str, AttributeDoc]
) -> None:
    """Print a panel describing a component and its attributes."""
    lines = [
        f"[bold]Name:[/bold]   {name}",
        f"[bold]Kind:[/bold]   {'block' if doc.block else 'inline'}",
        "",
        doc.description,
    ]

    if doc.attributes:
        lines.extend(["", "[bold]Attributes:[/bold]"])
        for attr in doc.attributes:
            info = attributes.get(attr)
            if info is None:
                lines.append(f"  • {attr}")
                continue
            line = f"  • [green]{attr}[/green]: {escape(info.description)}"
            if info.default:
                line += f" [dim](default: {escape(info.default)})[/dim]"
            lines.append(line)
            if info.values:
                lines.append(f"      [dim]values: {', '.join(info.values)}[/dim]")

    if doc.example:
        lines.extend(["", "[bold]Example:[/bold]", escape(doc.example)])

    panel = Panel(
        "\n".join(lines),
        title=f"[cyan]{name}[/cyan]",
        border_style="dim",
    )
    console.print(panel)
