"""Component catalog CLI commands."""

from __future__ import annotations

from typing import Annotated

import typer

from wbmark.cli.formatters import (
    print_component_info,
    print_component_table,
    print_did_you_mean,
    print_error,
)
from wbmark.modules.render import create_default_registry
from wbmark.modules.render.catalog import ATTRIBUTE_DOCS, COMPONENT_DOCS

app = typer.Typer(
    name="components",
    help="Browse the built-in components.",
    no_args_is_help=True,
)


@app.command("list")
def list_components(
    block: Annotated[
        bool,
        typer.Option("--block", help="Only block components"),
    ] = False,
    inline: Annotated[
        bool,
        typer.Option("--inline", help="Only inline components"),
    ] = False,
) -> None:
    """List registered components.

    \b
    Examples:
        wbmark components list
        wbmark components list --block
    """
    names = create_default_registry().names()

    # Both flags together (or neither) show everything
    if block != inline:
        names = [
            name
            for name in names
            if name in COMPONENT_DOCS and COMPONENT_DOCS[name].block is block
        ]

    print_component_table(names, COMPONENT_DOCS)


@app.command("info")
def info(
    name: Annotated[
        str,
        typer.Argument(help="Component name"),
    ],
) -> None:
    """Show a component's attributes and an example.

    \b
    Examples:
        wbmark components info photo
        wbmark components info spoiler
    """
    registry = create_default_registry()
    doc = COMPONENT_DOCS.get(name)

    if doc is None or name not in registry:
        print_error(f"Unknown component: {name}")
        print_did_you_mean(registry.suggest(name))
        raise typer.Exit(1)

    print_component_info(name, doc, ATTRIBUTE_DOCS)
