"""Configuration CLI commands."""

from __future__ import annotations

from dataclasses import asdict
from typing import Annotated

import typer

from wbmark.cli.context import CLIContext
from wbmark.cli.formatters import (
    print_error,
    print_info,
    print_key_value_table,
    print_success,
)
from wbmark.infrastructure.config import ConfigError, RenderConfig, save_config
from wbmark.infrastructure.paths import default_resolver

app = typer.Typer(
    name="config",
    help="Manage the global wbmark configuration.",
    no_args_is_help=True,
)


@app.command("init")
def init(
    force: Annotated[
        bool,
        typer.Option("--force", "-f", help="Overwrite an existing config file"),
    ] = False,
) -> None:
    """Write a config file with the default settings.

    \b
    Examples:
        wbmark config init
        wbmark config init --force
    """
    path = default_resolver.global_config()

    if path.exists() and not force:
        print_error(f"Config already exists: {path}")
        print_info("Use --force to overwrite it")
        raise typer.Exit(1)

    try:
        save_config(RenderConfig(), default_resolver)
    except ConfigError as e:
        print_error(str(e))
        raise typer.Exit(1) from e

    print_success(f"Wrote {path}")


@app.command("show")
def show() -> None:
    """Show the settings commands will use.

    Values come from the config file, or the defaults where it is missing
    or invalid.
    """
    config = CLIContext.get().get_config()
    path = default_resolver.global_config()

    if path.exists():
        print_info(f"Config file: {path}")
    else:
        print_info(f"No config file at {path}, using defaults")
    print_key_value_table({key: str(value) for key, value in asdict(config).items()})
