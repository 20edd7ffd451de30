"""Main CLI application."""

from __future__ import annotations

import typer

from wbmark import __version__
from wbmark.cli import components, config, document
from wbmark.cli.context import CLIContext
from wbmark.infrastructure.logging import configure_logging

# Main application
app = typer.Typer(
    name="wbmark",
    help="Render markdown documents with embedded components.",
    no_args_is_help=True,
    context_settings={"help_option_names": ["-h", "--help"]},
)

# Document commands live at the top level
app.command("render")(document.render)
app.command("tree")(document.tree)
app.command("frontmatter")(document.frontmatter)
app.command("check")(document.check)

app.add_typer(components.app, name="components")
app.add_typer(config.app, name="config")


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"wbmark {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(  # noqa: ARG001 - handled by callback
        None,
        "--version",
        "-V",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit.",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Show debug output.",
    ),
    quiet: bool = typer.Option(
        False,
        "--quiet",
        "-q",
        help="Suppress informational output.",
    ),
) -> None:
    """wbmark: markdown with embedded components.

    Parse, check and render documents that use :inline{} and
    ::block{} ... :: components.
    """
    ctx = CLIContext.get()
    ctx.verbose = verbose
    ctx.quiet = quiet

    configure_logging(debug=verbose)
