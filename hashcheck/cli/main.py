"""
Main CLI entry point using Typer.

This module defines the command-line interface for hashcheck using Typer.
"""

import logging
from pathlib import Path

import typer
from typing_extensions import Annotated

from hashcheck.utils import setup_logging

from .commands import validate_command
from .display import print_error, set_color


# Create Typer app
app = typer.Typer(
    name="hashcheck",
    help="hashcheck - Validate documents against JSON Schemas with in-context error reports",
    add_completion=False,
    rich_markup_mode="rich"
)


@app.command("validate")
def validate(
    file: Annotated[
        Path,
        typer.Argument(help="Path to the YAML/JSON file to validate")
    ],
    schema: Annotated[
        Path,
        typer.Argument(help="Path to the JSON schema file")
    ],
    context_size: Annotated[
        int,
        typer.Option("--context-size", "-c", min=0, help="Lines of context around each error line")
    ] = 2,
    tab_size: Annotated[
        int,
        typer.Option("--tab-size", min=1, help="Number of spaces a tab expands to")
    ] = 4,
    no_color: Annotated[
        bool,
        typer.Option("--no-color", help="Disable colored output")
    ] = False,
) -> None:
    """
    Validate a file with a schema.

    Example:
        hashcheck validate config.yaml schema.json --context-size 3
    """
    set_color(not no_color)

    try:
        error_count = validate_command(
            file_path=file,
            schema_path=schema,
            context_size=context_size,
            tab_size=tab_size,
            color=not no_color
        )
    except Exception as e:
        print_error(str(e), show_traceback=True)
        raise typer.Exit(code=1)

    if error_count > 0:
        raise typer.Exit(code=1)


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    version: Annotated[
        bool,
        typer.Option("--version", "-v", help="Show version and exit")
    ] = False,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", help="Enable debug logging")
    ] = False,
) -> None:
    """
    hashcheck - Validate documents against JSON Schemas.

    Errors are shown inside their source context, with nearby errors grouped.
    """
    if version:
        from hashcheck import __version__
        typer.echo(f"hashcheck version {__version__}")
        raise typer.Exit()

    setup_logging(level=logging.DEBUG if verbose else logging.WARNING)

    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit()


def cli() -> None:
    """CLI entry point for poetry script."""
    app()


if __name__ == "__main__":
    cli()
