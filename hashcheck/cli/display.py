"""
Rich terminal display utilities for CLI.

Provides formatted output using the Rich library for:
- Success/failure summary lines
- Error messages with tracebacks on stderr
- The annotated error report
"""

from typing import List

from rich.console import Console
from rich.markup import escape

from hashcheck.diagnostics import PlainStyler, RenderConfig, ReportRenderer, RichStyler
from hashcheck.diagnostics.types import ValidationError


console = Console()
err_console = Console(stderr=True)


def set_color(enabled: bool) -> None:
    """Enable or disable colored output on both consoles."""
    console.no_color = not enabled
    err_console.no_color = not enabled


def print_success(message: str) -> None:
    """Print a success message in green."""
    console.print(f"[green]{escape(message)}[/green]", highlight=False)


def print_failure(message: str) -> None:
    """Print a failure summary in bright red."""
    console.print(f"[bright_red]{escape(message)}[/bright_red]", highlight=False)


def print_error(message: str, show_traceback: bool = False) -> None:
    """
    Print an error message on stderr.

    Args:
        message: Error message
        show_traceback: Also print the traceback of the exception being handled
    """
    err_console.print(f"[bright_red]Error: {escape(message)}[/bright_red]", highlight=False)
    if show_traceback:
        err_console.print()
        err_console.print_exception()


def print_report(
    errors: List[ValidationError],
    source_lines: List[str],
    file_path: str,
    config: RenderConfig,
    color: bool = True
) -> None:
    """
    Print the annotated report for every error.

    Args:
        errors: Validation errors
        source_lines: Lines of the validated document
        file_path: Path shown in error headers
        config: Renderer configuration
        color: Use Rich styling (plain text otherwise)
    """
    styler = RichStyler() if color else PlainStyler()
    renderer = ReportRenderer(console=console, styler=styler, config=config)
    renderer.render(errors, source_lines, file_path)
