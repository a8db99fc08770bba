"""
Report renderer - show validation errors inside their source context.

For every error the renderer prints a header, then one excerpt block per group
of nearby error lines. Each error line is marked with ``>`` and followed by a
pointer line underlining the error's first position.

Example output (plain styling):
    ```
    Error HM002 config.yaml:4:9 'eight' is not of type 'integer'
      2 │ server:
      3 │   host: localhost
    > 4 │   port: eight
        │         ^^^^^
      5 │   debug: true
    ```

Usage:
    ```python
    from hashcheck.diagnostics import ReportRenderer

    renderer = ReportRenderer()
    renderer.render(result.errors, result.source_lines, "config.yaml")
    ```
"""

import logging
from typing import List, Optional, Sequence

from rich.console import Console

from hashcheck.diagnostics.columns import expand_tabs, leading_tabs, map_column
from hashcheck.diagnostics.grouping import group_lines
from hashcheck.diagnostics.layout import GROUP_SEPARATOR, context_window, gutter_width
from hashcheck.diagnostics.positions import sort_positions
from hashcheck.diagnostics.styles import RichStyler, Styler
from hashcheck.diagnostics.types import RenderConfig, SourcePosition, ValidationError

logger = logging.getLogger(__name__)

# Box drawing "│" closing the gutter
GUTTER_BAR = "│"
LINE_MARKER = ">"
POINTER_CHAR = "^"


class ReportRenderer:
    """
    Formats validation errors as annotated source excerpts.

    Args:
        console: Output console (stdout by default)
        styler: Styling capability (Rich markup by default)
        config: Context radius and tab width
    """

    def __init__(
        self,
        console: Optional[Console] = None,
        styler: Optional[Styler] = None,
        config: Optional[RenderConfig] = None
    ):
        self.console = console or Console()
        self.styler = styler or RichStyler()
        self.config = config or RenderConfig()

    def render(
        self,
        errors: Sequence[ValidationError],
        source_lines: Sequence[str],
        file_path: str
    ) -> None:
        """
        Print every error, in the given order. Nothing is printed for no errors.

        Args:
            errors: Errors reported by the validator
            source_lines: Lines of the validated document
            file_path: Path shown in each error header
        """
        for error in errors:
            for line in self.format_error(error, source_lines, file_path):
                self.console.print(
                    line,
                    markup=self.styler.markup,
                    highlight=False,
                    emoji=False,
                    soft_wrap=True
                )

    def format_error(
        self,
        error: ValidationError,
        source_lines: Sequence[str],
        file_path: str
    ) -> List[str]:
        """
        Format one error as a list of output lines.

        Args:
            error: Error to format
            source_lines: Lines of the validated document
            file_path: Path shown in the header

        Returns:
            List[str]: Output lines, the last one always blank
        """
        context_size = self.config.context_size
        tab_size = self.config.tab_size

        positions = sort_positions(error.positions)
        if not positions:
            logger.warning(f"Error HM{error.code} has no source position, rendering header only")
            return [self._header(error, file_path, None), ""]

        line_numbers = [pos.line for pos in positions]
        error_lines = set(line_numbers)
        groups = group_lines(line_numbers, context_size)
        width = gutter_width(groups, context_size)
        total_lines = len(source_lines)

        if line_numbers[-1] > total_lines:
            logger.warning(
                f"Error HM{error.code} points at line {line_numbers[-1]} "
                f"but the document has {total_lines} lines"
            )

        # Every pointer underlines the first position
        primary = positions[0]
        output = [self._header(error, file_path, primary)]

        for i, group in enumerate(groups):
            start, end = context_window(group, context_size, total_lines)

            for line_number in range(start, end + 1):
                text = source_lines[line_number - 1]
                is_error_line = line_number in error_lines

                output.append(self._join(
                    self._indicator(is_error_line),
                    self._gutter(width, str(line_number)),
                    self.styler.literal(expand_tabs(text, tab_size))
                ))

                if is_error_line:
                    indentation = leading_tabs(text)
                    start_col = map_column(primary.start_col, indentation, tab_size)
                    end_col = map_column(primary.end_col, indentation, tab_size)
                    output.append(self._join(
                        self._indicator(False),
                        self._gutter(width, ""),
                        self._pointer(start_col, end_col)
                    ))

            if i != len(groups) - 1:
                output.append("")
                output.append(self._join(self._indicator(False), self._gutter(width, GROUP_SEPARATOR)))
                output.append("")

        output.append("")
        return output

    def _header(
        self,
        error: ValidationError,
        file_path: str,
        position: Optional[SourcePosition]
    ) -> str:
        """Error code, location link and message."""
        location = file_path if position is None else f"{file_path}:{position.line}:{position.start_col}"
        return self._join(
            self.styler.bold(self.styler.colored(self.styler.literal(f"Error HM{error.code}"), "error")),
            self.styler.colored(self.styler.literal(location), "link"),
            self.styler.literal(error.message)
        )

    def _indicator(self, is_error_line: bool) -> str:
        if is_error_line:
            return self.styler.bold(self.styler.colored(LINE_MARKER, "error"))
        return " "

    def _gutter(self, width: int, label: str) -> str:
        return self.styler.colored(f"{label.rjust(width)} {GUTTER_BAR}", "gutter")

    def _pointer(self, start_col: int, end_col: int) -> str:
        marker = self.styler.bold(self.styler.colored(POINTER_CHAR * (end_col - start_col), "error"))
        return " " * (start_col - 1) + marker

    @staticmethod
    def _join(*parts: str) -> str:
        return " ".join(parts)
