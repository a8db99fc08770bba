"""
Diagnostic rendering module.

This module turns validation errors into annotated source excerpts for the
terminal.

Components:
    - types: SourcePosition, ValidationError, LineGroup, RenderConfig
    - positions: Deterministic ordering of an error's positions
    - grouping: Cluster nearby error lines into excerpt blocks
    - layout: Context windows and gutter width
    - columns: Tab-aware column mapping
    - styles: Rich markup and plain-text stylers
    - renderer: ReportRenderer orchestrating the above

Rendering Flow:
    1. Sort the error's positions by (line, start column, end column)
    2. Group error lines that are within the context radius
    3. Compute the gutter width and clipped context windows
    4. Print the header, excerpts, pointers and group separators
"""

from hashcheck.diagnostics.types import (
    SourcePosition,
    ValidationError,
    LineGroup,
    RenderConfig
)
from hashcheck.diagnostics.positions import sort_positions
from hashcheck.diagnostics.grouping import group_lines
from hashcheck.diagnostics.layout import GROUP_SEPARATOR, context_window, gutter_width
from hashcheck.diagnostics.columns import leading_tabs, map_column, expand_tabs
from hashcheck.diagnostics.styles import Styler, RichStyler, PlainStyler
from hashcheck.diagnostics.renderer import ReportRenderer

__all__ = [
    "SourcePosition",
    "ValidationError",
    "LineGroup",
    "RenderConfig",
    "sort_positions",
    "group_lines",
    "GROUP_SEPARATOR",
    "context_window",
    "gutter_width",
    "leading_tabs",
    "map_column",
    "expand_tabs",
    "Styler",
    "RichStyler",
    "PlainStyler",
    "ReportRenderer",
]
