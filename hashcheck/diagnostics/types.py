"""
Value types for diagnostic rendering.

Everything here is immutable: positions and errors come from the validator and
are only read by the renderer, and line groups are rebuilt on every pass.

Types:
    SourcePosition: A half-open column range on one source line
    ValidationError: One reported violation with its positions
    LineGroup: A run of error lines rendered as one excerpt block
    RenderConfig: Context radius and tab width used by the renderer
"""

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class SourcePosition:
    """
    A span on a single source line.

    Attributes:
        line: 1-indexed line number
        start_col: 1-indexed first column of the span
        end_col: 1-indexed column just past the span (exclusive)
    """
    line: int
    start_col: int
    end_col: int

    @property
    def width(self) -> int:
        """Number of columns covered by the span."""
        return self.end_col - self.start_col

    def __str__(self) -> str:
        return f"{self.line}:{self.start_col}"


@dataclass(frozen=True)
class ValidationError:
    """
    A single diagnostic produced by the validator.

    Attributes:
        code: Stable error identifier (rendered as ``HM<code>``)
        message: Human-readable description
        positions: Source spans the diagnostic applies to
    """
    code: str
    message: str
    positions: Tuple[SourcePosition, ...]


@dataclass(frozen=True)
class LineGroup:
    """A contiguous run of error lines, shown as one excerpt."""
    first: int
    last: int


@dataclass(frozen=True)
class RenderConfig:
    """
    Renderer configuration.

    Attributes:
        context_size: Lines of context shown around each error line, also the
            largest gap between error lines that still share one excerpt
        tab_size: Number of spaces a tab expands to on screen
    """
    context_size: int = 2
    tab_size: int = 4

    def __post_init__(self) -> None:
        if self.context_size < 0:
            raise ValueError(f"context_size must be >= 0, got {self.context_size}")
        if self.tab_size < 1:
            raise ValueError(f"tab_size must be >= 1, got {self.tab_size}")
