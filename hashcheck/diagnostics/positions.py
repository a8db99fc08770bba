"""Deterministic ordering of diagnostic positions."""

from typing import Iterable, List

from hashcheck.diagnostics.types import SourcePosition


def sort_positions(positions: Iterable[SourcePosition]) -> List[SourcePosition]:
    """
    Order positions by line, then start column, then end column.

    Args:
        positions: Positions attached to one diagnostic, in any order

    Returns:
        List[SourcePosition]: New ascending list (the input is not modified)
    """
    return sorted(positions, key=lambda pos: (pos.line, pos.start_col, pos.end_col))
