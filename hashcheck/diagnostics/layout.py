"""
Layout calculations for excerpt blocks: context windows and gutter width.
"""

from typing import Sequence, Tuple

from hashcheck.diagnostics.types import LineGroup

# Vertical ellipsis shown in the gutter between two excerpt blocks
GROUP_SEPARATOR = "⋮"


def context_window(group: LineGroup, context_size: int, total_lines: int) -> Tuple[int, int]:
    """
    Compute the lines displayed for a group, clipped to the document.

    Args:
        group: Error line group
        context_size: Context lines shown before and after the group
        total_lines: Number of lines in the document

    Returns:
        Tuple[int, int]: Inclusive ``(start, end)`` line numbers. ``start``
        exceeds ``end`` when the group lies entirely past the document end.
    """
    start = max(1, group.first - context_size)
    end = min(total_lines, group.last + context_size)
    return start, end


def gutter_width(groups: Sequence[LineGroup], context_size: int) -> int:
    """
    Width of the line number column, shared by every line of a report.

    The last group's unclipped context end is used, so the width is an upper
    bound on every displayed line number.

    Args:
        groups: Ascending line groups (may be empty)
        context_size: Context lines shown after each group

    Returns:
        int: Gutter width in characters
    """
    if not groups:
        return len(GROUP_SEPARATOR)
    last_line = groups[-1].last + context_size
    return max(len(GROUP_SEPARATOR), len(str(last_line)))
