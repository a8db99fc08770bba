"""
Line grouping - cluster error lines into excerpt blocks.

Error lines that sit within ``context_size`` lines of each other would show
overlapping context, so they are rendered together as one block.

Example:
    ```python
    group_lines([1, 3, 10], context_size=2)
    # [LineGroup(first=1, last=3), LineGroup(first=10, last=10)]
    ```
"""

from typing import List, Sequence

from hashcheck.diagnostics.types import LineGroup


def group_lines(line_numbers: Sequence[int], context_size: int) -> List[LineGroup]:
    """
    Fold ascending line numbers into non-overlapping groups.

    A line joins the current group when ``group.last + context_size >= line``;
    otherwise it starts a new group. Duplicates collapse into the same group.

    Args:
        line_numbers: Ascending line numbers, duplicates allowed
        context_size: Largest gap that keeps two lines in one group

    Returns:
        List[LineGroup]: Ascending groups, empty for empty input
    """
    groups: List[LineGroup] = []
    for line_number in line_numbers:
        if groups and groups[-1].last + context_size >= line_number:
            groups[-1] = LineGroup(first=groups[-1].first, last=line_number)
        else:
            groups.append(LineGroup(first=line_number, last=line_number))
    return groups
