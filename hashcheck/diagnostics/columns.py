"""
Tab-aware column mapping.

Validators count a tab as one column, but the renderer expands tabs to
``tab_size`` spaces. Only leading tabs (indentation) are corrected; tabs after
the first non-tab character are not.
"""


def leading_tabs(line: str) -> int:
    """
    Count the tab characters before the first non-tab character.

    A line made only of tabs counts all of them; a line without leading tabs
    returns 0.
    """
    return len(line) - len(line.lstrip("\t"))


def map_column(column: int, indentation: int, tab_size: int) -> int:
    """
    Convert a raw column into its display column.

    Args:
        column: Raw 1-indexed column (tabs count as one)
        indentation: Number of leading tabs on the line
        tab_size: Spaces per displayed tab

    Returns:
        int: Column after expanding the leading tabs
    """
    return column + indentation * (tab_size - 1)


def expand_tabs(line: str, tab_size: int) -> str:
    """Replace every tab with ``tab_size`` spaces."""
    return line.replace("\t", " " * tab_size)
