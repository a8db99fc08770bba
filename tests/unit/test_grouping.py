"""
Unit tests for position sorting and line grouping.
"""

import pytest
from hashcheck.diagnostics import LineGroup, SourcePosition, group_lines, sort_positions


class TestSortPositions:
    """Test deterministic position ordering."""

    def test_sort_by_line_then_columns(self):
        """Test ordering by (line, start_col, end_col)."""
        positions = [
            SourcePosition(3, 1, 2),
            SourcePosition(1, 5, 9),
            SourcePosition(1, 5, 7),
            SourcePosition(1, 2, 3),
        ]

        result = sort_positions(positions)

        assert result == [
            SourcePosition(1, 2, 3),
            SourcePosition(1, 5, 7),
            SourcePosition(1, 5, 9),
            SourcePosition(3, 1, 2),
        ]

    def test_sort_does_not_modify_input(self):
        """Test that the input sequence is left untouched."""
        positions = (SourcePosition(2, 1, 2), SourcePosition(1, 1, 2))

        sort_positions(positions)

        assert positions[0] == SourcePosition(2, 1, 2)

    def test_sort_keeps_duplicates(self):
        """Test that duplicate positions are all kept."""
        position = SourcePosition(4, 1, 3)
        assert sort_positions([position, position]) == [position, position]


class TestGroupLines:
    """Test clustering of error lines into excerpt groups."""

    def test_adjacent_lines_form_one_group(self):
        """Test [1, 2, 3] -> one group."""
        assert group_lines([1, 2, 3], context_size=2) == [LineGroup(1, 3)]

    def test_distant_lines_form_separate_groups(self):
        """Test [1, 10] -> two groups."""
        assert group_lines([1, 10], context_size=2) == [LineGroup(1, 1), LineGroup(10, 10)]

    def test_gap_equal_to_context_merges(self):
        """Test that 1 + 2 >= 3 keeps lines 1 and 3 together."""
        assert group_lines([1, 3], context_size=2) == [LineGroup(1, 3)]

    def test_gap_beyond_context_splits(self):
        """Test that 1 + 2 >= 4 is false, so lines 1 and 4 split."""
        assert group_lines([1, 4], context_size=2) == [LineGroup(1, 1), LineGroup(4, 4)]

    def test_single_line(self):
        """Test that a single line yields first == last."""
        assert group_lines([7], context_size=2) == [LineGroup(7, 7)]

    def test_duplicates_collapse(self):
        """Test that repeated line numbers stay in one group."""
        assert group_lines([5, 5, 5, 6], context_size=2) == [LineGroup(5, 6)]

    def test_chained_lines_extend_group(self):
        """Test that each line within reach of the previous extends the group."""
        assert group_lines([1, 3, 5, 7, 20], context_size=2) == [LineGroup(1, 7), LineGroup(20, 20)]

    def test_zero_context(self):
        """Test grouping with no context: only equal lines merge."""
        assert group_lines([1, 1, 2], context_size=0) == [LineGroup(1, 1), LineGroup(2, 2)]

    def test_empty_input(self):
        """Test that no lines yield no groups."""
        assert group_lines([], context_size=2) == []

    @pytest.mark.parametrize("context_size", [0, 1, 2, 5])
    def test_grouping_invariants(self, context_size):
        """Test ordering, gap and coverage invariants on a mixed input."""
        line_numbers = [1, 2, 2, 4, 9, 10, 15, 30, 31, 33, 40]

        groups = group_lines(line_numbers, context_size)

        for group in groups:
            assert group.first <= group.last
        for previous, current in zip(groups, groups[1:]):
            assert current.first - previous.last > context_size
        for line_number in line_numbers:
            covering = [g for g in groups if g.first <= line_number <= g.last]
            assert len(covering) == 1
