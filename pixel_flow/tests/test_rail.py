"""
Tests for rail geometry.
"""
import pytest
from pixel_flow.gameplay.rail import RailState, crossed_centers, map_position, perimeter_length
from pixel_flow.gameplay.grid import Grid, Side
from pixel_flow.gameplay.colors import ColorID
from pixel_flow.gameplay.visibility import find_exposed


N = 11
PERIMETER = perimeter_length(N, N)


class TestMapPosition:
    """Tests for map_position."""

    def test_perimeter(self):
        """Perimeter is the sum of all four sides."""
        assert PERIMETER == 44

    def test_top_segment(self):
        """Top side runs left to right."""
        assert map_position(0.5, PERIMETER, N, N) == RailState(Side.TOP, 0, 0.5, 0.0)
        assert map_position(10.5, PERIMETER, N, N).index == 10

    def test_right_segment(self):
        """Right side runs top to bottom."""
        state = map_position(11.5, PERIMETER, N, N)
        assert state.side == Side.RIGHT
        assert state.index == 0
        assert state.x == N
        assert state.y == pytest.approx(0.5)

    def test_bottom_segment_reversed(self):
        """Bottom side runs right to left."""
        first = map_position(22.5, PERIMETER, N, N)
        last = map_position(32.5, PERIMETER, N, N)
        assert first.side == Side.BOTTOM and first.index == 10
        assert last.side == Side.BOTTOM and last.index == 0
        assert first.y == N

    def test_left_segment_reversed(self):
        """Left side runs bottom to top."""
        first = map_position(33.5, PERIMETER, N, N)
        last = map_position(43.5, PERIMETER, N, N)
        assert first.side == Side.LEFT and first.index == 10
        assert last.side == Side.LEFT and last.index == 0
        assert first.x == 0.0

    def test_progress_wraps(self):
        """Progress is taken modulo the perimeter, negatives included."""
        assert map_position(44.5, PERIMETER, N, N) == map_position(0.5, PERIMETER, N, N)
        assert map_position(-0.5, PERIMETER, N, N) == map_position(43.5, PERIMETER, N, N)

    def test_bad_perimeter(self):
        """A non-positive perimeter yields no result."""
        assert map_position(1.0, 0, N, N) is None

    def test_reproducible(self):
        """Same input, same output."""
        assert map_position(17.25, PERIMETER, N, N) == map_position(17.25, PERIMETER, N, N)


class TestCenterRoundTrip:
    """Every cell center on the rail looks down the geometrically facing line."""

    @staticmethod
    def _edge_cell(side, index):
        if side == Side.TOP:
            return (0, index)
        if side == Side.RIGHT:
            return (index, N - 1)
        if side == Side.BOTTOM:
            return (N - 1, index)
        return (index, 0)

    def test_every_center_distinct(self):
        """The 44 centers cover each (side, index) pair exactly once."""
        pairs = set()
        for k in range(PERIMETER):
            state = map_position(k + 0.5, PERIMETER, N, N)
            assert 0 <= state.index < N
            pairs.add((state.side, state.index))
        assert len(pairs) == PERIMETER

    def test_center_sees_facing_cell(self):
        """The scanner, fed a center's (side, index), finds the edge cell facing it."""
        for k in range(PERIMETER):
            state = map_position(k + 0.5, PERIMETER, N, N)
            row, col = self._edge_cell(state.side, state.index)
            grid = Grid(N)
            grid.paint(row, col, ColorID.RED)

            target = find_exposed(grid, state.side, state.index)
            assert target is not None
            assert (target.row, target.col) == (row, col)

            # Top/bottom vary the column; left/right vary the row
            if state.side.indexes_columns:
                assert target.col == state.index
            else:
                assert target.row == state.index


class TestCrossedCenters:
    """Tests for crossed_centers."""

    def test_no_crossing(self):
        """Moving without passing a center yields nothing."""
        assert list(crossed_centers(0.0, 0.3)) == []

    def test_single_crossing(self):
        """Passing one center yields it."""
        assert list(crossed_centers(0.0, 0.6)) == [0.5]

    def test_start_exclusive_end_inclusive(self):
        """A center at the start is skipped; one at the end is included."""
        assert list(crossed_centers(0.5, 1.5)) == [1.5]

    def test_large_step_yields_every_center(self):
        """A multi-cell step yields each center in increasing order."""
        assert list(crossed_centers(0.4, 3.7)) == [0.5, 1.5, 2.5, 3.5]

    def test_past_perimeter(self):
        """Un-wrapped positions past the perimeter keep counting."""
        assert list(crossed_centers(43.0, 46.0)) == [43.5, 44.5, 45.5]

    def test_zero_distance(self):
        """Standing still crosses nothing."""
        assert list(crossed_centers(5.5, 5.5)) == []
