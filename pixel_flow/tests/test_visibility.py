"""
Tests for visibility scanning.
"""
import pytest
from pixel_flow.gameplay.visibility import exposed_cells, find_exposed, scan_bounds
from pixel_flow.gameplay.grid import Grid, Side
from pixel_flow.gameplay.colors import ColorID


def grid_with(size, *cells, color=ColorID.RED):
    """A grid with the given (row, col) cells painted."""
    grid = Grid(size)
    for row, col in cells:
        grid.paint(row, col, color)
    return grid


class TestScanBounds:
    """Tests for scan_bounds."""

    def test_reference_grid(self):
        """11x11: near sides reach row 6, far sides reach row 4."""
        assert scan_bounds(11) == (6, 4)

    def test_small_grids_are_clipped(self):
        """Bounds never leave the grid."""
        assert scan_bounds(3) == (2, 0)
        assert scan_bounds(1) == (0, 0)


class TestFindExposed:
    """Tests for find_exposed."""

    def test_out_of_range_index(self):
        """An index outside the grid is a plain miss."""
        grid = grid_with(11, (0, 0))
        assert find_exposed(grid, Side.TOP, -1) is None
        assert find_exposed(grid, Side.TOP, 11) is None

    def test_unknown_side(self):
        """Anything that isn't a Side sees nothing."""
        grid = grid_with(3, (0, 0))
        assert find_exposed(grid, "TOP", 0) is None

    def test_first_active_wins(self):
        """The nearest active cell along the line is returned."""
        grid = grid_with(11, (3, 2), (5, 2))
        cell = find_exposed(grid, Side.TOP, 2)
        assert (cell.row, cell.col) == (3, 2)

        cell = find_exposed(grid, Side.BOTTOM, 2)
        assert (cell.row, cell.col) == (5, 2)

    def test_inactive_cells_are_transparent(self):
        """Cleared cells don't block the line of sight."""
        grid = grid_with(11, (1, 4), (2, 4))
        grid.get_cell(1, 4).deactivate()
        cell = find_exposed(grid, Side.TOP, 4)
        assert (cell.row, cell.col) == (2, 4)

    def test_top_overruns_center(self):
        """From the top, row center+1 is reachable but center+2 is not."""
        assert find_exposed(grid_with(11, (6, 2)), Side.TOP, 2) is not None
        assert find_exposed(grid_with(11, (7, 2)), Side.TOP, 2) is None

    def test_bottom_undershoots_center(self):
        """From the bottom, row center-1 is reachable but center-2 is not."""
        assert find_exposed(grid_with(11, (4, 2)), Side.BOTTOM, 2) is not None
        assert find_exposed(grid_with(11, (3, 2)), Side.BOTTOM, 2) is None

    def test_left_and_right_bounds(self):
        """Left reaches column center+1, right reaches column center-1."""
        assert find_exposed(grid_with(11, (2, 6)), Side.LEFT, 2) is not None
        assert find_exposed(grid_with(11, (2, 7)), Side.LEFT, 2) is None
        assert find_exposed(grid_with(11, (2, 4)), Side.RIGHT, 2) is not None
        assert find_exposed(grid_with(11, (2, 3)), Side.RIGHT, 2) is None

    def test_color_is_ignored(self):
        """Visibility doesn't care about color; any active cell blocks."""
        grid = grid_with(5, (0, 1), color=ColorID.BLUE)
        grid.paint(1, 1, ColorID.RED)
        assert find_exposed(grid, Side.TOP, 1).color == ColorID.BLUE


class TestExposedCells:
    """Tests for exposed_cells."""

    def test_ring_corners_deduplicated(self):
        """Corner cells seen from two sides are listed once."""
        grid = Grid.from_strings(["RRR", "R.R", "RRR"])
        cells = exposed_cells(grid)
        assert len(cells) == 8
        assert len({(c.row, c.col) for c in cells}) == 8

    def test_enumeration_order(self):
        """Cells come in side order, then index order."""
        grid = Grid.from_strings(["RB.", "...", "..Y"])
        cells = exposed_cells(grid)
        assert [(c.row, c.col) for c in cells] == [(0, 0), (0, 1), (2, 2)]

    def test_inner_cells_hidden(self):
        """Cells behind the outer ring are not exposed."""
        grid = Grid.from_strings(["RRRRR", "RBBBR", "RBGBR", "RBBBR", "RRRRR"])
        assert all(c.color == ColorID.RED for c in exposed_cells(grid))

    def test_empty_grid(self):
        """Nothing exposed on an empty grid."""
        assert exposed_cells(Grid(4)) == []
