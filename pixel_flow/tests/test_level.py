"""
Tests for level definitions.
"""
from pixel_flow.gameplay.level import (
    create_empty_level, create_flask_level, create_ring_level, create_rings_level,
)
from pixel_flow.gameplay.colors import ColorID
from pixel_flow.gameplay.solver import solve


class TestFlaskLevel:
    """Tests for the generated flask level."""

    def test_same_seed_same_grid(self):
        """A seed pins the layout."""
        assert create_flask_level(11, seed=42).to_strings() == create_flask_level(11, seed=42).to_strings()

    def test_only_playable_cells_active(self):
        """Every active cell carries a real color."""
        grid = create_flask_level(11, seed=5)
        assert grid.active_count() > 0
        assert all(cell.color.is_playable for cell in grid.iter_cells() if cell.active)

    def test_neck_is_green(self):
        """The column above the center is the green neck."""
        grid = create_flask_level(11, seed=0)
        assert grid.get_cell(5, 5).color == ColorID.GREEN
        assert grid.get_cell(3, 5).color == ColorID.GREEN

    def test_body_below_center(self):
        """The body under the center line is red or orange."""
        grid = create_flask_level(11, seed=9)
        for row in range(6, 11):
            assert grid.get_cell(row, 5).color in (ColorID.RED, ColorID.ORANGE)

    def test_solvable(self):
        """Generated levels always solve."""
        for seed in range(5):
            assert solve(create_flask_level(11, seed=seed)).solved


class TestRingLevels:
    """Tests for ring levels."""

    def test_ring(self):
        """Border painted, interior empty."""
        assert create_ring_level(3, ColorID.BLUE).to_strings() == ["BBB", "B.B", "BBB"]

    def test_rings_with_gap(self):
        """A NONE ring stays empty."""
        grid = create_rings_level(5, [ColorID.RED, ColorID.NONE, ColorID.GREEN])
        assert grid.to_strings() == ["RRRRR", "R...R", "R.G.R", "R...R", "RRRRR"]

    def test_empty(self):
        """Empty level has nothing to clear."""
        assert not create_empty_level(4).has_active()
