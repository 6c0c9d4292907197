"""
Pixel grid system.
NO UI DEPENDENCIES.
"""
from dataclasses import dataclass
from typing import Iterator, List, Optional, Sequence, Tuple
from enum import Enum, auto

from .colors import ColorID, COLOR_CODES, CODE_FOR_COLOR


class Side(Enum):
    """Grid sides, in clockwise rail order starting at the top-left corner."""
    TOP = auto()
    RIGHT = auto()
    BOTTOM = auto()
    LEFT = auto()

    @property
    def indexes_columns(self) -> bool:
        """True if a rail index on this side names a column (top/bottom)."""
        return self in (Side.TOP, Side.BOTTOM)


@dataclass(frozen=True)
class CellView:
    """Read-only copy of a cell, handed to the presentation layer."""
    row: int
    col: int
    color: ColorID
    active: bool


@dataclass
class Cell:
    """A single pixel in the grid."""
    row: int
    col: int
    color: ColorID = ColorID.NONE
    active: bool = False

    @property
    def id(self) -> str:
        return f"p-{self.row}-{self.col}"

    def paint(self, color: ColorID) -> None:
        """Set the color; a painted cell is active unless painted NONE."""
        self.color = color
        self.active = color is not ColorID.NONE

    def deactivate(self) -> None:
        self.active = False

    def view(self) -> CellView:
        return CellView(self.row, self.col, self.color, self.active)


class Grid:
    """
    A square grid of pixels.

    Coordinate system:
    - (0, 0) is top-left
    - row increases downward
    - col increases to the right
    """

    def __init__(self, size: int):
        if size < 1:
            raise ValueError(f"Grid size must be at least 1, got {size}")
        self.size = size
        self._rows: List[List[Cell]] = [
            [Cell(row, col) for col in range(size)]
            for row in range(size)
        ]

    @classmethod
    def from_colors(cls, rows: Sequence[Sequence[ColorID]]) -> 'Grid':
        """Build a grid from a square table of colors; non-NONE cells start active."""
        size = len(rows)
        if any(len(row) != size for row in rows):
            raise ValueError("Color table must be square")
        grid = cls(size)
        for r, row in enumerate(rows):
            for c, color in enumerate(row):
                grid._rows[r][c].paint(color)
        return grid

    @classmethod
    def from_strings(cls, lines: Sequence[str]) -> 'Grid':
        """
        Build a grid from text rows of one-letter color codes.

        Example: ["RRR", "R.R", "RRR"] is a red ring around an empty center.
        """
        table = []
        for line in lines:
            row = []
            for code in line:
                if code not in COLOR_CODES:
                    raise ValueError(f"Unknown color code {code!r}")
                row.append(COLOR_CODES[code])
            table.append(row)
        return cls.from_colors(table)

    @property
    def width(self) -> int:
        return self.size

    @property
    def height(self) -> int:
        return self.size

    def in_bounds(self, row: int, col: int) -> bool:
        """Check if coordinates are within grid bounds."""
        return 0 <= row < self.size and 0 <= col < self.size

    def get_cell(self, row: int, col: int) -> Optional[Cell]:
        """Get cell at coordinates, or None if out of bounds."""
        if not self.in_bounds(row, col):
            return None
        return self._rows[row][col]

    def paint(self, row: int, col: int, color: ColorID) -> bool:
        """
        Paint a single cell.
        Returns True if painted, False if out of bounds.
        """
        cell = self.get_cell(row, col)
        if cell is None:
            return False
        cell.paint(color)
        return True

    def iter_cells(self) -> Iterator[Cell]:
        """Iterate over all cells in row-major order."""
        for row in self._rows:
            yield from row

    def active_count(self) -> int:
        return sum(1 for cell in self.iter_cells() if cell.active)

    def has_active(self) -> bool:
        return any(cell.active for cell in self.iter_cells())

    def copy(self) -> 'Grid':
        """Return an independent working copy."""
        clone = Grid(self.size)
        for cell in self.iter_cells():
            target = clone._rows[cell.row][cell.col]
            target.color = cell.color
            target.active = cell.active
        return clone

    def snapshot(self) -> Tuple[Tuple[CellView, ...], ...]:
        """Immutable row-major view of the grid."""
        return tuple(tuple(cell.view() for cell in row) for row in self._rows)

    def to_strings(self) -> List[str]:
        """Text rows of color codes; inactive cells render as '.'."""
        return [
            ''.join(CODE_FOR_COLOR[cell.color] if cell.active else '.' for cell in row)
            for row in self._rows
        ]

    def __repr__(self) -> str:
        return f"Grid({self.size}x{self.size}, active={self.active_count()})"
