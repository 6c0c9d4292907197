"""
Level definitions - grids to play.
NO UI DEPENDENCIES.
"""
import math
import random
from typing import Optional, Sequence

from .colors import ColorID
from .grid import Grid
from .constants import GRID_SIZE


def create_flask_level(size: int = GRID_SIZE, seed: Optional[int] = None) -> Grid:
    """
    Create the potion-flask level.

    - Body: red/orange mix below the center line
    - Neck: green column just above center
    - Rim: white band capping the neck
    - Fill: yellow inside a radius-4 disc
    - Noise: scattered purple around the middle
    """
    rng = random.Random(seed)
    grid = Grid(size)
    center = size // 2

    for cell in grid.iter_cells():
        dx = abs(cell.col - center)
        dy = abs(cell.row - center)
        dist = math.sqrt(dx * dx + dy * dy)

        color = ColorID.NONE
        if cell.row > center and dx <= 2:
            color = ColorID.RED if rng.random() > 0.5 else ColorID.ORANGE
        elif center - 3 < cell.row <= center and dx <= 1:
            color = ColorID.GREEN
        elif cell.row == center - 3 and dx <= 2:
            color = ColorID.WHITE
        elif dist < 4 and cell.row > 2:
            color = ColorID.YELLOW

        if color is ColorID.NONE and dx < 4 and dy < 4 and rng.random() > 0.8:
            color = ColorID.PURPLE

        cell.paint(color)

    return grid


def create_ring_level(size: int = GRID_SIZE, color: ColorID = ColorID.RED) -> Grid:
    """A single ring of `color` around the border, empty inside."""
    return create_rings_level(size, [color])


def create_rings_level(size: int = GRID_SIZE, colors: Sequence[ColorID] = (ColorID.RED,)) -> Grid:
    """
    Concentric square rings, outermost first.
    Rings past the end of `colors` stay empty; a NONE ring is left empty too.
    """
    grid = Grid(size)
    for cell in grid.iter_cells():
        depth = min(cell.row, cell.col, size - 1 - cell.row, size - 1 - cell.col)
        if depth < len(colors):
            cell.paint(colors[depth])
    return grid


def create_empty_level(size: int = GRID_SIZE) -> Grid:
    return Grid(size)
