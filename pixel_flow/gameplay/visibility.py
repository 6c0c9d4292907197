"""
Visibility scanning - which cell a rail position can see.
NO UI DEPENDENCIES.
"""
from typing import List, Optional, Tuple

from .grid import Cell, Grid, Side


def scan_bounds(size: int) -> Tuple[int, int]:
    """
    Return (near_limit, far_limit) for a grid of the given size.

    Scans from the top/left stop at center + 1; scans from the bottom/right
    stop at center - 1. Both are clipped to the grid.
    """
    center = size // 2
    return min(center + 1, size - 1), max(center - 1, 0)


def find_exposed(grid: Grid, side: Side, index: int) -> Optional[Cell]:
    """
    Return the first active cell seen looking inward from `side` along
    row/column `index`, or None if the scanned span holds no active cell.

    Active cells beyond the scan bound are not reported.
    """
    size = grid.size
    if not isinstance(side, Side) or index < 0 or index >= size:
        return None

    near_limit, far_limit = scan_bounds(size)

    # depth counts rows for top/bottom, columns for left/right
    if side in (Side.TOP, Side.LEFT):
        depths = range(0, near_limit + 1)
    else:
        depths = range(size - 1, far_limit - 1, -1)

    for depth in depths:
        if side.indexes_columns:
            cell = grid.get_cell(depth, index)
        else:
            cell = grid.get_cell(index, depth)
        if cell.active:
            return cell
    return None


def exposed_cells(grid: Grid) -> List[Cell]:
    """
    All distinct cells exposed anywhere on the perimeter.

    Enumeration order is side order (top, right, bottom, left), then index
    ascending; a cell seen from two sides is listed once, at first sighting.
    """
    seen = set()
    exposed: List[Cell] = []
    for side in Side:
        for index in range(grid.size):
            cell = find_exposed(grid, side, index)
            if cell is None or (cell.row, cell.col) in seen:
                continue
            seen.add((cell.row, cell.col))
            exposed.append(cell)
    return exposed
