"""
Rail geometry - maps 1-D rail progress onto the grid's four sides.
NO UI DEPENDENCIES.

The rail is a rectangle hugging the grid, walked clockwise from the
top-left corner:

    top:    0          .. width            (x increasing)
    right:  width      .. width+height     (y increasing)
    bottom: width+h    .. 2*width+height   (x decreasing)
    left:   2*width+h  .. 2*(width+height) (y decreasing)
"""
import math
from dataclasses import dataclass
from typing import Iterator, Optional

from .grid import Side


@dataclass(frozen=True)
class RailState:
    """Where a rail position lands: the side it faces and the row/column it lines up with."""
    side: Side
    index: int
    x: float
    y: float


def perimeter_length(width: int, height: int) -> int:
    return 2 * width + 2 * height


def map_position(progress: float, perimeter: float, width: int, height: int) -> Optional[RailState]:
    """
    Convert rail progress to a side/index descriptor.

    Progress is normalized modulo the perimeter first, so any real value is
    accepted. Returns None for a non-positive perimeter. The index may fall
    outside the grid at exact segment starts on the reversed sides; the
    visibility scanner treats that as "no target".
    """
    if perimeter <= 0:
        return None

    p = progress % perimeter
    if p >= perimeter:
        # float modulo of a tiny negative value can round up to the perimeter
        p = 0.0

    if p < width:
        x, y = p, 0.0
        return RailState(Side.TOP, math.floor(x), x, y)
    if p < width + height:
        x, y = float(width), p - width
        return RailState(Side.RIGHT, math.floor(y), x, y)
    if p < 2 * width + height:
        x, y = width - (p - (width + height)), float(height)
        return RailState(Side.BOTTOM, math.floor(x), x, y)
    x, y = 0.0, height - (p - (2 * width + height))
    return RailState(Side.LEFT, math.floor(y), x, y)


def crossed_centers(old_position: float, new_position: float) -> Iterator[float]:
    """
    Yield every cell-center position (k + 0.5) passed while moving from
    old_position to new_position, in increasing order.

    new_position is the un-wrapped position, so a step may cover more than
    one lap. The start is exclusive and the end inclusive.
    """
    first = math.floor(old_position - 0.5)
    last = math.floor(new_position - 0.5)
    for k in range(first + 1, last + 1):
        yield k + 0.5
