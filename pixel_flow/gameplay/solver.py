"""
Perimeter-peeling solver - derives a shooter manifest that clears a grid.
NO UI DEPENDENCIES.
"""
import logging
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple

from .colors import ColorID
from .grid import Cell, Grid
from .visibility import exposed_cells
from .constants import SOLVER_MAX_ITERATIONS

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ShooterManifest:
    """One planned shooter: its color and the shots it carries."""
    color: ColorID
    ammo: int

    @property
    def max_ammo(self) -> int:
        return self.ammo


@dataclass
class SolveResult:
    """
    Outcome of solving a grid.

    `solved` is False when peeling got stuck (nothing shootable is exposed
    but active cells remain) or ran out of iterations; `manifest` then holds
    the partial plan computed so far.
    """
    manifest: List[ShooterManifest] = field(default_factory=list)
    solved: bool = True
    iterations: int = 0
    remaining: int = 0

    @property
    def stuck(self) -> bool:
        return not self.solved

    @property
    def total_ammo(self) -> int:
        return sum(entry.ammo for entry in self.manifest)


def pick_color(cells: List[Cell]) -> Optional[Tuple[ColorID, int]]:
    """
    Choose the playable color with the strictly greatest count among `cells`.

    Ties go to the color encountered first in `cells`. NONE is never chosen.
    Returns None if no playable color is present.
    """
    tally: Dict[ColorID, int] = {}
    for cell in cells:
        if cell.color.is_playable:
            tally[cell.color] = tally.get(cell.color, 0) + 1

    best: Optional[Tuple[ColorID, int]] = None
    for color, count in tally.items():
        if best is None or count > best[1]:
            best = (color, count)
    return best


def solve(grid: Grid, max_iterations: int = SOLVER_MAX_ITERATIONS) -> SolveResult:
    """
    Peel the grid from the outside in.

    Each pass collects every cell exposed on the perimeter, fires the most
    common exposed color at all of its exposed cells, and records that as one
    manifest entry. Works on a copy; the caller's grid is never touched.
    """
    working = grid.copy()
    result = SolveResult()

    while result.iterations < max_iterations:
        exposed = exposed_cells(working)
        if not exposed:
            break

        choice = pick_color(exposed)
        if choice is None:
            # only NONE-colored active cells are visible
            break

        color, count = choice
        result.iterations += 1
        result.manifest.append(ShooterManifest(color=color, ammo=count))
        for cell in exposed:
            if cell.color == color:
                cell.deactivate()

    result.remaining = working.active_count()
    result.solved = result.remaining == 0

    if result.solved:
        logger.debug(f"Solved grid in {result.iterations} passes, {len(result.manifest)} shooters")
    else:
        logger.warning(
            f"Solver stuck after {result.iterations} passes with "
            f"{result.remaining} active cells remaining"
        )
    return result
