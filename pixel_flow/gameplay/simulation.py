"""
Live simulation loop - advances shooters along the rail and resolves hits.
NO UI DEPENDENCIES.

One call to step() runs a whole frame to completion. All mutable session
data lives in a single SimulationState; the session swaps in a fresh one
on restart or editor entry rather than patching it in place.
"""
import logging
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import List

from .colors import ColorID
from .grid import Grid
from .inventory import Inventory
from .rail import crossed_centers, map_position, perimeter_length
from .shooters import Shooter
from .visibility import find_exposed
from .constants import RAIL_SPEED, POINTS_PER_HIT

logger = logging.getLogger(__name__)


class SessionPhase(Enum):
    """Current phase of the session."""
    PLAYING = auto()   # Loop running, spawns accepted
    EDITING = auto()   # Loop paused, grid open to paint/clear
    WON = auto()       # Every cell cleared
    LOST = auto()      # Cells remain that no shooter can ever clear


@dataclass
class SimulationState:
    """The one authoritative copy of everything a frame reads or writes."""
    grid: Grid
    inventory: Inventory
    shooters: List[Shooter] = field(default_factory=list)
    score: int = 0
    phase: SessionPhase = SessionPhase.PLAYING
    # Rail distance covered since a cell was last cleared or a shooter deployed
    idle_distance: float = 0.0

    @property
    def perimeter(self) -> int:
        return perimeter_length(self.grid.width, self.grid.height)


@dataclass(frozen=True)
class Hit:
    """A shooter cleared a cell."""
    shooter_id: str
    row: int
    col: int
    color: ColorID


@dataclass
class StepResult:
    """What happened during one step."""
    hits: List[Hit] = field(default_factory=list)
    retired: List[str] = field(default_factory=list)
    won: bool = False

    @property
    def grid_changed(self) -> bool:
        return bool(self.hits)


def advance_shooter(state: SimulationState, shooter: Shooter, distance: float, points_per_hit: int,
                    result: StepResult) -> None:
    """
    Move one shooter `distance` cells clockwise, firing at every cell
    center it crosses on the way.
    """
    grid = state.grid
    perimeter = state.perimeter
    old_position = shooter.rail_position
    new_position = old_position + distance

    for center in crossed_centers(old_position, new_position):
        if shooter.ammo <= 0:
            break
        rail = map_position(center, perimeter, grid.width, grid.height)
        target = find_exposed(grid, rail.side, rail.index)
        if target is None or target.color != shooter.color:
            continue

        target.deactivate()
        shooter.fire()
        state.score += points_per_hit
        result.hits.append(Hit(shooter.id, target.row, target.col, target.color))
        logger.debug(
            f"Shooter {shooter.id} hit ({target.row}, {target.col}) from "
            f"{rail.side.name}:{rail.index}, ammo left {shooter.ammo}"
        )

    shooter.rail_position = new_position % perimeter


def step(state: SimulationState, dt: float, speed: float = RAIL_SPEED,
         points_per_hit: int = POINTS_PER_HIT) -> StepResult:
    """
    Advance the simulation by dt seconds.

    Shooters are processed in rail-entry order. A shooter that runs dry is
    retired and dropped. The session is won once no active cell remains.
    Nothing happens outside the PLAYING phase.
    """
    result = StepResult()
    if state.phase != SessionPhase.PLAYING:
        return result

    distance = speed * max(dt, 0.0)
    survivors: List[Shooter] = []
    for shooter in state.shooters:
        advance_shooter(state, shooter, distance, points_per_hit, result)
        if shooter.ammo <= 0:
            shooter.retire()
            result.retired.append(shooter.id)
            logger.debug(f"Shooter {shooter.id} retired")
        else:
            survivors.append(shooter)
    state.shooters = survivors

    if result.hits:
        state.idle_distance = 0.0
    elif state.shooters:
        state.idle_distance += distance

    if not state.grid.has_active():
        state.phase = SessionPhase.WON
        result.won = True

    return result
