"""
Main Game class - the play session every UI talks to.
NO UI DEPENDENCIES.

This is the central gameplay module. It can be fully tested
without any UI framework.
"""
import logging
from dataclasses import dataclass, replace
from typing import List, Optional, Tuple

from ..config import Settings, get_settings
from .colors import ColorID
from .grid import CellView, Grid
from .inventory import Inventory
from .level import create_flask_level
from .shooters import ShooterView
from .simulation import SessionPhase, SimulationState, step
from .solver import SolveResult, solve

logger = logging.getLogger(__name__)


@dataclass
class GameEvent:
    """An event that occurred during gameplay (for UI to react to)."""
    pass


@dataclass
class PhaseChangedEvent(GameEvent):
    """Session phase changed."""
    old_phase: SessionPhase
    new_phase: SessionPhase


@dataclass
class LevelStartedEvent(GameEvent):
    """A level was solved and loaded into the lanes."""
    shooter_count: int
    solved: bool


@dataclass
class ShooterSpawnedEvent(GameEvent):
    """A shooter left a lane for the rail."""
    shooter_id: str
    lane_index: int
    color: ColorID


@dataclass
class CellClearedEvent(GameEvent):
    """A shooter cleared a cell."""
    shooter_id: str
    row: int
    col: int
    color: ColorID


@dataclass
class ShooterRetiredEvent(GameEvent):
    """A shooter ran out of ammo and left the rail."""
    shooter_id: str


@dataclass(frozen=True)
class Snapshot:
    """Everything the presentation layer needs for one frame."""
    grid: Tuple[Tuple[CellView, ...], ...]
    shooters: Tuple[ShooterView, ...]
    lanes: Tuple[Tuple[ShooterView, ...], ...]
    score: int
    phase: SessionPhase
    solved: bool


class Game:
    """
    A play session.

    This class is COMPLETELY DECOUPLED from UI.
    It exposes state as plain data and accepts intents as method calls.
    Intents that don't fit the current phase are ignored and return False.

    Usage:
        game = Game(create_ring_level(5))
        game.spawn(0)
        while game.phase == SessionPhase.PLAYING:
            events = game.update(dt)
            # UI reads game.get_snapshot() and renders
    """

    def __init__(self, grid: Optional[Grid] = None, settings: Optional[Settings] = None):
        self.settings = settings if settings is not None else get_settings()

        if grid is None:
            grid = create_flask_level(self.settings.grid_size, seed=self.settings.level_seed)

        # Replaced wholesale, never patched, when a level starts or the editor opens
        self.state = SimulationState(
            grid=grid.copy(),
            inventory=Inventory(self.settings.lane_count),
        )
        self.last_solve: Optional[SolveResult] = None
        self._level_grid = grid.copy()

        # Event queue for UI notifications
        self._events: List[GameEvent] = []

        # Cached grid snapshot, dropped whenever a cell changes
        self._grid_snapshot: Optional[Tuple[Tuple[CellView, ...], ...]] = None

        self.start_level(grid)

    # =========================================================================
    # LEVEL COMMANDS
    # =========================================================================

    def start_level(self, grid: Grid) -> SolveResult:
        """
        Solve `grid`, deal the manifest into the lanes, reset score and play.

        The caller's grid is copied, never mutated. A stuck solve still loads
        the partial manifest; the result says so.
        """
        level = grid.copy()
        result = solve(level, max_iterations=self.settings.solver_max_iterations)
        inventory = Inventory.from_manifest(result.manifest, self.settings.lane_count)

        old_phase = self.state.phase
        new_phase = SessionPhase.PLAYING if level.has_active() else SessionPhase.WON

        self._level_grid = grid.copy()
        self.last_solve = result
        self.state = SimulationState(grid=level, inventory=inventory, phase=new_phase)
        self._grid_snapshot = None

        self._events.append(LevelStartedEvent(len(result.manifest), result.solved))
        if old_phase != new_phase:
            self._events.append(PhaseChangedEvent(old_phase, new_phase))

        logger.info(
            f"Level started: {level.active_count()} cells, {len(result.manifest)} shooters "
            f"across {inventory.lane_count} lanes, solved={result.solved}"
        )
        if result.stuck:
            logger.warning(f"Level is not fully solvable; {result.remaining} cells will remain")
        return result

    def play_custom_level(self) -> SolveResult:
        """Solve and play whatever grid is currently loaded (usually an edited one)."""
        return self.start_level(self.state.grid)

    def restart_level(self) -> SolveResult:
        """Replay the grid the current level was started from."""
        return self.start_level(self._level_grid)

    # =========================================================================
    # PLAY COMMANDS
    # =========================================================================

    def can_spawn(self, lane_index: int) -> bool:
        if self.state.phase != SessionPhase.PLAYING:
            return False
        if len(self.state.shooters) >= self.settings.max_active_shooters:
            return False
        return self.state.inventory.head(lane_index) is not None

    def spawn(self, lane_index: int) -> bool:
        """
        Deploy the head of a lane onto the rail.
        Returns True if spawned, False if refused (wrong phase, cap reached, empty lane).
        """
        if not self.can_spawn(lane_index):
            logger.debug(f"Spawn from lane {lane_index} refused")
            return False

        shooter = self.state.inventory.pop(lane_index)
        shooter.activate(self.settings.spawn_position)
        self.state.shooters.append(shooter)
        self.state.idle_distance = 0.0
        self._events.append(ShooterSpawnedEvent(shooter.id, lane_index, shooter.color))
        logger.debug(f"Spawned {shooter.color.name} shooter {shooter.id} ({shooter.ammo} ammo) from lane {lane_index}")
        return True

    def spawn_next(self) -> bool:
        """Deploy whichever lane head comes first in the solver's manifest."""
        lane_index = self.state.inventory.next_in_order()
        if lane_index is None:
            return False
        return self.spawn(lane_index)

    # =========================================================================
    # EDITOR COMMANDS
    # =========================================================================

    def enter_editor(self) -> bool:
        """
        Pause play and open the grid for editing.
        Shooters on the rail and in the lanes are discarded; the grid is kept.
        """
        if self.state.phase == SessionPhase.EDITING:
            return False

        old_phase = self.state.phase
        self.state = SimulationState(
            grid=self.state.grid,
            inventory=Inventory(self.settings.lane_count),
            score=self.state.score,
            phase=SessionPhase.EDITING,
        )
        self._events.append(PhaseChangedEvent(old_phase, SessionPhase.EDITING))
        logger.info("Entered editor")
        return True

    def exit_editor(self) -> bool:
        """Leave the editor and play the edited grid."""
        if self.state.phase != SessionPhase.EDITING:
            return False
        logger.info("Leaving editor")
        self.play_custom_level()
        return True

    def paint(self, row: int, col: int, color: ColorID, brush_size: int = 1) -> bool:
        """
        Paint a brush_size x brush_size square whose top-left cell is (row, col).
        Cells outside the grid are skipped. Painting NONE erases.
        Returns True if any cell was painted.
        """
        if self.state.phase != SessionPhase.EDITING:
            return False
        if brush_size < 1:
            raise ValueError(f"Brush size must be at least 1, got {brush_size}")

        painted = False
        for r in range(row, row + brush_size):
            for c in range(col, col + brush_size):
                painted = self.state.grid.paint(r, c, color) or painted

        if painted:
            self._grid_snapshot = None
        return painted

    def clear(self) -> bool:
        """Replace the grid with an empty one (editor only)."""
        if self.state.phase != SessionPhase.EDITING:
            return False
        self.state = replace(self.state, grid=Grid(self.state.grid.size))
        self._grid_snapshot = None
        return True

    # =========================================================================
    # UPDATE LOOP
    # =========================================================================

    def update(self, dt: float) -> List[GameEvent]:
        """
        Update game state by dt seconds.
        Returns list of events that occurred since the last update.
        """
        if self.state.phase == SessionPhase.PLAYING:
            self._update_playing(dt)
        # EDITING, WON and LOST phases don't update

        events = self._events
        self._events = []
        return events

    def _update_playing(self, dt: float) -> None:
        result = step(
            self.state, dt,
            speed=self.settings.rail_speed,
            points_per_hit=self.settings.points_per_hit,
        )

        for hit in result.hits:
            self._events.append(CellClearedEvent(hit.shooter_id, hit.row, hit.col, hit.color))
        for shooter_id in result.retired:
            self._events.append(ShooterRetiredEvent(shooter_id))
        if result.grid_changed:
            self._grid_snapshot = None

        if result.won:
            self._events.append(PhaseChangedEvent(SessionPhase.PLAYING, SessionPhase.WON))
            logger.info(f"Level cleared with score {self.state.score}")
        elif self._is_lost():
            self.state.phase = SessionPhase.LOST
            self._events.append(PhaseChangedEvent(SessionPhase.PLAYING, SessionPhase.LOST))
            logger.info(f"Level lost with {self.state.grid.active_count()} cells remaining")

    def _is_lost(self) -> bool:
        """
        Cells remain and nothing can ever clear them.

        That is the case when no further shooter can be deployed (lanes empty
        or the rail full) and either the rail is empty or every shooter on it
        has gone a full lap without the grid changing. A grid that stays the
        same for a lap shows each shooter the same targets on every later lap.
        """
        state = self.state
        if state.phase != SessionPhase.PLAYING or not state.grid.has_active():
            return False
        can_deploy = (
            not state.inventory.is_empty()
            and len(state.shooters) < self.settings.max_active_shooters
        )
        if can_deploy:
            return False
        return not state.shooters or state.idle_distance >= state.perimeter

    # =========================================================================
    # STATE QUERIES (for UI to read)
    # =========================================================================

    @property
    def phase(self) -> SessionPhase:
        return self.state.phase

    @property
    def score(self) -> int:
        return self.state.score

    @property
    def grid(self) -> Grid:
        return self.state.grid

    def get_snapshot(self) -> Snapshot:
        """Read-only view of the session for rendering."""
        if self._grid_snapshot is None:
            self._grid_snapshot = self.state.grid.snapshot()
        return Snapshot(
            grid=self._grid_snapshot,
            shooters=tuple(s.view() for s in self.state.shooters),
            lanes=self.state.inventory.snapshot(),
            score=self.state.score,
            phase=self.state.phase,
            solved=self.last_solve.solved if self.last_solve is not None else True,
        )

    # =========================================================================
    # CONVENIENCE METHODS FOR TESTING
    # =========================================================================

    def simulate(self, seconds: float, dt: float = 0.1, autoplay: bool = False) -> List[GameEvent]:
        """
        Simulate the game for a number of seconds.
        With autoplay, the next manifest shooter is deployed whenever the rail
        is empty or has gone a full lap without clearing anything.
        Returns all events that occurred.
        """
        all_events = []
        elapsed = 0.0
        while elapsed < seconds and self.state.phase == SessionPhase.PLAYING:
            stalled = self.state.idle_distance >= self.state.perimeter
            if autoplay and (not self.state.shooters or stalled):
                self.spawn_next()
            events = self.update(dt)
            all_events.extend(events)
            elapsed += dt
        return all_events
