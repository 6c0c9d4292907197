"""
Renderer - Reads gameplay snapshots and draws them with pygame.
This is a THIN ADAPTER - no game logic here.
"""
import math
from typing import Optional

import pygame

from pixel_flow.gameplay.colors import ColorID, PLAYABLE_COLORS
from pixel_flow.gameplay.game import Game, Snapshot
from pixel_flow.gameplay.grid import Side
from pixel_flow.gameplay.rail import map_position, perimeter_length
from pixel_flow.gameplay.shooters import ShooterView
from pixel_flow.gameplay.simulation import SessionPhase
from pixel_flow.ui.palette import fill_color, border_color, text_color


# Visual constants (pixels)
CELL_SIZE = 36
CELL_GAP = 2
RAIL_OFFSET = 30         # distance from grid edge to rail line
SHOOTER_RADIUS = 15
MARGIN = 70              # space around the rail
HUD_HEIGHT = 48
LANE_AREA_HEIGHT = 120
LANE_SLOT_SIZE = 44

# Colors
COLOR_BACKGROUND = (15, 23, 42)
COLOR_RAIL = (71, 85, 105)
COLOR_HUD = (203, 213, 225)
COLOR_SCORE = (250, 204, 21)
COLOR_WON = (100, 255, 100)
COLOR_LOST = (255, 100, 100)
COLOR_EDITING = (125, 211, 252)
COLOR_CURSOR = (255, 255, 255)
COLOR_EMPTY_SLOT = (51, 65, 85)
COLOR_AMMO_RING = (226, 232, 240)

PHASE_LABELS = {
    SessionPhase.PLAYING: "PLAYING",
    SessionPhase.EDITING: "EDITOR",
    SessionPhase.WON: "STAGE CLEAR!",
    SessionPhase.LOST: "NO MOVES LEFT",
}

PHASE_COLORS = {
    SessionPhase.PLAYING: COLOR_HUD,
    SessionPhase.EDITING: COLOR_EDITING,
    SessionPhase.WON: COLOR_WON,
    SessionPhase.LOST: COLOR_LOST,
}

# Outward push of a shooter off the rail line, per side
SIDE_OFFSETS = {
    Side.TOP: (0, -1),
    Side.RIGHT: (1, 0),
    Side.BOTTOM: (0, 1),
    Side.LEFT: (-1, 0),
}


def screen_size(grid_size: int) -> tuple:
    """Window (width, height) for a grid of the given size."""
    field = grid_size * CELL_SIZE + 2 * (RAIL_OFFSET + MARGIN)
    return field, HUD_HEIGHT + field + LANE_AREA_HEIGHT


class Renderer:
    """
    Renders game state to a pygame surface.

    This class reads from Game but never modifies it.
    """

    def __init__(self, game: Game):
        self.game = game
        self.screen: Optional[pygame.Surface] = None
        self.font: Optional[pygame.font.Font] = None
        self.small_font: Optional[pygame.font.Font] = None

        # Editor state (for painting UI)
        self.cursor_row = 0
        self.cursor_col = 0
        self.selected_color = PLAYABLE_COLORS[0]
        self.brush_size = 1

    def init_display(self, title: str = "Pixel Flow") -> pygame.Surface:
        """Open the window. pygame.init() must have been called."""
        self.screen = pygame.display.set_mode(screen_size(self.game.grid.size))
        pygame.display.set_caption(title)
        self.font = pygame.font.Font(None, 32)
        self.small_font = pygame.font.Font(None, 20)
        return self.screen

    @property
    def grid_origin(self) -> tuple:
        return MARGIN + RAIL_OFFSET, HUD_HEIGHT + MARGIN + RAIL_OFFSET

    def render(self):
        """Render entire game state."""
        snapshot = self.game.get_snapshot()
        self.screen.fill(COLOR_BACKGROUND)
        self.render_grid(snapshot)
        self.render_rail(snapshot)
        self.render_lanes(snapshot)
        self.render_hud(snapshot)
        if snapshot.phase == SessionPhase.EDITING:
            self.render_cursor()
        pygame.display.flip()

    def render_grid(self, snapshot: Snapshot):
        """Render the pixel grid."""
        ox, oy = self.grid_origin
        for row in snapshot.grid:
            for cell in row:
                rect = pygame.Rect(
                    ox + cell.col * CELL_SIZE + CELL_GAP // 2,
                    oy + cell.row * CELL_SIZE + CELL_GAP // 2,
                    CELL_SIZE - CELL_GAP,
                    CELL_SIZE - CELL_GAP,
                )
                color = cell.color if cell.active else ColorID.NONE
                pygame.draw.rect(self.screen, fill_color(color), rect, border_radius=4)

    def render_rail(self, snapshot: Snapshot):
        """Render the rail loop and every active shooter on it."""
        size = len(snapshot.grid)
        ox, oy = self.grid_origin
        span = size * CELL_SIZE
        rail_rect = pygame.Rect(ox - RAIL_OFFSET, oy - RAIL_OFFSET, span + 2 * RAIL_OFFSET, span + 2 * RAIL_OFFSET)
        pygame.draw.rect(self.screen, COLOR_RAIL, rail_rect, width=2, border_radius=12)

        perimeter = perimeter_length(size, size)
        for shooter in snapshot.shooters:
            rail = map_position(shooter.rail_position, perimeter, size, size)
            dx, dy = SIDE_OFFSETS[rail.side]
            cx = ox + rail.x * CELL_SIZE + dx * RAIL_OFFSET
            cy = oy + rail.y * CELL_SIZE + dy * RAIL_OFFSET
            self._draw_token(int(cx), int(cy), shooter)

    def render_lanes(self, snapshot: Snapshot):
        """Render the inventory lanes; the head of each lane is on top."""
        top = self.screen.get_height() - LANE_AREA_HEIGHT + 10
        lane_width = self.screen.get_width() // max(len(snapshot.lanes), 1)

        for i, lane in enumerate(snapshot.lanes):
            x = i * lane_width + lane_width // 2
            label = self.small_font.render(f"[{i + 1}] x{len(lane)}", True, COLOR_HUD)
            self.screen.blit(label, label.get_rect(center=(x, top)))

            center_y = top + 20 + LANE_SLOT_SIZE // 2
            if not lane:
                rect = pygame.Rect(0, 0, LANE_SLOT_SIZE, LANE_SLOT_SIZE)
                rect.center = (x, center_y)
                pygame.draw.rect(self.screen, COLOR_EMPTY_SLOT, rect, width=2, border_radius=8)
                continue

            head = lane[0]
            self._draw_token(x, center_y, head, radius=LANE_SLOT_SIZE // 2)
            # Peek at the next shooter in line
            if len(lane) > 1:
                nxt = lane[1]
                pygame.draw.circle(self.screen, fill_color(nxt.color), (x, center_y + LANE_SLOT_SIZE // 2 + 14), 7)

    def render_hud(self, snapshot: Snapshot):
        """Render score, phase and solver status."""
        phase_label = self.font.render(PHASE_LABELS[snapshot.phase], True, PHASE_COLORS[snapshot.phase])
        self.screen.blit(phase_label, (16, 12))

        score_label = self.font.render(f"{snapshot.score:05d}", True, COLOR_SCORE)
        self.screen.blit(score_label, score_label.get_rect(topright=(self.screen.get_width() - 16, 12)))

        if snapshot.phase == SessionPhase.EDITING:
            info = f"brush {self.brush_size}  color {self.selected_color.name}  [Enter] play"
        elif not snapshot.solved:
            info = "solver stuck: this grid cannot be fully cleared"
        elif snapshot.phase in (SessionPhase.WON, SessionPhase.LOST):
            info = "[R] restart  [E] editor"
        else:
            info = "[1-4] deploy  [E] editor  [R] restart"
        info_label = self.small_font.render(info, True, COLOR_HUD)
        self.screen.blit(info_label, info_label.get_rect(midtop=(self.screen.get_width() // 2, 18)))

    def render_cursor(self):
        """Outline the area the brush will cover."""
        ox, oy = self.grid_origin
        size = self.game.grid.size
        rows = min(self.brush_size, size - self.cursor_row)
        cols = min(self.brush_size, size - self.cursor_col)
        rect = pygame.Rect(
            ox + self.cursor_col * CELL_SIZE,
            oy + self.cursor_row * CELL_SIZE,
            cols * CELL_SIZE,
            rows * CELL_SIZE,
        )
        pygame.draw.rect(self.screen, fill_color(self.selected_color), rect, width=3)
        pygame.draw.rect(self.screen, COLOR_CURSOR, rect, width=1)

    def _draw_token(self, x: int, y: int, shooter: ShooterView, radius: int = SHOOTER_RADIUS):
        """A shooter disc with its ammo count, ringed by the share of ammo left."""
        color = shooter.color
        pygame.draw.circle(self.screen, fill_color(color), (x, y), radius)
        pygame.draw.circle(self.screen, border_color(color), (x, y), radius, width=2)

        # Ammo ring starts at 12 o'clock and shrinks as shots are spent
        if shooter.ammo_ratio > 0:
            ring = pygame.Rect(0, 0, 2 * radius + 8, 2 * radius + 8)
            ring.center = (x, y)
            start = math.pi / 2
            pygame.draw.arc(self.screen, COLOR_AMMO_RING, ring, start, start + 2 * math.pi * shooter.ammo_ratio, 3)

        label = self.small_font.render(str(shooter.ammo), True, text_color(color))
        self.screen.blit(label, label.get_rect(center=(x, y)))

    # =========================================================================
    # EDITOR UI STATE
    # =========================================================================

    def move_cursor(self, d_row: int, d_col: int):
        """Move the paint cursor."""
        size = self.game.grid.size
        self.cursor_row = max(0, min(size - 1, self.cursor_row + d_row))
        self.cursor_col = max(0, min(size - 1, self.cursor_col + d_col))

    def cycle_color(self, step: int = 1):
        """Select the next (or previous) paint color."""
        idx = PLAYABLE_COLORS.index(self.selected_color)
        self.selected_color = PLAYABLE_COLORS[(idx + step) % len(PLAYABLE_COLORS)]

    def change_brush(self, delta: int):
        self.brush_size = max(1, min(self.game.grid.size, self.brush_size + delta))
