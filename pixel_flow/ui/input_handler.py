"""
Input Handler - Translates key presses to gameplay intents.
This is a THIN ADAPTER - no game logic here.
"""
import pygame

from pixel_flow.gameplay.colors import ColorID
from pixel_flow.gameplay.game import Game
from pixel_flow.gameplay.simulation import SessionPhase


# Key mappings for deploying from lanes
LANE_KEYS = {
    pygame.K_1: 0,
    pygame.K_2: 1,
    pygame.K_3: 2,
    pygame.K_4: 3,
}

# Cursor movement as (d_row, d_col)
CURSOR_KEYS = {
    pygame.K_UP: (-1, 0),
    pygame.K_DOWN: (1, 0),
    pygame.K_LEFT: (0, -1),
    pygame.K_RIGHT: (0, 1),
}


class InputHandler:
    """
    Handles keyboard input and translates to game intents.

    The input handler:
    - Reads key presses
    - Updates renderer state (cursor, color, brush)
    - Calls game methods to modify game state
    """

    def __init__(self, game: Game, renderer):
        self.game = game
        self.renderer = renderer

    def handle_key(self, key: int) -> bool:
        """
        Handle a single key press.
        Returns True if the game should quit.
        """
        # Quit
        if key == pygame.K_ESCAPE:
            return True

        if self.game.phase == SessionPhase.EDITING:
            self._handle_editor_key(key)
        else:
            self._handle_play_key(key)

        return False

    def _handle_play_key(self, key: int):
        if key in LANE_KEYS:
            self.game.spawn(LANE_KEYS[key])
        elif key == pygame.K_r:
            self.game.restart_level()
        elif key == pygame.K_e:
            self.game.enter_editor()

    def _handle_editor_key(self, key: int):
        if key in CURSOR_KEYS:
            self.renderer.move_cursor(*CURSOR_KEYS[key])

        # Paint / erase under the brush
        elif key == pygame.K_SPACE:
            self._paint(self.renderer.selected_color)
        elif key == pygame.K_x or key == pygame.K_DELETE:
            self._paint(ColorID.NONE)

        elif key == pygame.K_c:
            self.game.clear()
        elif key == pygame.K_TAB:
            self.renderer.cycle_color()
        elif key == pygame.K_LEFTBRACKET:
            self.renderer.change_brush(-1)
        elif key == pygame.K_RIGHTBRACKET:
            self.renderer.change_brush(1)

        # Play the edited grid
        elif key == pygame.K_RETURN or key == pygame.K_e:
            self.game.exit_editor()

    def _paint(self, color: ColorID):
        self.game.paint(
            self.renderer.cursor_row,
            self.renderer.cursor_col,
            color,
            self.renderer.brush_size,
        )
