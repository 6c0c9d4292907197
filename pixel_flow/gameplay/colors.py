"""
Color tags shared by cells and shooters.
NO UI DEPENDENCIES.
"""
from enum import Enum
from typing import Dict, Tuple


class ColorID(Enum):
    """All color tags. NONE marks an empty cell and is never a shooter color."""
    NONE = 'NONE'
    RED = 'RED'
    GREEN = 'GREEN'
    BLUE = 'BLUE'
    YELLOW = 'YELLOW'
    WHITE = 'WHITE'
    PURPLE = 'PURPLE'
    ORANGE = 'ORANGE'

    @property
    def is_playable(self) -> bool:
        return self is not ColorID.NONE


# Canonical order for palettes and editor cycling
PLAYABLE_COLORS: Tuple[ColorID, ...] = tuple(c for c in ColorID if c.is_playable)

# One-letter codes used by text level layouts
COLOR_CODES: Dict[str, ColorID] = {
    '.': ColorID.NONE,
    'R': ColorID.RED,
    'G': ColorID.GREEN,
    'B': ColorID.BLUE,
    'Y': ColorID.YELLOW,
    'W': ColorID.WHITE,
    'P': ColorID.PURPLE,
    'O': ColorID.ORANGE,
}

CODE_FOR_COLOR: Dict[ColorID, str] = {color: code for code, color in COLOR_CODES.items()}
