"""
Color table - how each gameplay color tag is drawn.
"""
from typing import Tuple

from pixel_flow.gameplay.colors import ColorID

RGB = Tuple[int, int, int]

# Fill colors for cells and shooter bodies
COLOR_STYLES = {
    ColorID.NONE: (40, 44, 58),
    ColorID.RED: (239, 68, 68),
    ColorID.GREEN: (34, 197, 94),
    ColorID.BLUE: (59, 130, 246),
    ColorID.YELLOW: (250, 204, 21),
    ColorID.WHITE: (241, 245, 249),
    ColorID.PURPLE: (168, 85, 247),
    ColorID.ORANGE: (249, 115, 22),
}


def fill_color(color: ColorID) -> RGB:
    return COLOR_STYLES[color]


def border_color(color: ColorID) -> RGB:
    """Darker rim drawn around a filled shape."""
    r, g, b = COLOR_STYLES[color]
    return (r * 3 // 5, g * 3 // 5, b * 3 // 5)


def text_color(color: ColorID) -> RGB:
    """Dark text on light fills, light text on dark ones."""
    r, g, b = COLOR_STYLES[color]
    luminance = 0.299 * r + 0.587 * g + 0.114 * b
    return (15, 23, 42) if luminance > 150 else (241, 245, 249)
