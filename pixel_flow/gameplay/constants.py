"""
Game constants - all magic numbers in one place.
NO UI DEPENDENCIES.
"""

# =============================================================================
# PIXEL GRID
# =============================================================================
GRID_SIZE = 11                # cells per side (square grid)

# =============================================================================
# RAIL
# =============================================================================
RAIL_SPEED = 6.0              # cells per second
SPAWN_POSITION = 0.0          # rail position new shooters enter at (top-left corner)

# =============================================================================
# SHOOTERS & INVENTORY
# =============================================================================
LANE_COUNT = 4                # parallel inventory lanes
MAX_ACTIVE_SHOOTERS = 4       # spawns refused once this many are on the rail

# =============================================================================
# SCORING
# =============================================================================
POINTS_PER_HIT = 10

# =============================================================================
# SOLVER
# =============================================================================
SOLVER_MAX_ITERATIONS = 200   # peeling passes before the grid is reported stuck
