"""
Shared fixtures for gameplay tests.
"""
import pytest

from pixel_flow.config import Settings


@pytest.fixture
def settings():
    """Reference configuration, independent of the environment."""
    return Settings(
        grid_size=11,
        rail_speed=6.0,
        spawn_position=0.0,
        lane_count=4,
        max_active_shooters=4,
        points_per_hit=10,
        solver_max_iterations=200,
        level_seed=1,
        log_level="INFO",
    )
