"""
Configuration management for Pixel Flow.
Uses pydantic-settings for environment variable parsing.
"""

from functools import lru_cache
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from pixel_flow.gameplay.constants import (
    GRID_SIZE, RAIL_SPEED, SPAWN_POSITION, LANE_COUNT, MAX_ACTIVE_SHOOTERS,
    POINTS_PER_HIT, SOLVER_MAX_ITERATIONS,
)


class Settings(BaseSettings):
    """Game settings loaded from PIXEL_FLOW_* environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="PIXEL_FLOW_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Grid
    grid_size: int = Field(
        default=GRID_SIZE, ge=1,
        description="Cells per side of the square pixel grid"
    )

    # Rail
    rail_speed: float = Field(
        default=RAIL_SPEED, gt=0,
        description="Shooter speed along the rail in cells per second"
    )
    spawn_position: float = Field(
        default=SPAWN_POSITION, ge=0,
        description="Rail position where newly deployed shooters appear"
    )

    # Inventory
    lane_count: int = Field(
        default=LANE_COUNT, ge=1,
        description="Number of parallel inventory lanes"
    )
    max_active_shooters: int = Field(
        default=MAX_ACTIVE_SHOOTERS, ge=1,
        description="Spawns are refused once this many shooters are on the rail"
    )

    # Scoring
    points_per_hit: int = Field(default=POINTS_PER_HIT, ge=0)

    # Solver
    solver_max_iterations: int = Field(
        default=SOLVER_MAX_ITERATIONS, ge=1,
        description="Peeling passes before a grid is reported stuck"
    )

    # Levels
    level_seed: Optional[int] = Field(
        default=None,
        description="Seed for the generated level. None picks a fresh layout each run"
    )

    # Logging
    log_level: str = Field(default="INFO")


@lru_cache()
def get_settings() -> Settings:
    """
    Get cached settings instance.
    Pass explicit Settings to Game in tests instead.
    """
    return Settings()
