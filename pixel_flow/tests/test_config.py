"""
Tests for settings loading.
"""
import pytest
from pydantic import ValidationError

from pixel_flow.config import Settings


class TestSettings:
    """Tests for Settings."""

    def test_reference_defaults(self, monkeypatch):
        """Defaults match the reference configuration."""
        monkeypatch.delenv("PIXEL_FLOW_GRID_SIZE", raising=False)
        settings = Settings(_env_file=None)
        assert settings.grid_size == 11
        assert settings.rail_speed == 6.0
        assert settings.lane_count == 4
        assert settings.max_active_shooters == 4
        assert settings.points_per_hit == 10
        assert settings.level_seed is None

    def test_env_override(self, monkeypatch):
        """PIXEL_FLOW_* variables override defaults."""
        monkeypatch.setenv("PIXEL_FLOW_GRID_SIZE", "7")
        monkeypatch.setenv("PIXEL_FLOW_RAIL_SPEED", "3.5")
        settings = Settings(_env_file=None)
        assert settings.grid_size == 7
        assert settings.rail_speed == 3.5

    def test_rejects_bad_values(self):
        """Out-of-range values fail validation."""
        with pytest.raises(ValidationError):
            Settings(grid_size=0)
        with pytest.raises(ValidationError):
            Settings(rail_speed=0)
        with pytest.raises(ValidationError):
            Settings(lane_count=0)
