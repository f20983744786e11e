"""
Configuration Tests
===================
"""

import pytest

from occupancy_analytics.config import Settings, load_config
from occupancy_analytics.exceptions import ConfigurationError


@pytest.fixture
def clean_env(monkeypatch):
    """Remove environment overrides that would leak into tests."""
    for name in (
        "PORT",
        "OCCUPANCY_PORT",
        "OCCUPANCY_TIMEZONE",
        "OCCUPANCY_LOG_LEVEL",
        "OCCUPANCY_PERIODS_AHEAD",
        "OCCUPANCY_DEFAULT_CAPACITY",
    ):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


class TestConfig:
    """Tests for configuration loading."""
    
    def test_defaults(self):
        settings = Settings()
        
        assert settings.forecast.periods_ahead == 7
        assert settings.seasonal.min_points == 14
        assert settings.density.default_capacity == 50
        assert settings.density.capacities["Caminhos"] == 200
        assert settings.quality.stale_minutes == 60
    
    def test_yaml_file(self, tmp_path, clean_env):
        path = tmp_path / "config.yaml"
        path.write_text(
            "density:\n"
            "  capacities:\n"
            "    Hall: 25\n"
            "seasonal:\n"
            "  timezone: Europe/Lisbon\n"
        )
        settings = load_config(str(path))
        
        assert settings.density.capacities == {"Hall": 25}
        assert settings.seasonal.timezone == "Europe/Lisbon"
    
    def test_env_overrides(self, tmp_path, clean_env):
        path = tmp_path / "config.yaml"
        path.write_text("forecast:\n  periods_ahead: 3\n")
        clean_env.setenv("OCCUPANCY_PERIODS_AHEAD", "10")
        clean_env.setenv("OCCUPANCY_DEFAULT_CAPACITY", "75")
        clean_env.setenv("PORT", "9000")
        
        settings = load_config(str(path))
        
        assert settings.forecast.periods_ahead == 10
        assert settings.density.default_capacity == 75
        assert settings.server.port == 9000
    
    def test_invalid_timezone(self, tmp_path, clean_env):
        path = tmp_path / "config.yaml"
        path.write_text("seasonal:\n  timezone: Mars/Olympus\n")
        with pytest.raises(ConfigurationError):
            load_config(str(path))
    
    def test_invalid_capacity(self, tmp_path, clean_env):
        path = tmp_path / "config.yaml"
        path.write_text("density:\n  capacities:\n    Hall: -1\n")
        with pytest.raises(ConfigurationError):
            load_config(str(path))
    
    def test_infinite_capacity(self, tmp_path, clean_env):
        path = tmp_path / "config.yaml"
        path.write_text("density:\n  capacities:\n    Hall: .inf\n")
        with pytest.raises(ConfigurationError):
            load_config(str(path))
    
    def test_invalid_yaml(self, tmp_path, clean_env):
        path = tmp_path / "config.yaml"
        path.write_text("density: [unclosed\n")
        with pytest.raises(ConfigurationError):
            load_config(str(path))
