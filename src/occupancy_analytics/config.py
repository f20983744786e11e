"""
OccupancyAnalytics Configuration
================================

This module handles configuration loading for the analytics engine.

Configuration Sources (in order of precedence):
    1. Environment variables (highest priority)
    2. config.yaml file
    3. Default values (lowest priority)

Environment Variable Mapping:
    OCCUPANCY_CONFIG_PATH      -> path of the YAML file to load
    OCCUPANCY_PERIODS_AHEAD    -> forecast.periods_ahead
    OCCUPANCY_TIMEZONE         -> seasonal.timezone
    OCCUPANCY_DEFAULT_CAPACITY -> density.default_capacity
    OCCUPANCY_PORT             -> server.port
    OCCUPANCY_LOG_LEVEL        -> logging.level
    PORT                       -> server.port (Cloud Run)

Example:
    from occupancy_analytics.config import settings

    print(settings.service.name)
    print(settings.density.capacities["Centro"])
    print(settings.quality.stale_minutes)
"""

import os
import math
import logging
from pathlib import Path
from typing import Dict, Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

import yaml
from pydantic import BaseModel, Field, field_validator

from occupancy_analytics.density.capacities import DEFAULT_AREA_CAPACITIES, DEFAULT_CAPACITY
from occupancy_analytics.exceptions import ConfigurationError


logger = logging.getLogger(__name__)


# =============================================================================
# Configuration Models
# =============================================================================

class ServiceConfig(BaseModel):
    """Service identification configuration."""

    name: str = Field(default="occupancy-analytics", description="Service name")
    version: str = Field(default="v0.1.0", description="Service version")


class ForecastConfig(BaseModel):
    """Trend forecasting configuration."""

    periods_ahead: int = Field(
        default=7,
        ge=1,
        description="Number of future points to forecast",
    )
    min_points: int = Field(
        default=3,
        ge=2,
        description="Minimum history length before forecasting",
    )
    default_interval_ms: int = Field(
        default=86_400_000,
        gt=0,
        description="Sampling interval used when it cannot be derived (1 day)",
    )
    max_confidence: float = Field(
        default=0.95,
        gt=0,
        le=1.0,
        description="Upper bound on forecast confidence",
    )


class SeasonalConfig(BaseModel):
    """Seasonal pattern detection configuration."""

    min_points: int = Field(
        default=14,
        ge=1,
        description="Minimum series length for pattern detection",
    )
    top_n: int = Field(default=3, ge=1, description="Length of peak lists")
    timezone: str = Field(
        default="UTC",
        description="IANA timezone used to derive calendar buckets",
    )

    @field_validator("timezone")
    @classmethod
    def _known_timezone(cls, value: str) -> str:
        try:
            ZoneInfo(value)
        except (ZoneInfoNotFoundError, ValueError) as e:
            raise ValueError(f"unknown timezone: {value!r}") from e
        return value


class DensityConfig(BaseModel):
    """Area capacity configuration."""

    default_capacity: float = Field(
        default=DEFAULT_CAPACITY,
        gt=0,
        description="Capacity assumed for areas missing from the table",
    )
    capacities: Dict[str, float] = Field(
        default_factory=lambda: dict(DEFAULT_AREA_CAPACITIES),
        description="Maximum occupancy per area name",
    )

    @field_validator("capacities")
    @classmethod
    def _positive_capacities(cls, value: Dict[str, float]) -> Dict[str, float]:
        for name, capacity in value.items():
            if not math.isfinite(capacity) or capacity <= 0:
                raise ValueError(f"capacity for {name!r} must be positive and finite")
        return value


class QualityConfig(BaseModel):
    """Data freshness thresholds (minutes)."""

    stale_minutes: float = Field(default=60, gt=0, description="Stale data threshold")
    aging_minutes: float = Field(default=30, gt=0, description="Aging data threshold")


class InsightConfig(BaseModel):
    """Insight rule thresholds (percent)."""

    high_confidence_pct: float = Field(
        default=70,
        ge=0,
        le=100,
        description="Forecast confidence above which a trend insight is high priority",
    )
    variability_pct: float = Field(
        default=50,
        ge=0,
        description="Coefficient of variation above which flow is flagged",
    )


class ServerConfig(BaseModel):
    """Server configuration."""

    host: str = Field(default="0.0.0.0", description="Bind host")
    port: int = Field(default=8002, ge=1, le=65535, description="Bind port")


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = Field(default="INFO", description="Log level")
    format: str = Field(default="json", description="Log format: json or text")


class Settings(BaseModel):
    """
    Main settings class for OccupancyAnalytics.

    Loads configuration from YAML file and environment variables.
    Environment variables take precedence over file values.
    """

    service: ServiceConfig = Field(default_factory=ServiceConfig)
    forecast: ForecastConfig = Field(default_factory=ForecastConfig)
    seasonal: SeasonalConfig = Field(default_factory=SeasonalConfig)
    density: DensityConfig = Field(default_factory=DensityConfig)
    quality: QualityConfig = Field(default_factory=QualityConfig)
    insights: InsightConfig = Field(default_factory=InsightConfig)
    server: ServerConfig = Field(default_factory=ServerConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


# =============================================================================
# Configuration Loading
# =============================================================================

def load_config(config_path: Optional[str] = None) -> Settings:
    """
    Load configuration from YAML file and environment variables.

    Priority (highest to lowest):
        1. Environment variables
        2. YAML config file
        3. Default values

    Args:
        config_path: Path to config.yaml. If None, searches common locations.

    Returns:
        Settings: Loaded configuration

    Raises:
        ConfigurationError: If the file or the merged values are invalid
    """
    if config_path is None:
        config_path = os.environ.get("OCCUPANCY_CONFIG_PATH")

    # Find config file
    if config_path is None:
        search_paths = [
            Path("config.yaml"),
            Path("config.yml"),
            Path(__file__).parent.parent.parent / "config.yaml",
        ]
        for path in search_paths:
            if path.exists():
                config_path = str(path)
                break

    # Load from YAML if exists
    config_data = {}
    if config_path and Path(config_path).exists():
        logger.info(f"Loading config from: {config_path}")
        with open(config_path, "r") as f:
            try:
                config_data = yaml.safe_load(f) or {}
            except yaml.YAMLError as e:
                raise ConfigurationError(f"Invalid YAML in {config_path}: {e}") from e
    else:
        logger.warning("No config file found, using defaults and environment variables")

    # Apply environment variable overrides
    _apply_env_overrides(config_data)

    try:
        return Settings.model_validate(config_data)
    except ValueError as e:
        raise ConfigurationError(f"Invalid configuration: {e}") from e


def _apply_env_overrides(config_data: dict) -> None:
    """Apply environment variable overrides to config data."""

    # Forecast settings
    if env_periods := os.environ.get("OCCUPANCY_PERIODS_AHEAD"):
        config_data.setdefault("forecast", {})["periods_ahead"] = int(env_periods)

    # Seasonal settings
    if env_tz := os.environ.get("OCCUPANCY_TIMEZONE"):
        config_data.setdefault("seasonal", {})["timezone"] = env_tz

    # Density settings
    if env_capacity := os.environ.get("OCCUPANCY_DEFAULT_CAPACITY"):
        config_data.setdefault("density", {})["default_capacity"] = float(env_capacity)

    # Server settings (Cloud Run uses PORT env var)
    if env_port := os.environ.get("PORT"):
        config_data.setdefault("server", {})["port"] = int(env_port)
    elif env_port := os.environ.get("OCCUPANCY_PORT"):
        config_data.setdefault("server", {})["port"] = int(env_port)

    # Logging settings
    if env_log := os.environ.get("OCCUPANCY_LOG_LEVEL"):
        config_data.setdefault("logging", {})["level"] = env_log


def setup_logging(settings: Settings) -> None:
    """Configure logging based on settings."""
    log_level = getattr(logging, settings.logging.level.upper(), logging.INFO)

    if settings.logging.format == "json":
        log_format = '{"time": "%(asctime)s", "level": "%(levelname)s", "module": "%(name)s", "message": "%(message)s"}'
    else:
        log_format = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    logging.basicConfig(
        level=log_level,
        format=log_format,
        datefmt="%Y-%m-%dT%H:%M:%S",
    )


# =============================================================================
# Global Settings Instance
# =============================================================================

# Global settings instance - loaded on import
settings = load_config()
setup_logging(settings)
