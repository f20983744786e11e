"""
Density Models
==============

Data models for per-area occupancy scoring.

These models are produced by the density scorer and consumed by the
insight generator and the presentation layer.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Tuple


class DensityLevel(str, Enum):
    """
    Five-tier occupancy level.
    
    Thresholds (occupancy rate):
        VERY_LOW: < 20%
        LOW:      < 40%
        MEDIUM:   < 70%
        HIGH:     < 90%
        CRITICAL: >= 90%
    """
    
    VERY_LOW = "Very Low"
    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"
    CRITICAL = "Critical"


class AreaStatus(str, Enum):
    """
    Three-tier operational status.
    
    Thresholds (occupancy rate):
        NORMAL:   <= 60%
        HIGH:     <= 80%
        CRITICAL: > 80%
    """
    
    NORMAL = "normal"
    HIGH = "high"
    CRITICAL = "critical"


class AlertSeverity(str, Enum):
    """Severity of a high-density alert."""
    
    HIGH = "high"
    CRITICAL = "critical"


@dataclass(frozen=True, slots=True)
class AreaDensity:
    """
    Occupancy of a single area.
    
    Attributes:
        name: Area name
        people: Observed people count
        capacity: Capacity used for scoring
        occupancy_rate: people / capacity, as a rounded percentage
        density_level: Five-tier level
        status: Three-tier status
    """
    
    name: str
    people: int
    capacity: float
    occupancy_rate: int
    density_level: DensityLevel
    status: AreaStatus
    
    def __post_init__(self) -> None:
        """Validate invariants."""
        if self.people < 0:
            raise ValueError("people must be non-negative")
        if self.capacity <= 0:
            raise ValueError("capacity must be positive")
    
    def to_dict(self) -> dict:
        """Export as dictionary for logging/serialization."""
        return {
            "name": self.name,
            "people": self.people,
            "capacity": self.capacity,
            "occupancy_rate": self.occupancy_rate,
            "density_level": self.density_level.value,
            "status": self.status.value,
        }


@dataclass(frozen=True, slots=True)
class DensityAlert:
    """
    Alert raised for an area above 80% occupancy.
    
    Attributes:
        area: Area name
        message: Human-readable description
        occupancy: Occupancy rate as a rounded percentage
        severity: HIGH for (80%, 90%], CRITICAL above 90%
        type: Alert category tag
    """
    
    area: str
    message: str
    occupancy: int
    severity: AlertSeverity
    type: str = "high_density"
    
    def to_dict(self) -> dict:
        """Export as dictionary for logging/serialization."""
        return {
            "type": self.type,
            "area": self.area,
            "message": self.message,
            "occupancy": self.occupancy,
            "severity": self.severity.value,
        }


@dataclass(frozen=True, slots=True)
class DensityMetrics:
    """
    Occupancy across all observed areas.
    
    Attributes:
        total_people: Sum of people over all areas
        total_capacity: Sum of capacities over all areas
        overall_density: total_people / total_capacity, as a rounded percentage
        areas: Per-area metrics, in input order
        alerts: High-density alerts, in input order
    """
    
    total_people: int
    total_capacity: float
    overall_density: int
    areas: Tuple[AreaDensity, ...]
    alerts: Tuple[DensityAlert, ...]
    
    @property
    def critical_alerts(self) -> Tuple[DensityAlert, ...]:
        """Alerts with CRITICAL severity."""
        return tuple(a for a in self.alerts if a.severity is AlertSeverity.CRITICAL)
    
    def to_dict(self) -> dict:
        """Export as dictionary for logging/serialization."""
        return {
            "total_people": self.total_people,
            "total_capacity": self.total_capacity,
            "overall_density": self.overall_density,
            "areas": [a.to_dict() for a in self.areas],
            "alerts": [a.to_dict() for a in self.alerts],
        }
