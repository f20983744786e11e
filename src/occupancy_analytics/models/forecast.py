"""
Forecast Models
===============

Data models for trend estimation and forecasting.
"""

from dataclasses import dataclass
from enum import Enum


class TrendLabel(str, Enum):
    """
    Direction of a fitted trend, from the sign of its slope.
    
    Attributes:
        RISING: Positive slope
        FALLING: Negative slope
        STABLE: Zero slope
    """
    
    RISING = "rising"
    FALLING = "falling"
    STABLE = "stable"
    
    @classmethod
    def from_slope(cls, slope: float) -> "TrendLabel":
        """Classify a regression slope."""
        if slope > 0:
            return cls.RISING
        if slope < 0:
            return cls.FALLING
        return cls.STABLE


@dataclass(frozen=True, slots=True)
class TrendFit:
    """
    Ordinary least-squares fit ``y = slope * x + intercept``.
    
    Attributes:
        slope: Change in y per unit of x
        intercept: Value of y at x = 0
        r2: Coefficient of determination, floored at 0
    """
    
    slope: float
    intercept: float
    r2: float
    
    def __repr__(self) -> str:
        return (
            f"TrendFit(slope={self.slope:+.4f}, "
            f"intercept={self.intercept:.4f}, "
            f"r2={self.r2:.4f})"
        )
    
    def to_dict(self) -> dict:
        """Export as dictionary for logging/serialization."""
        return {
            "slope": self.slope,
            "intercept": self.intercept,
            "r2": self.r2,
        }


@dataclass(frozen=True, slots=True)
class Prediction:
    """
    One forecast point.
    
    Attributes:
        timestamp: Epoch milliseconds of the forecast point
        predicted: Forecast count, never negative
        confidence: Trust in the forecast, in [0, 0.95]
        trend: Direction of the underlying trend
    """
    
    timestamp: int
    predicted: int
    confidence: float
    trend: TrendLabel
    
    def __post_init__(self) -> None:
        """Validate invariants."""
        if self.predicted < 0:
            raise ValueError("predicted must be non-negative")
        if not 0 <= self.confidence <= 1:
            raise ValueError("confidence must be in [0, 1]")
    
    def to_dict(self) -> dict:
        """Export as dictionary for logging/serialization."""
        return {
            "timestamp": self.timestamp,
            "predicted": self.predicted,
            "confidence": round(self.confidence, 4),
            "trend": self.trend.value,
        }
