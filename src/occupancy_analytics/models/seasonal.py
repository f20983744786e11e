"""
Seasonal Pattern Models
=======================

Calendar-bucket averages and ranked peaks.
"""

from dataclasses import dataclass, field
from typing import Dict, Tuple


DAY_NAMES: Tuple[str, ...] = (
    "Sunday",
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
)


@dataclass(frozen=True, slots=True)
class PeakHour:
    """An hour of day (0-23) and its rounded average."""
    
    hour: int
    average: int
    
    def to_dict(self) -> dict:
        return {"hour": self.hour, "average": self.average}


@dataclass(frozen=True, slots=True)
class PeakDay:
    """A day of week (0 = Sunday) and its rounded average."""
    
    day: str
    day_index: int
    average: int
    
    def to_dict(self) -> dict:
        return {"day": self.day, "day_index": self.day_index, "average": self.average}


@dataclass(frozen=True, slots=True)
class SeasonalProfile:
    """
    Recurring patterns of a series.
    
    Attributes:
        hourly_averages: Hour of day (0-23) -> mean value
        daily_averages: Day of week (0 = Sunday) -> mean value
        weekly_averages: Week of month (1-5) -> mean value
        peak_hours: Busiest hours, descending by average
        peak_days: Busiest days, descending by average
    """
    
    hourly_averages: Dict[int, float] = field(default_factory=dict)
    daily_averages: Dict[int, float] = field(default_factory=dict)
    weekly_averages: Dict[int, float] = field(default_factory=dict)
    peak_hours: Tuple[PeakHour, ...] = ()
    peak_days: Tuple[PeakDay, ...] = ()
    
    def to_dict(self) -> dict:
        """Export as dictionary for logging/serialization."""
        return {
            "hourly_averages": {str(k): v for k, v in self.hourly_averages.items()},
            "daily_averages": {str(k): v for k, v in self.daily_averages.items()},
            "weekly_averages": {str(k): v for k, v in self.weekly_averages.items()},
            "peak_hours": [p.to_dict() for p in self.peak_hours],
            "peak_days": [p.to_dict() for p in self.peak_days],
        }
