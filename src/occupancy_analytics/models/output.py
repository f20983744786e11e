"""
Analytics Report
================

This module defines the complete output contract of one analysis cycle.

Output Contract:
    {
        "generated_at": 1770500938284,
        "predictions": [
            {"timestamp": 1770508800000, "predicted": 412,
             "confidence": 0.83, "trend": "rising"}
        ],
        "seasonal_profile": {
            "hourly_averages": {"9": 31.5, "17": 58.0},
            "daily_averages": {"0": 44.2},
            "weekly_averages": {"1": 40.1},
            "peak_hours": [{"hour": 17, "average": 58}],
            "peak_days": [{"day": "Sunday", "day_index": 0, "average": 44}]
        },
        "density": {
            "total_people": 120, "total_capacity": 450, "overall_density": 27,
            "areas": [...], "alerts": [...]
        },
        "flow_stats": {"mean": 21.4, "median": 19, ..., "percentiles": {...}},
        "insights": [
            {"type": "trend", "title": "Visitor Trend", "message": "...",
             "priority": "high", "icon": "trending-up"}
        ],
        "quality": {"score": 90, "quality": "Excellent", "issues": []}
    }

Design Rules:
    - Any section may be null when its input was insufficient
    - `predictions` and `insights` are always lists (possibly empty)
    - All outputs are deterministic for a given snapshot and `now`
"""

from dataclasses import dataclass
from typing import Optional, Tuple

from occupancy_analytics.models.density import DensityMetrics
from occupancy_analytics.models.flow import FlowStats
from occupancy_analytics.models.forecast import Prediction
from occupancy_analytics.models.insight import Insight
from occupancy_analytics.models.quality import QualityReport
from occupancy_analytics.models.seasonal import SeasonalProfile


@dataclass(frozen=True, slots=True)
class AnalyticsReport:
    """
    Complete output of one analysis cycle.

    Attributes:
        generated_at: Epoch milliseconds when the report was produced
        predictions: Forecast points (empty if history was too short)
        seasonal_profile: Calendar patterns, or None
        density: Area occupancy metrics, or None
        flow_stats: Flow statistics, or None
        insights: Generated findings, in rule order
        quality: Data quality report
    """

    generated_at: int
    predictions: Tuple[Prediction, ...]
    seasonal_profile: Optional[SeasonalProfile]
    density: Optional[DensityMetrics]
    flow_stats: Optional[FlowStats]
    insights: Tuple[Insight, ...]
    quality: QualityReport

    def to_dict(self) -> dict:
        """Export as a JSON-compatible dictionary."""
        return {
            "generated_at": self.generated_at,
            "predictions": [p.to_dict() for p in self.predictions],
            "seasonal_profile": (
                self.seasonal_profile.to_dict() if self.seasonal_profile else None
            ),
            "density": self.density.to_dict() if self.density else None,
            "flow_stats": self.flow_stats.to_dict() if self.flow_stats else None,
            "insights": [i.to_dict() for i in self.insights],
            "quality": self.quality.to_dict(),
        }
