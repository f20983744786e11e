"""
Data Models
===========

Models for the OccupancyAnalytics engine.

This module re-exports all data models for convenient access.

Models:
    Input (pydantic, validated at the boundary):
        - TimeSeriesPoint, AreaReading, FlowSample
        - QualitySnapshot, AnalyticsSnapshot

    Forecast:
        - TrendLabel, TrendFit, Prediction

    Seasonal:
        - PeakHour, PeakDay, SeasonalProfile

    Density:
        - DensityLevel, AreaStatus, AlertSeverity
        - AreaDensity, DensityAlert, DensityMetrics

    Flow:
        - Percentiles, FlowStats

    Insight:
        - InsightType, Priority, Insight

    Quality:
        - QualityTier, QualityReport

    Output:
        - AnalyticsReport: Complete output contract
"""

from occupancy_analytics.models.input import (
    AnalyticsSnapshot,
    AreaReading,
    FlowSample,
    QualitySnapshot,
    TimeSeriesPoint,
)
from occupancy_analytics.models.forecast import Prediction, TrendFit, TrendLabel
from occupancy_analytics.models.seasonal import DAY_NAMES, PeakDay, PeakHour, SeasonalProfile
from occupancy_analytics.models.density import (
    AlertSeverity,
    AreaDensity,
    AreaStatus,
    DensityAlert,
    DensityLevel,
    DensityMetrics,
)
from occupancy_analytics.models.flow import FlowStats, Percentiles
from occupancy_analytics.models.insight import Insight, InsightType, Priority
from occupancy_analytics.models.quality import QualityReport, QualityTier
from occupancy_analytics.models.output import AnalyticsReport

__all__ = [
    # Input
    "TimeSeriesPoint",
    "AreaReading",
    "FlowSample",
    "QualitySnapshot",
    "AnalyticsSnapshot",
    # Forecast
    "TrendLabel",
    "TrendFit",
    "Prediction",
    # Seasonal
    "DAY_NAMES",
    "PeakHour",
    "PeakDay",
    "SeasonalProfile",
    # Density
    "DensityLevel",
    "AreaStatus",
    "AlertSeverity",
    "AreaDensity",
    "DensityAlert",
    "DensityMetrics",
    # Flow
    "Percentiles",
    "FlowStats",
    # Insight
    "InsightType",
    "Priority",
    "Insight",
    # Quality
    "QualityTier",
    "QualityReport",
    # Output
    "AnalyticsReport",
]
