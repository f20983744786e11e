"""
Insight Generator
=================

Rule-based synthesis of short narrative findings.

Rules are independent and evaluated in a fixed order; a rule whose input
is missing is skipped silently:
    1. Trend:       forecast available
    2. Peak hour:   seasonal profile with at least one peak hour
    3. Density:     at least one critical density alert
    4. Variability: flow coefficient of variation above threshold

Output order is rule order, not priority order.
"""

import logging
from dataclasses import dataclass
from typing import List, Optional, Sequence

from occupancy_analytics.models.density import DensityMetrics
from occupancy_analytics.models.flow import FlowStats
from occupancy_analytics.models.forecast import Prediction
from occupancy_analytics.models.insight import Insight, InsightType, Priority
from occupancy_analytics.models.seasonal import SeasonalProfile
from occupancy_analytics.numeric import round_to_int


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class InsightThresholds:
    """
    Rule thresholds, in percent.
    
    Loaded from configuration file.
    """
    
    high_confidence_pct: float = 70.0
    variability_pct: float = 50.0


def _trend_insight(
    predictions: Sequence[Prediction],
    thresholds: InsightThresholds,
) -> Optional[Insight]:
    if not predictions:
        return None
    first = predictions[0]
    confidence = round_to_int(first.confidence * 100)
    return Insight(
        type=InsightType.TREND,
        title="Visitor Trend",
        message=(
            f"The trend for the coming days is {first.trend.value} "
            f"with {confidence}% confidence."
        ),
        priority=(
            Priority.HIGH
            if confidence > thresholds.high_confidence_pct
            else Priority.MEDIUM
        ),
        icon="trending-up",
    )


def _peak_hour_insight(profile: Optional[SeasonalProfile]) -> Optional[Insight]:
    if profile is None or not profile.peak_hours:
        return None
    peak = profile.peak_hours[0]
    return Insight(
        type=InsightType.PATTERN,
        title="Peak Hour",
        message=(
            f"The busiest time is {peak.hour}:00 "
            f"with an average of {peak.average} people."
        ),
        priority=Priority.MEDIUM,
        icon="clock",
    )


def _density_insight(metrics: Optional[DensityMetrics]) -> Optional[Insight]:
    if metrics is None:
        return None
    critical = metrics.critical_alerts
    if not critical:
        return None
    return Insight(
        type=InsightType.ALERT,
        title="Critical Density",
        message=f"{len(critical)} area(s) with critical density detected.",
        priority=Priority.HIGH,
        icon="alert-triangle",
    )


def _variability_insight(
    stats: Optional[FlowStats],
    thresholds: InsightThresholds,
) -> Optional[Insight]:
    # Undefined for a non-positive mean
    if stats is None or stats.mean <= 0:
        return None
    variation = stats.coefficient_of_variation * 100
    if variation <= thresholds.variability_pct:
        return None
    return Insight(
        type=InsightType.VARIABILITY,
        title="High Variability",
        message=f"People flow shows high variability ({round_to_int(variation)}%).",
        priority=Priority.MEDIUM,
        icon="activity",
    )


def generate_insights(
    predictions: Optional[Sequence[Prediction]] = None,
    seasonal_profile: Optional[SeasonalProfile] = None,
    density_metrics: Optional[DensityMetrics] = None,
    flow_stats: Optional[FlowStats] = None,
    thresholds: Optional[InsightThresholds] = None,
) -> List[Insight]:
    """
    Generate insights from the outputs of the other components.
    
    Args:
        predictions: Forecast points
        seasonal_profile: Seasonal patterns
        density_metrics: Area occupancy metrics
        flow_stats: Flow statistics
        thresholds: Rule thresholds (defaults if None)
        
    Returns:
        Insights in rule order; empty if no rule fired
    """
    thresholds = thresholds or InsightThresholds()
    
    candidates = [
        _trend_insight(predictions or (), thresholds),
        _peak_hour_insight(seasonal_profile),
        _density_insight(density_metrics),
        _variability_insight(flow_stats, thresholds),
    ]
    insights = [insight for insight in candidates if insight is not None]
    
    logger.debug(f"Generated {len(insights)} insight(s)")
    return insights
