"""
Analytics Engine
================

Composes the analytics components over one input snapshot.

The engine holds configuration only. Each call to ``analyze`` is
independent, so one instance may be shared across threads or requests.

Data flow:
    daily (or hourly) series -> predict_future_trends  -> predictions
    hourly series            -> detect_seasonal_patterns -> seasonal_profile
    areas + capacities       -> calculate_density_metrics -> density
    flow (or hourly) samples -> calculate_flow_statistics -> flow_stats
    all of the above         -> generate_insights        -> insights
    sensors/areas/lastUpdate -> calculate_data_quality   -> quality
"""

import logging
from datetime import datetime, timezone
from typing import Any, Optional

from occupancy_analytics.config import Settings
from occupancy_analytics.density import CapacityTable, calculate_density_metrics
from occupancy_analytics.flow import calculate_flow_statistics
from occupancy_analytics.forecasting import predict_future_trends
from occupancy_analytics.insights import InsightThresholds, generate_insights
from occupancy_analytics.models.input import parse_snapshot
from occupancy_analytics.models.output import AnalyticsReport
from occupancy_analytics.patterns import detect_seasonal_patterns
from occupancy_analytics.quality import calculate_data_quality


logger = logging.getLogger(__name__)


class AnalyticsEngine:
    """
    Stateless analytics service.

    Example:
        engine = AnalyticsEngine()
        report = engine.analyze({"hourly": [...], "areas": [...]})
        print(report.to_dict())
    """

    def __init__(self, config: Optional[Settings] = None) -> None:
        """
        Initialize the engine.

        Args:
            config: Settings to use; the global settings if None
        """
        if config is None:
            from occupancy_analytics.config import settings as config

        self.config = config
        self.capacity_table = CapacityTable(
            capacities=config.density.capacities,
            default_capacity=config.density.default_capacity,
        )
        self.insight_thresholds = InsightThresholds(
            high_confidence_pct=config.insights.high_confidence_pct,
            variability_pct=config.insights.variability_pct,
        )
        logger.info(
            f"AnalyticsEngine initialized: areas={len(self.capacity_table.capacities)}, "
            f"timezone={config.seasonal.timezone}"
        )

    def analyze(self, snapshot: Any, now: Optional[datetime] = None) -> AnalyticsReport:
        """
        Run every component over a snapshot.

        Args:
            snapshot: AnalyticsSnapshot or a mapping in its input format
            now: Reference time for freshness and ``generated_at``

        Returns:
            AnalyticsReport

        Raises:
            InputValidationError: If the snapshot is malformed
        """
        snapshot = parse_snapshot(snapshot)
        if now is None:
            now = datetime.now(timezone.utc)

        forecast_cfg = self.config.forecast
        predictions = predict_future_trends(
            snapshot.daily or snapshot.hourly,
            periods_ahead=snapshot.periods_ahead or forecast_cfg.periods_ahead,
            min_points=forecast_cfg.min_points,
            default_interval_ms=forecast_cfg.default_interval_ms,
            max_confidence=forecast_cfg.max_confidence,
        )

        seasonal_cfg = self.config.seasonal
        seasonal_profile = detect_seasonal_patterns(
            snapshot.hourly,
            min_points=seasonal_cfg.min_points,
            top_n=seasonal_cfg.top_n,
            timezone=seasonal_cfg.timezone,
        )

        density = calculate_density_metrics(
            snapshot.areas,
            capacity_overrides=snapshot.capacity_overrides,
            capacity_table=self.capacity_table,
        )

        flow_stats = calculate_flow_statistics(
            snapshot.flow or [point.value for point in snapshot.hourly]
        )

        insights = generate_insights(
            predictions=predictions,
            seasonal_profile=seasonal_profile,
            density_metrics=density,
            flow_stats=flow_stats,
            thresholds=self.insight_thresholds,
        )

        quality = calculate_data_quality(
            snapshot.quality_snapshot(),
            now=now,
            stale_minutes=self.config.quality.stale_minutes,
            aging_minutes=self.config.quality.aging_minutes,
        )

        report = AnalyticsReport(
            generated_at=int(now.timestamp() * 1000),
            predictions=predictions,
            seasonal_profile=seasonal_profile,
            density=density,
            flow_stats=flow_stats,
            insights=tuple(insights),
            quality=quality,
        )

        logger.info(
            f"Analysis complete: predictions={len(predictions)}, "
            f"insights={len(insights)}, quality={quality.score} ({quality.quality.value})"
        )
        return report
