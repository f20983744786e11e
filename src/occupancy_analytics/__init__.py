"""
OccupancyAnalytics
==================

Predictive and descriptive analytics for occupancy sensor networks.

This package turns time-stamped people counts into trends, forecasts,
seasonal patterns, density alerts, flow statistics, narrative insights and
a data-quality score. Every component is a pure function over an
already-materialized snapshot.

Components:
    - forecasting: Least-squares trend fitting and forecasting
    - patterns: Hourly / daily / weekly seasonal patterns
    - density: Area occupancy levels and alerts
    - flow: Descriptive flow statistics
    - insights: Rule-based narrative findings
    - quality: Data-quality scoring
    - engine: Stateless service composing all of the above

Example:
    from occupancy_analytics.engine import AnalyticsEngine

    report = AnalyticsEngine().analyze(snapshot)
    print(report.to_dict())
"""

__version__ = "0.1.0"
__author__ = "Occupancy Analytics Project"

__all__ = [
    "__version__",
]
