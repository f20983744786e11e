"""
Patterns Module
===============

Recurring calendar patterns in occupancy series.
"""

from occupancy_analytics.patterns.seasonal import detect_seasonal_patterns

__all__ = ["detect_seasonal_patterns"]
