"""
Flow Module
===========

Descriptive statistics for people-flow samples.
"""

from occupancy_analytics.flow.statistics import calculate_flow_statistics

__all__ = ["calculate_flow_statistics"]
