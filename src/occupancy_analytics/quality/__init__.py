"""
Quality Module
==============

Data-quality scoring of input snapshots.
"""

from occupancy_analytics.quality.scorer import calculate_data_quality

__all__ = ["calculate_data_quality"]
