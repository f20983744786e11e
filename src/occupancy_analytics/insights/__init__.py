"""
Insights Module
===============

Narrative findings synthesized from forecast, seasonal, density and flow
outputs.
"""

from occupancy_analytics.insights.generator import InsightThresholds, generate_insights

__all__ = ["InsightThresholds", "generate_insights"]
