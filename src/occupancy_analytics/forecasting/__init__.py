"""
Forecasting Module
==================

Linear trend estimation and forecasting over occupancy series.

This module provides:
    - Least-squares trend fitting with r2
    - Simple moving average
    - Trend extrapolation into future time points
"""

from occupancy_analytics.forecasting.regression import fit_linear_trend, moving_average
from occupancy_analytics.forecasting.forecaster import predict_future_trends

__all__ = [
    "fit_linear_trend",
    "moving_average",
    "predict_future_trends",
]
