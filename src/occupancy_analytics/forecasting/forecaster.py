"""
Trend Forecaster
================

Extrapolates a linear trend over a historical series into future points.

The series is re-indexed to 0..k-1 before fitting, so the forecast assumes
evenly spaced samples. The sampling interval is taken from the first two
timestamps.

    predicted_i  = max(0, slope * (k - 1 + i) + intercept)
    timestamp_i  = last_timestamp + interval * i
    confidence   = min(max_confidence, r2)
"""

import logging
from typing import Any, Sequence, Tuple

from occupancy_analytics.exceptions import InputValidationError
from occupancy_analytics.forecasting.regression import fit_linear_trend
from occupancy_analytics.models.forecast import Prediction, TrendLabel
from occupancy_analytics.models.input import parse_series
from occupancy_analytics.numeric import round_to_int


logger = logging.getLogger(__name__)

DEFAULT_INTERVAL_MS = 86_400_000


def predict_future_trends(
    historical: Sequence[Any],
    periods_ahead: int = 7,
    min_points: int = 3,
    default_interval_ms: int = DEFAULT_INTERVAL_MS,
    max_confidence: float = 0.95,
) -> Tuple[Prediction, ...]:
    """
    Forecast ``periods_ahead`` future points from a historical series.
    
    Args:
        historical: Time series points ({timestamp, value} or [timestamp, value])
        periods_ahead: Number of future points (>= 1)
        min_points: Minimum history length; shorter series yield no forecast
        default_interval_ms: Interval used when it cannot be derived
        max_confidence: Upper bound on confidence
        
    Returns:
        Ordered tuple of Prediction (empty when history is insufficient)
        
    Raises:
        InputValidationError: On malformed points or periods_ahead < 1
    """
    if periods_ahead < 1:
        raise InputValidationError("periods_ahead must be at least 1")
    
    series = parse_series(historical)
    if len(series) < min_points:
        logger.debug(
            f"Insufficient history for forecast ({len(series)} points, "
            f"need {min_points})"
        )
        return ()
    
    # Re-index to sequential positions
    trend = fit_linear_trend([(i, point.value) for i, point in enumerate(series)])
    label = TrendLabel.from_slope(trend.slope)
    confidence = min(max_confidence, trend.r2)
    
    last_index = len(series) - 1
    last_timestamp = series[-1].timestamp
    if len(series) > 1:
        interval = series[1].timestamp - series[0].timestamp
    else:
        interval = default_interval_ms
    
    predictions = []
    for i in range(1, periods_ahead + 1):
        value = max(0.0, trend.slope * (last_index + i) + trend.intercept)
        predictions.append(
            Prediction(
                timestamp=last_timestamp + interval * i,
                predicted=round_to_int(value),
                confidence=confidence,
                trend=label,
            )
        )
    
    logger.debug(
        f"Forecast {periods_ahead} points: {trend!r}, trend={label.value}"
    )
    return tuple(predictions)
