"""
Trend Regression
================

Ordinary least-squares trend fitting and smoothing over numeric series.

Formulas:
    slope     = (n*Σxy - Σx*Σy) / (n*Σx² - (Σx)²)
    intercept = (Σy - slope*Σx) / n
    r2        = max(0, 1 - SS_res / SS_tot)

Design Note:
    r2 is floored at 0 (a fit worse than the mean reports 0, never a
    negative value) but is not capped above. A constant series has
    SS_tot = 0 and reports r2 = 0.
"""

import logging
from typing import List, Sequence, Tuple

import numpy as np

from occupancy_analytics.exceptions import InputValidationError
from occupancy_analytics.models.forecast import TrendFit


logger = logging.getLogger(__name__)


_ZERO_FIT = TrendFit(slope=0.0, intercept=0.0, r2=0.0)


def _as_array(values: Sequence, what: str) -> np.ndarray:
    try:
        array = np.asarray(values, dtype=float)
    except (TypeError, ValueError) as e:
        raise InputValidationError(f"{what} must be numeric: {e}") from e
    if not np.all(np.isfinite(array)):
        raise InputValidationError(f"{what} must be finite")
    return array


def fit_linear_trend(points: Sequence[Tuple[float, float]]) -> TrendFit:
    """
    Fit a straight line through ``(x, y)`` pairs by least squares.
    
    Args:
        points: Sequence of (x, y) pairs; x values should be distinct
        
    Returns:
        TrendFit with slope, intercept and r2. Fewer than 2 points yield
        the zero fit. A degenerate x spread yields slope 0 and the mean of
        y as intercept.
        
    Raises:
        InputValidationError: If the points are not numeric pairs
    """
    if points is None or len(points) < 2:
        return _ZERO_FIT
    
    data = _as_array(points, "trend points")
    if data.ndim != 2 or data.shape[1] != 2:
        raise InputValidationError("trend points must be (x, y) pairs")
    
    x = data[:, 0]
    y = data[:, 1]
    n = len(data)
    
    sum_x = float(np.sum(x))
    sum_y = float(np.sum(y))
    sum_xy = float(np.sum(x * y))
    sum_xx = float(np.sum(x * x))
    
    denominator = n * sum_xx - sum_x * sum_x
    if abs(denominator) <= 1e-12 * max(1.0, n * sum_xx):
        logger.debug(f"Degenerate x spread over {n} points, slope forced to 0")
        slope = 0.0
    else:
        slope = (n * sum_xy - sum_x * sum_y) / denominator
    intercept = (sum_y - slope * sum_x) / n
    
    mean_y = sum_y / n
    ss_res = float(np.sum((y - (slope * x + intercept)) ** 2))
    ss_tot = float(np.sum((y - mean_y) ** 2))
    
    if ss_tot == 0:
        r2 = 0.0
    else:
        r2 = max(0.0, 1.0 - ss_res / ss_tot)
    
    return TrendFit(slope=slope, intercept=intercept, r2=r2)


def moving_average(values: Sequence[float], period: int = 7) -> List[float]:
    """
    Simple moving average over a trailing window.
    
    Args:
        values: Numeric series
        period: Window length (>= 1)
        
    Returns:
        One mean per full window, starting at index ``period - 1``. A
        series shorter than the window is returned unchanged.
    """
    if period < 1:
        raise InputValidationError("period must be at least 1")
    if values is None:
        return []
    if len(values) < period:
        return list(values)
    
    array = _as_array(values, "moving average input")
    window = np.ones(period) / period
    return [float(v) for v in np.convolve(array, window, mode="valid")]
