"""
Flow Statistics
===============

Descriptive statistics over a set of flow samples.

Conventions:
    - median: sorted[n // 2] (upper-middle element for even n, not the
      average of the two central elements)
    - variance: population variance (divides by n)
    - percentiles: nearest rank, sorted[floor(n * p)]
    - scalars round to 2 decimals, percentiles to integers (ties up)
"""

import logging
import math
from typing import Any, Optional, Sequence

import numpy as np

from occupancy_analytics.models.flow import FlowStats, Percentiles
from occupancy_analytics.models.input import parse_flow_samples
from occupancy_analytics.numeric import round_half_up, round_to_int


logger = logging.getLogger(__name__)


def _nearest_rank(sorted_values: np.ndarray, p: float) -> float:
    index = min(int(math.floor(len(sorted_values) * p)), len(sorted_values) - 1)
    return float(sorted_values[index])


def calculate_flow_statistics(flow_data: Sequence[Any]) -> Optional[FlowStats]:
    """
    Compute descriptive statistics for flow samples.
    
    Args:
        flow_data: Samples as numbers or mappings with ``people``/``value``
        
    Returns:
        FlowStats, or None for an empty sample set
        
    Raises:
        InputValidationError: On non-numeric samples
    """
    samples = parse_flow_samples(flow_data)
    if not samples:
        logger.debug("No flow samples, skipping flow statistics")
        return None
    
    values = np.array([s.count for s in samples], dtype=float)
    sorted_values = np.sort(values)
    n = len(values)
    
    mean = float(np.mean(values))
    variance = float(np.mean((values - mean) ** 2))
    minimum = float(sorted_values[0])
    maximum = float(sorted_values[-1])
    
    percentiles = Percentiles(
        p25=round_to_int(_nearest_rank(sorted_values, 0.25)),
        p75=round_to_int(_nearest_rank(sorted_values, 0.75)),
        p90=round_to_int(_nearest_rank(sorted_values, 0.90)),
        p95=round_to_int(_nearest_rank(sorted_values, 0.95)),
    )
    
    return FlowStats(
        mean=round_half_up(mean, 2),
        median=round_half_up(float(sorted_values[n // 2]), 2),
        min=round_half_up(minimum, 2),
        max=round_half_up(maximum, 2),
        range=round_half_up(maximum - minimum, 2),
        variance=round_half_up(variance, 2),
        standard_deviation=round_half_up(math.sqrt(variance), 2),
        percentiles=percentiles,
    )
