"""
Density Module
==============

Area occupancy scoring against a capacity table.
"""

from occupancy_analytics.density.capacities import (
    DEFAULT_AREA_CAPACITIES,
    DEFAULT_CAPACITY,
    CapacityTable,
)
from occupancy_analytics.density.scorer import (
    calculate_density_metrics,
    get_area_status,
    get_density_level,
)

__all__ = [
    "DEFAULT_AREA_CAPACITIES",
    "DEFAULT_CAPACITY",
    "CapacityTable",
    "calculate_density_metrics",
    "get_area_status",
    "get_density_level",
]
