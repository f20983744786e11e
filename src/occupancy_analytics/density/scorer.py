"""
Density Scorer
==============

Converts per-area people counts and capacities into occupancy levels,
statuses and alerts.

    occupancy_rate = people_count / capacity

Level and status use independent thresholds:
    level:  <20% Very Low, <40% Low, <70% Medium, <90% High, >=90% Critical
    status: <=60% normal, <=80% high, >80% critical

Every area above 80% raises an alert: severity "high" up to and including
90%, "critical" above.
"""

import logging
from typing import Any, Mapping, Optional, Sequence

from occupancy_analytics.density.capacities import CapacityTable
from occupancy_analytics.models.density import (
    AlertSeverity,
    AreaDensity,
    AreaStatus,
    DensityAlert,
    DensityLevel,
    DensityMetrics,
)
from occupancy_analytics.models.input import AreaReading, parse_areas
from occupancy_analytics.numeric import round_to_int


logger = logging.getLogger(__name__)

ALERT_THRESHOLD = 0.8
CRITICAL_ALERT_THRESHOLD = 0.9


def get_density_level(occupancy_rate: float) -> DensityLevel:
    """
    Five-tier density level for an occupancy rate.
    
    Args:
        occupancy_rate: people / capacity (0-1, may exceed 1)
        
    Returns:
        DensityLevel
    """
    if occupancy_rate >= 0.9:
        return DensityLevel.CRITICAL
    if occupancy_rate >= 0.7:
        return DensityLevel.HIGH
    if occupancy_rate >= 0.4:
        return DensityLevel.MEDIUM
    if occupancy_rate >= 0.2:
        return DensityLevel.LOW
    return DensityLevel.VERY_LOW


def get_area_status(occupancy_rate: float) -> AreaStatus:
    """Three-tier status for an occupancy rate."""
    if occupancy_rate > 0.8:
        return AreaStatus.CRITICAL
    if occupancy_rate > 0.6:
        return AreaStatus.HIGH
    return AreaStatus.NORMAL


def _resolve_capacity(reading: AreaReading, table: CapacityTable) -> float:
    if reading.capacity is not None:
        return reading.capacity
    return table.capacity_for(reading.area_name)


def _alert_for(reading: AreaReading, occupancy_rate: float) -> Optional[DensityAlert]:
    if occupancy_rate <= ALERT_THRESHOLD:
        return None
    severity = (
        AlertSeverity.CRITICAL
        if occupancy_rate > CRITICAL_ALERT_THRESHOLD
        else AlertSeverity.HIGH
    )
    return DensityAlert(
        area=reading.area_name,
        message=f"High density detected in {reading.area_name}",
        occupancy=round_to_int(occupancy_rate * 100),
        severity=severity,
    )


def calculate_density_metrics(
    area_data: Sequence[Any],
    capacity_overrides: Optional[Mapping[str, float]] = None,
    capacity_table: Optional[CapacityTable] = None,
) -> Optional[DensityMetrics]:
    """
    Score occupancy for every area in a snapshot.
    
    Args:
        area_data: Per-area readings
        capacity_overrides: Caller capacities applied over the table
        capacity_table: Base capacity table (built-in defaults if None)
        
    Returns:
        DensityMetrics, or None if there are no readings
        
    Raises:
        InputValidationError: On malformed readings or non-positive capacities
    """
    readings = parse_areas(area_data)
    if not readings:
        logger.debug("No area readings, skipping density metrics")
        return None
    
    table = (capacity_table or CapacityTable()).with_overrides(capacity_overrides)
    
    total_people = 0
    total_capacity = 0.0
    areas = []
    alerts = []
    
    for reading in readings:
        capacity = _resolve_capacity(reading, table)
        occupancy_rate = reading.people_count / capacity
        
        total_people += reading.people_count
        total_capacity += capacity
        
        areas.append(
            AreaDensity(
                name=reading.area_name,
                people=reading.people_count,
                capacity=capacity,
                occupancy_rate=round_to_int(occupancy_rate * 100),
                density_level=get_density_level(occupancy_rate),
                status=get_area_status(occupancy_rate),
            )
        )
        
        alert = _alert_for(reading, occupancy_rate)
        if alert is not None:
            alerts.append(alert)
    
    metrics = DensityMetrics(
        total_people=total_people,
        total_capacity=total_capacity,
        overall_density=round_to_int(total_people / total_capacity * 100),
        areas=tuple(areas),
        alerts=tuple(alerts),
    )
    
    if alerts:
        logger.info(
            f"Density: {len(alerts)} alert(s) across {len(areas)} areas, "
            f"overall={metrics.overall_density}%"
        )
    return metrics
