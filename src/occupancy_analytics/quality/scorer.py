"""
Data Quality Scorer
===================

Scores the completeness, freshness and consistency of an input snapshot.

Deductions from a starting score of 100:
    - 20: no sensors
    - 15: no areas
    - 25: last update older than 60 minutes, else
      10: last update older than 30 minutes
    - 15: areas present but every area reports zero people

The score is floored at 0 and mapped to a tier:
    Excellent >= 80, Good >= 60, Regular >= 40, else Critical
"""

import logging
from datetime import datetime, timezone
from typing import Any, List, Optional

from occupancy_analytics.models.input import parse_quality_snapshot
from occupancy_analytics.models.quality import QualityReport, QualityTier


logger = logging.getLogger(__name__)

STALE_MINUTES = 60.0
AGING_MINUTES = 30.0


def calculate_data_quality(
    data: Any,
    now: Optional[datetime] = None,
    stale_minutes: float = STALE_MINUTES,
    aging_minutes: float = AGING_MINUTES,
) -> QualityReport:
    """
    Score an input snapshot.
    
    Args:
        data: QualitySnapshot or mapping with sensors, areas, lastUpdate;
            None scores 0
        now: Reference time for freshness (defaults to current UTC time)
        stale_minutes: Age above which data is considered stale
        aging_minutes: Age above which data is considered partially stale
        
    Returns:
        QualityReport
        
    Raises:
        InputValidationError: On malformed snapshot fields
    """
    snapshot = parse_quality_snapshot(data)
    if snapshot is None:
        return QualityReport(
            score=0,
            quality=QualityTier.CRITICAL,
            issues=("No data available",),
        )
    
    score = 100
    issues: List[str] = []
    
    # Completeness
    if not snapshot.sensors:
        score -= 20
        issues.append("Sensor data missing")
    
    if not snapshot.areas:
        score -= 15
        issues.append("Area data missing")
    
    # Freshness
    if snapshot.last_update is not None:
        if now is None:
            now = datetime.now(timezone.utc)
        elif now.tzinfo is None:
            now = now.replace(tzinfo=timezone.utc)
        minutes_since_update = (now - snapshot.last_update).total_seconds() / 60
        
        if minutes_since_update > stale_minutes:
            score -= 25
            issues.append(f"Data out of date (>{stale_minutes:g}min)")
            logger.warning(f"Snapshot is {minutes_since_update:.0f} minutes old")
        elif minutes_since_update > aging_minutes:
            score -= 10
            issues.append(f"Data partially out of date (>{aging_minutes:g}min)")
    
    # Consistency
    if snapshot.areas:
        total_people = sum(area.people_count for area in snapshot.areas)
        if total_people == 0:
            score -= 15
            issues.append("No people detected in any area")
    
    score = max(0, score)
    return QualityReport(
        score=score,
        quality=QualityTier.from_score(score),
        issues=tuple(issues),
    )
