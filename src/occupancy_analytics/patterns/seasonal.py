"""
Seasonal Pattern Detection
==========================

Aggregates a time series into fixed calendar buckets and ranks the peaks.

Buckets:
    - hour of day   (0-23)
    - day of week   (0-6, Sunday = 0)
    - week of month (ceil(day_of_month / 7), 1-5)

Each dimension is averaged independently. Averages are keyed in ascending
bucket order, and peaks are ranked with a stable descending sort, so equal
averages resolve to the lower bucket key.
"""

import logging
import math
from collections import defaultdict
from datetime import datetime, tzinfo
from typing import Any, Dict, List, Optional, Sequence
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from occupancy_analytics.exceptions import InputValidationError
from occupancy_analytics.models.input import (
    TimeSeriesPoint,
    epoch_ms_to_datetime,
    parse_series,
)
from occupancy_analytics.models.seasonal import (
    DAY_NAMES,
    PeakDay,
    PeakHour,
    SeasonalProfile,
)
from occupancy_analytics.numeric import round_to_int


logger = logging.getLogger(__name__)

MIN_POINTS = 14
TOP_N = 3


def _bucket_means(buckets: Dict[int, List[float]]) -> Dict[int, float]:
    return {key: math.fsum(values) / len(values) for key, values in sorted(buckets.items())}


def _ranked(averages: Dict[int, float], top_n: int) -> List[tuple]:
    return sorted(averages.items(), key=lambda item: item[1], reverse=True)[:top_n]


def _local_time(point: TimeSeriesPoint, tz: tzinfo) -> datetime:
    return epoch_ms_to_datetime(point.timestamp).astimezone(tz)


def _zone(name: str) -> tzinfo:
    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError) as e:
        raise InputValidationError(f"Unknown timezone: {name!r}") from e


def detect_seasonal_patterns(
    data: Sequence[Any],
    min_points: int = MIN_POINTS,
    top_n: int = TOP_N,
    timezone: str = "UTC",
) -> Optional[SeasonalProfile]:
    """
    Detect hourly, daily and weekly patterns in a series.
    
    Args:
        data: Time series points
        min_points: Minimum series length; shorter series yield None
        top_n: Maximum length of the peak lists
        timezone: IANA timezone used to derive the calendar buckets
        
    Returns:
        SeasonalProfile, or None if the series is too short
        
    Raises:
        InputValidationError: On malformed points or an unknown timezone
    """
    tz = _zone(timezone)
    series = parse_series(data)
    if len(series) < min_points:
        logger.debug(
            f"Insufficient data for seasonal patterns ({len(series)} points, "
            f"need {min_points})"
        )
        return None
    
    hourly: Dict[int, List[float]] = defaultdict(list)
    daily: Dict[int, List[float]] = defaultdict(list)
    weekly: Dict[int, List[float]] = defaultdict(list)
    
    for point in series:
        moment = _local_time(point, tz)
        hourly[moment.hour].append(point.value)
        daily[moment.isoweekday() % 7].append(point.value)
        weekly[math.ceil(moment.day / 7)].append(point.value)
    
    hourly_averages = _bucket_means(hourly)
    daily_averages = _bucket_means(daily)
    weekly_averages = _bucket_means(weekly)
    
    peak_hours = tuple(
        PeakHour(hour=hour, average=round_to_int(avg))
        for hour, avg in _ranked(hourly_averages, top_n)
    )
    peak_days = tuple(
        PeakDay(day=DAY_NAMES[day], day_index=day, average=round_to_int(avg))
        for day, avg in _ranked(daily_averages, top_n)
    )
    
    return SeasonalProfile(
        hourly_averages=hourly_averages,
        daily_averages=daily_averages,
        weekly_averages=weekly_averages,
        peak_hours=peak_hours,
        peak_days=peak_days,
    )
