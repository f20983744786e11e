"""
Test Configuration
==================

Pytest fixtures and test configuration for OccupancyAnalytics.
"""

from datetime import datetime, timedelta, timezone

import pytest


DAY_MS = 86_400_000
HOUR_MS = 3_600_000

# Sunday, 7 January 2024, 00:00 UTC
SUNDAY_MIDNIGHT = datetime(2024, 1, 7, tzinfo=timezone.utc)


def epoch_ms(moment: datetime) -> int:
    return int(moment.timestamp() * 1000)


@pytest.fixture
def fixed_now():
    """Reference time for freshness checks."""
    return datetime(2024, 1, 7, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
def linear_daily_series():
    """Five daily points on y = 2x + 1."""
    start = epoch_ms(SUNDAY_MIDNIGHT)
    return [[start + i * DAY_MS, 2 * i + 1] for i in range(5)]


@pytest.fixture
def hourly_series():
    """Fourteen hourly points on a Sunday, value equal to the hour."""
    start = epoch_ms(SUNDAY_MIDNIGHT)
    return [{"timestamp": start + h * HOUR_MS, "value": h} for h in range(14)]


@pytest.fixture
def area_readings():
    """Areas at 95%, 85% and 70% occupancy."""
    return [
        {"area_name": "Centro", "people_count": 95, "capacity": 100},
        {"area_name": "Coreto", "people_count": 85, "capacity": 100},
        {"area_name": "Caminhos", "people_count": 70, "capacity": 100},
    ]


@pytest.fixture
def sample_snapshot(fixed_now, linear_daily_series, hourly_series):
    """Provide a complete AnalyticsSnapshot payload for testing."""
    return {
        "hourly": hourly_series,
        "daily": linear_daily_series,
        "flow": [{"people": 1}, {"value": 1}, 10],
        "areas": [
            {"area_name": "Centro", "people_count": 80},
            {"name": "Coreto", "people": 10},
        ],
        "sensors": [{"id": "s1"}, {"id": "s2"}],
        "lastUpdate": epoch_ms(fixed_now - timedelta(minutes=5)),
        "periods_ahead": 3,
    }
