"""
Seasonal Pattern Tests
======================
"""

from datetime import datetime, timezone

import pytest

from occupancy_analytics.exceptions import InputValidationError
from occupancy_analytics.patterns import detect_seasonal_patterns


HOUR_MS = 3_600_000
DAY_MS = 86_400_000

# Sunday, 7 January 2024, 00:00 UTC
SUNDAY = int(datetime(2024, 1, 7, tzinfo=timezone.utc).timestamp() * 1000)


class TestSeasonalPatterns:
    """Tests for calendar bucketing and peak ranking."""
    
    def test_too_short_returns_none(self, hourly_series):
        assert detect_seasonal_patterns(hourly_series[:13]) is None
        assert detect_seasonal_patterns([]) is None
    
    def test_hourly_peaks(self, hourly_series):
        profile = detect_seasonal_patterns(hourly_series)
        
        assert profile is not None
        assert [p.hour for p in profile.peak_hours] == [13, 12, 11]
        assert [p.average for p in profile.peak_hours] == [13, 12, 11]
        assert profile.hourly_averages[0] == 0
        assert len(profile.hourly_averages) == 14
    
    def test_single_day_bucket(self, hourly_series):
        profile = detect_seasonal_patterns(hourly_series)
        
        assert profile.daily_averages == {0: pytest.approx(6.5)}
        assert len(profile.peak_days) == 1
        assert profile.peak_days[0].day == "Sunday"
        assert profile.peak_days[0].day_index == 0
        # 6.5 rounds up
        assert profile.peak_days[0].average == 7
        # 7 January falls in the first week of the month
        assert profile.weekly_averages == {1: pytest.approx(6.5)}
    
    def test_peaks_sorted_descending(self):
        data = [
            {"timestamp": SUNDAY + d * DAY_MS + h * HOUR_MS, "value": (d + 1) * (h + 1)}
            for d in range(4)
            for h in range(5)
        ]
        profile = detect_seasonal_patterns(data)
        
        hour_averages = [p.average for p in profile.peak_hours]
        day_averages = [p.average for p in profile.peak_days]
        assert hour_averages == sorted(hour_averages, reverse=True)
        assert day_averages == sorted(day_averages, reverse=True)
        assert len(profile.peak_hours) == 3
        assert len(profile.peak_days) == 3
        assert [p.day for p in profile.peak_days] == ["Wednesday", "Tuesday", "Monday"]
    
    def test_ties_resolve_to_lower_bucket(self):
        data = [
            {"timestamp": SUNDAY + h * HOUR_MS, "value": 10}
            for h in (5, 3, 8, 1, 5, 3, 8, 1, 5, 3, 8, 1, 5, 3)
        ]
        profile = detect_seasonal_patterns(data)
        
        assert [p.hour for p in profile.peak_hours] == [1, 3, 5]
    
    def test_timezone_shifts_buckets(self):
        # 02:00 UTC Sunday is 23:00 Saturday in Sao Paulo (UTC-3)
        data = [{"timestamp": SUNDAY + 2 * HOUR_MS, "value": 4}] * 14
        profile = detect_seasonal_patterns(data, timezone="America/Sao_Paulo")
        
        assert list(profile.hourly_averages) == [23]
        assert profile.peak_days[0].day == "Saturday"
        assert profile.peak_days[0].day_index == 6
    
    def test_top_n(self, hourly_series):
        profile = detect_seasonal_patterns(hourly_series, top_n=5)
        assert len(profile.peak_hours) == 5
    
    def test_malformed_point(self, hourly_series):
        bad = hourly_series + [{"timestamp": SUNDAY}]
        with pytest.raises(InputValidationError):
            detect_seasonal_patterns(bad)
    
    def test_out_of_range_timestamp(self, hourly_series):
        bad = hourly_series + [{"timestamp": 10**23, "value": 1}]
        with pytest.raises(InputValidationError):
            detect_seasonal_patterns(bad)
    
    def test_unknown_timezone(self, hourly_series):
        with pytest.raises(InputValidationError):
            detect_seasonal_patterns(hourly_series, timezone="Mars/Olympus")
