"""
Data Quality Tests
==================
"""

from datetime import timedelta

import pytest

from occupancy_analytics.exceptions import InputValidationError
from occupancy_analytics.models.quality import QualityTier
from occupancy_analytics.quality import calculate_data_quality


def _ms(moment):
    return int(moment.timestamp() * 1000)


class TestDataQuality:
    """Tests for completeness, freshness and consistency scoring."""
    
    def test_empty_and_stale(self, fixed_now):
        report = calculate_data_quality(
            {
                "sensors": [],
                "areas": [],
                "lastUpdate": _ms(fixed_now - timedelta(hours=2)),
            },
            now=fixed_now,
        )
        
        assert report.score == 40
        assert report.quality is QualityTier.REGULAR
        assert len(report.issues) == 3
    
    def test_healthy_snapshot(self, fixed_now):
        report = calculate_data_quality(
            {
                "sensors": [{"id": "s1"}],
                "areas": [{"area_name": "Centro", "people_count": 5}],
                "lastUpdate": _ms(fixed_now - timedelta(minutes=5)),
            },
            now=fixed_now,
        )
        
        assert report.score == 100
        assert report.quality is QualityTier.EXCELLENT
        assert report.issues == ()
    
    def test_aging_data(self, fixed_now):
        report = calculate_data_quality(
            {
                "sensors": [{"id": "s1"}],
                "areas": [{"area_name": "Centro", "people_count": 5}],
                "last_update": fixed_now - timedelta(minutes=45),
            },
            now=fixed_now,
        )
        
        assert report.score == 90
        assert report.issues == ("Data partially out of date (>30min)",)
    
    def test_iso_timestamp_at_exactly_one_hour(self, fixed_now):
        report = calculate_data_quality(
            {
                "sensors": [{"id": "s1"}],
                "areas": [{"area_name": "Centro", "people_count": 5}],
                "lastUpdate": "2024-01-07T11:00:00Z",
            },
            now=fixed_now,
        )
        assert report.score == 90
    
    def test_all_areas_empty(self, fixed_now):
        report = calculate_data_quality(
            {
                "sensors": [{"id": "s1"}],
                "areas": [
                    {"area_name": "Centro", "people_count": 0},
                    {"area_name": "Coreto", "people_count": 0},
                ],
            },
            now=fixed_now,
        )
        
        assert report.score == 85
        assert report.issues == ("No people detected in any area",)
    
    def test_missing_fields(self):
        report = calculate_data_quality({})
        
        assert report.score == 65
        assert report.quality is QualityTier.GOOD
        assert report.issues == ("Sensor data missing", "Area data missing")
    
    def test_no_data(self):
        report = calculate_data_quality(None)
        
        assert report.score == 0
        assert report.quality is QualityTier.CRITICAL
        assert report.issues == ("No data available",)
    
    def test_worst_case(self, fixed_now):
        report = calculate_data_quality(
            {
                "areas": [{"area_name": "Centro", "people_count": 0}],
                "lastUpdate": _ms(fixed_now - timedelta(days=1)),
            },
            now=fixed_now,
        )
        
        assert report.score == 40
        assert report.to_dict()["quality"] == "Regular"
    
    @pytest.mark.parametrize(
        "score, tier",
        [(80, QualityTier.EXCELLENT), (79, QualityTier.GOOD), (60, QualityTier.GOOD),
         (40, QualityTier.REGULAR), (39, QualityTier.CRITICAL), (0, QualityTier.CRITICAL)],
    )
    def test_tiers(self, score, tier):
        assert QualityTier.from_score(score) is tier
    
    def test_malformed_area(self):
        with pytest.raises(InputValidationError):
            calculate_data_quality({"areas": [{"area_name": "Centro"}]})
    
    def test_out_of_range_last_update(self):
        with pytest.raises(InputValidationError):
            calculate_data_quality({"lastUpdate": 10**23})
