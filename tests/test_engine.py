"""
Analytics Engine Tests
======================

End-to-end composition of all components over one snapshot.
"""

import json

import pytest

from occupancy_analytics.config import Settings
from occupancy_analytics.engine import AnalyticsEngine
from occupancy_analytics.exceptions import InputValidationError
from occupancy_analytics.models.insight import InsightType
from occupancy_analytics.models.quality import QualityTier


@pytest.fixture
def engine():
    return AnalyticsEngine(Settings())


class TestAnalyticsEngine:
    """Tests for the stateless analytics service."""
    
    def test_full_report(self, engine, sample_snapshot, fixed_now):
        report = engine.analyze(sample_snapshot, now=fixed_now)
        
        assert len(report.predictions) == 3
        assert report.predictions[0].predicted == 11
        assert report.seasonal_profile.peak_hours[0].hour == 13
        assert report.density.overall_density == 69
        assert report.flow_stats.mean == 4
        assert report.quality.score == 100
        assert report.quality.quality is QualityTier.EXCELLENT
        assert [i.type for i in report.insights] == [
            InsightType.TREND,
            InsightType.PATTERN,
            InsightType.ALERT,
            InsightType.VARIABILITY,
        ]
        assert report.generated_at == int(fixed_now.timestamp() * 1000)
    
    def test_report_is_json_serializable(self, engine, sample_snapshot, fixed_now):
        payload = engine.analyze(sample_snapshot, now=fixed_now).to_dict()
        decoded = json.loads(json.dumps(payload))
        
        assert decoded["density"]["alerts"][0]["severity"] == "critical"
        assert decoded["seasonal_profile"]["peak_days"][0]["day"] == "Sunday"
        assert decoded["quality"]["quality"] == "Excellent"
    
    def test_empty_snapshot_degrades(self, engine, fixed_now):
        report = engine.analyze({}, now=fixed_now)
        
        assert report.predictions == ()
        assert report.seasonal_profile is None
        assert report.density is None
        assert report.flow_stats is None
        assert report.insights == ()
        assert report.quality.score == 65
    
    def test_hourly_fallbacks(self, engine, hourly_series, fixed_now):
        report = engine.analyze({"hourly": hourly_series, "periods_ahead": 2}, now=fixed_now)
        
        # Forecast and flow statistics fall back to the hourly series
        assert len(report.predictions) == 2
        assert report.flow_stats.mean == 6.5
    
    def test_capacity_overrides(self, engine, fixed_now):
        report = engine.analyze(
            {
                "areas": [{"area_name": "Centro", "people_count": 80}],
                "capacity_overrides": {"Centro": 160},
            },
            now=fixed_now,
        )
        assert report.density.areas[0].occupancy_rate == 50
        assert report.density.alerts == ()
    
    def test_configured_table(self, fixed_now):
        config = Settings.model_validate({"density": {"capacities": {"Hall": 10}}})
        report = AnalyticsEngine(config).analyze(
            {"areas": [{"area_name": "Hall", "people_count": 5}]},
            now=fixed_now,
        )
        assert report.density.areas[0].occupancy_rate == 50
    
    def test_malformed_snapshot(self, engine):
        with pytest.raises(InputValidationError):
            engine.analyze({"areas": [{"area_name": "Centro", "people_count": "lots"}]})
