"""
HTTP API Tests
==============
"""

from concurrent.futures import ThreadPoolExecutor

import pytest
from fastapi.testclient import TestClient

from occupancy_analytics.main import app


@pytest.fixture
def client():
    with TestClient(app) as test_client:
        yield test_client


class TestEndpoints:
    """Tests for the FastAPI surface."""
    
    def test_root(self, client):
        response = client.get("/")
        
        assert response.status_code == 200
        assert response.json()["service"] == "OccupancyAnalytics"
    
    def test_health(self, client):
        response = client.get("/health")
        
        assert response.status_code == 200
        assert response.json()["status"] == "healthy"
    
    def test_analyze(self, client, sample_snapshot):
        response = client.post("/analyze", json=sample_snapshot)
        
        assert response.status_code == 200
        body = response.json()
        assert len(body["predictions"]) == 3
        assert body["density"]["alerts"][0]["area"] == "Centro"
        assert len(body["insights"]) == 4
    
    def test_analyze_rejects_malformed(self, client):
        response = client.post(
            "/analyze",
            json={"areas": [{"area_name": "Centro", "people_count": -3}]},
        )
        assert response.status_code == 422
    
    def test_analyze_rejects_out_of_range_timestamp(self, client):
        response = client.post(
            "/analyze",
            json={"hourly": [{"timestamp": 10**20, "value": 1}] * 14},
        )
        assert response.status_code == 422
    
    def test_reports_served_under_concurrency(self, client, sample_snapshot):
        before = client.get("/health").json()["reports_served"]
        
        with ThreadPoolExecutor(max_workers=8) as pool:
            statuses = list(pool.map(
                lambda _: client.post("/analyze", json=sample_snapshot).status_code,
                range(16),
            ))
        
        assert statuses == [200] * 16
        assert client.get("/health").json()["reports_served"] == before + 16
