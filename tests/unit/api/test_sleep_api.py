"""
API tests for the sleep, analytics and config endpoints.

Each test gets a fresh in-memory tracker through a dependency override.
"""

import pytest
from fastapi.testclient import TestClient

from app.api.dependencies import get_tracker
from app.main import app
from app.sleep.tracker import SleepTracker


@pytest.fixture
def client():
    tracker = SleepTracker()
    app.dependency_overrides[get_tracker] = lambda: tracker
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


def _post(client, date: str, start: str = "23:00", end: str = "07:00", **extra):
    return client.post(
        "/api/v1/sleep/entries",
        json={"date": date, "start_time": start, "end_time": end, **extra},
    )


# ======================================================================
# Sleep entries
# ======================================================================


class TestSleepEntries:

    def test_log_sleep_created(self, client):
        response = _post(client, "2024-06-08", "22:30", "06:45")
        assert response.status_code == 201
        body = response.json()
        assert body["duration"] == 8.25
        assert body["is_weekend"] is True
        assert body["id"]

    def test_malformed_time_is_422(self, client):
        response = _post(client, "2024-06-03", "late", "07:00")
        assert response.status_code == 422
        assert "late" in response.json()["detail"]
        assert client.get("/api/v1/sleep/entries").json() == []

    def test_list_with_range(self, client):
        for date in ("2024-06-05", "2024-06-03", "2024-06-10"):
            _post(client, date)
        response = client.get(
            "/api/v1/sleep/entries", params={"start": "2024-06-03", "end": "2024-06-09"},
        )
        assert response.status_code == 200
        assert [e["date"] for e in response.json()] == ["2024-06-03", "2024-06-05"]

    def test_inverted_range_is_400(self, client):
        response = client.get(
            "/api/v1/sleep/entries", params={"start": "2024-06-09", "end": "2024-06-03"},
        )
        assert response.status_code == 400


# ======================================================================
# Analytics
# ======================================================================


class TestAnalytics:

    def test_empty_insights(self, client):
        body = client.get("/api/v1/analytics/insights").json()
        assert body["recommendations"] == []
        assert body["sleep_quality_score"] == 0
        assert body["risk_level"] == "low"

    def test_insights_and_analysis(self, client):
        _post(client, "2024-06-03", "00:00", "06:00")
        _post(client, "2024-06-04", "00:00", "06:00")
        _post(client, "2024-06-08", "22:00", "08:00")

        analysis = client.get("/api/v1/analytics/analysis").json()
        assert analysis["metrics"]["sleep_debt"] == 4.0
        assert analysis["metrics"]["weekend_recovery"] == 10.0
        assert analysis["consistency_score"] == 80

        insights = client.get("/api/v1/analytics/insights").json()
        assert insights["sleep_quality_score"] == 80
        assert insights["risk_level"] == "moderate"

    def test_weekly_report(self, client):
        _post(client, "2024-06-03", "23:00", "07:00")
        _post(client, "2024-06-09", "22:00", "08:00")
        response = client.get("/api/v1/analytics/weekly-report", params={"week_of": "2024-06-06"})
        assert response.status_code == 200
        body = response.json()
        assert body["period"] == {"start_date": "2024-06-03", "end_date": "2024-06-09"}
        assert body["key_metrics"]["average_sleep_duration"] == 9.0
        assert body["key_metrics"]["catchup_sleep_hours"] == 10.0
        assert len(body["trends"]) == 3


# ======================================================================
# Config
# ======================================================================


class TestConfig:

    def test_get_defaults(self, client):
        body = client.get("/api/v1/config").json()
        assert body == {
            "max_weekend_catchup_hours": 3.0,
            "min_sleep_duration": 6.0,
            "target_sleep_duration": 8.0,
        }

    def test_patch_merges(self, client):
        response = client.patch("/api/v1/config", json={"target_sleep_duration": 7.0})
        assert response.status_code == 200
        assert response.json()["target_sleep_duration"] == 7.0
        assert response.json()["min_sleep_duration"] == 6.0

    def test_patch_rejects_invalid(self, client):
        response = client.patch("/api/v1/config", json={"min_sleep_duration": -1})
        assert response.status_code == 422


# ======================================================================
# Service info
# ======================================================================


def test_health(client):
    assert client.get("/health").json()["status"] == "healthy"
