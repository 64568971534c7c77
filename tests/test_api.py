"""Tests for the FastAPI filler analysis API.

WHY: Validates that all API endpoints behave correctly: happy paths,
validation errors, and unknown report formats.

HOW: Uses the FastAPI TestClient for synchronous in-process requests and
checks status codes, bodies, and headers.

RULES:
- All tests use the FastAPI TestClient (synchronous)
- The app holds no state, so tests share one client
"""

import pytest
from fastapi.testclient import TestClient

from filler_analyzer import __version__
from filler_analyzer.server.app import app

SAMPLE = "Um, so I think, like, this is kind of great."


@pytest.fixture
def client():
    return TestClient(app)


class TestCreateAnalysis:

    def test_sample_analysis(self, client):
        resp = client.post("/analyses", json={"transcript": SAMPLE, "duration_minutes": 1.0})
        assert resp.status_code == 200
        data = resp.json()
        assert data["total_filler_words"] == 3
        assert data["fillers_per_minute"] == 3.0
        assert data["category_counts"] == {"hesitation": 1, "discourse": 1, "temporal": 1, "thinking": 0}
        assert data["specific_filler_counts"] == {"um": 1, "so": 1, "kind of": 1}
        assert data["detection_accuracy"] == 75
        assert data["distribution_analysis"] == {"beginning": 2, "middle": 0, "end": 1}
        assert len(data["patterns"]["insights"]) == 2

    def test_duration_seconds(self, client):
        resp = client.post("/analyses", json={"transcript": SAMPLE, "duration_seconds": 30})
        assert resp.json()["fillers_per_minute"] == 6.0

    def test_default_duration(self, client):
        resp = client.post("/analyses", json={"transcript": SAMPLE})
        assert resp.json()["fillers_per_minute"] == 3.0

    def test_empty_transcript(self, client):
        resp = client.post("/analyses", json={"transcript": ""})
        assert resp.status_code == 200
        assert resp.json()["detection_accuracy"] == 100

    def test_both_durations_rejected(self, client):
        resp = client.post(
            "/analyses",
            json={"transcript": SAMPLE, "duration_minutes": 1, "duration_seconds": 60},
        )
        assert resp.status_code == 422

    def test_missing_transcript(self, client):
        resp = client.post("/analyses", json={"duration_minutes": 1})
        assert resp.status_code == 422


class TestCreateReport:

    def test_json_report(self, client):
        resp = client.post("/analyses/report", json={"transcript": SAMPLE})
        assert resp.status_code == 200
        assert resp.headers["content-type"].startswith("application/json")
        assert 'filename="transcript-fillers.json"' in resp.headers["content-disposition"]
        assert resp.json()["total_filler_words"] == 3

    def test_plain_text_report(self, client):
        resp = client.post("/analyses/report?format=plain_text", json={"transcript": SAMPLE})
        assert resp.status_code == 200
        assert resp.headers["content-type"].startswith("text/plain")
        assert "attachment" in resp.headers["content-disposition"]
        assert resp.text.startswith("Filler Word Report")

    def test_format_query_name(self, client):
        params = client.get("/openapi.json").json()["paths"]["/analyses/report"]["post"]["parameters"]
        assert [p["name"] for p in params] == ["format"]

    def test_unknown_format(self, client):
        resp = client.post("/analyses/report?format=srt", json={"transcript": SAMPLE})
        assert resp.status_code == 400
        assert "Unknown format 'srt'" in resp.json()["detail"]


class TestListFormats:

    def test_list_formats_returns_all(self, client):
        resp = client.get("/formats")
        assert resp.status_code == 200
        assert resp.json() == [
            {"key": "json_report", "name": "JSON Report", "suffix": "-fillers.json"},
            {"key": "plain_text", "name": "Plain Text Report", "suffix": "-fillers.txt"},
        ]


class TestHealth:

    def test_health(self, client):
        resp = client.get("/health")
        assert resp.status_code == 200
        assert resp.json() == {"status": "ok", "version": __version__}
