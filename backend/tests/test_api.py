"""
Tests for the HTTP API.
"""
import pytest
from fastapi.testclient import TestClient

from energiepilot.main import create_app
from energiepilot.services.analysis_service import AnalysisService


@pytest.fixture
def client(rule_table):
    return TestClient(create_app(rule_table), raise_server_exceptions=False)


def test_root(client):
    response = client.get("/")

    assert response.status_code == 200
    assert response.json()["docs"] == "/api/docs"


def test_health(client):
    response = client.get("/api/v1/health")

    assert response.status_code == 200
    assert response.json() == {
        "status": "healthy",
        "api": "healthy",
        "rule_table": {"programs": 5},
    }


def test_analyse(client):
    response = client.post(
        "/api/v1/analyse",
        json={
            "building_age_years": 30,
            "owner_occupied": True,
            "measure_selected": "Heizungstausch_WP",
        },
    )

    assert response.status_code == 200
    body = response.json()
    assert body["ok"] is True
    assert body["eligible_after_filter"] == ["KFW_458", "KFW_358"]
    assert body["results"][0]["key"] == "KFW_458"
    assert body["results"][0]["rate_pct"] == 50
    assert body["results"][1]["rate_pct"] is None


def test_analyse_empty_body_is_empty_input(client):
    response = client.post("/api/v1/analyse")

    assert response.status_code == 200
    body = response.json()
    assert body["input"] == {}
    assert body["eligible_before_filter"] == ["BAFA_EM_WAERMEPUMPE", "BAFA_EM_HUELLE"]


def test_analyse_invalid_json(client):
    response = client.post(
        "/api/v1/analyse",
        content=b"{not json",
        headers={"content-type": "application/json"},
    )

    assert response.status_code == 400
    assert response.json()["detail"] == "Invalid JSON body"


@pytest.mark.parametrize(
    "content", [b'{"x": NaN}', b'{"x": Infinity}', b'{"x": -Infinity}', b"NaN"]
)
def test_analyse_rejects_non_finite_literals(client, content):
    response = client.post(
        "/api/v1/analyse",
        content=content,
        headers={"content-type": "application/json"},
    )

    assert response.status_code == 400
    assert response.json()["detail"] == "Invalid JSON body"


def test_analyse_non_object_body(client):
    response = client.post("/api/v1/analyse", json=[1, 2, 3])

    assert response.status_code == 400


def test_analyse_rejects_get(client):
    response = client.get("/api/v1/analyse")

    assert response.status_code == 405


def test_analyse_unexpected_error_returns_error_envelope(client, monkeypatch):
    def boom(self, input):
        raise RuntimeError("rule table broken")

    monkeypatch.setattr(AnalysisService, "analyse", boom)

    response = client.post("/api/v1/analyse", json={})

    assert response.status_code == 500
    body = response.json()
    assert body["ok"] is False
    assert body["errorType"] == "RuntimeError"
    assert body["errorMessage"] == "rule table broken"
    assert any("rule table broken" in line for line in body["trace"])
