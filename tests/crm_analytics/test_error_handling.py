import pytest
from fastapi.testclient import TestClient

from crm_analytics.app.api import analytics as analytics_api
from crm_analytics.app.main import app

client = TestClient(app)


def test_value_error_maps_to_bad_request(monkeypatch: pytest.MonkeyPatch) -> None:
    def _reject(*args, **kwargs):
        raise ValueError("bin_count must be >= 1.")

    monkeypatch.setattr(analytics_api._engine.histograms, "bin", _reject)

    resp = client.post("/api/analytics/histogram", json={"values": [1, 2, 3]})

    assert resp.status_code == 400
    data = resp.json()
    assert data["error_code"] == "bad_request"
    assert data["detail"] == "bin_count must be >= 1."
    assert resp.headers.get("X-Request-ID") == data["request_id"]


def test_generic_exception_envelope(monkeypatch: pytest.MonkeyPatch) -> None:
    def _boom(*args, **kwargs):
        raise RuntimeError("boom")

    monkeypatch.setattr(analytics_api._engine.statistics, "summarize", _boom)

    resp = client.post("/api/analytics/summary", json={"values": [1, 2, 3]})

    assert resp.status_code == 500
    data = resp.json()
    assert data["error_code"] == "internal_error"
    assert data["request_id"]


def test_unknown_route_envelope() -> None:
    resp = client.get("/api/does-not-exist")

    assert resp.status_code == 404
    data = resp.json()
    assert data["error_code"] == "not_found"
    assert data["request_id"]


def test_validation_error_envelope() -> None:
    resp = client.post("/api/analytics/summary", json={"values": "not-a-list"})

    assert resp.status_code == 422
    data = resp.json()
    assert data["error_code"] == "validation_error"
    assert "values" in data["detail"]
