from fastapi.testclient import TestClient

from crm_analytics.app.main import app


def test_health_endpoint() -> None:
    client = TestClient(app)
    response = client.get("/api/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok", "service": "crm_analytics"}
    assert response.headers.get("X-Request-ID")
