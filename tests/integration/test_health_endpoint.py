from fastapi.testclient import TestClient


def test_health_reports_store_status(client: TestClient):
    r = client.get("/health")
    assert r.status_code == 200
    body = r.json()
    assert body["status"] == "healthy"
    assert body["details"]["document_store"]["status"] == "healthy"
    assert body["details"]["providers"]["translation"] == "configured"


def test_root(client: TestClient):
    r = client.get("/")
    assert r.status_code == 200
    assert r.json()["status"] == "running"


def test_request_id_is_echoed(client: TestClient):
    r = client.get("/", headers={"X-Request-ID": "req-123"})
    assert r.headers["x-request-id"] == "req-123"
