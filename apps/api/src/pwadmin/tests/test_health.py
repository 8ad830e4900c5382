from fastapi.testclient import TestClient

from pwadmin.main import app

client = TestClient(app)


def test_health():
    r = client.get("/api/v1/health")
    assert r.status_code == 200
    assert r.json()["ok"] is True
    assert r.json()["service"] == "pathwar-admin"
