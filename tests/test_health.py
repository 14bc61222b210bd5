from fastapi.testclient import TestClient

from jira_records.api.main import app


def test_health():
    client = TestClient(app)
    r = client.get("/")
    assert r.status_code == 200
    data = r.json()
    assert data["status"] == "ok"
    assert data["app"] == "Jira Records"
    assert "environment" in data
