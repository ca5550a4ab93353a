"""
HTTP binding tests - invoke commands by name through the FastAPI app.
"""

import pytest
from fastapi.testclient import TestClient

from pocket_coffer.api.main import create_app

ENTRY = {
    "id": "p1",
    "title": "Mail",
    "username": "a@b.com",
    "password": "x",
    "website": None,
    "notes": None,
    "created_at": "2024-01-01T00:00:00Z",
    "updated_at": "2024-01-01T00:00:00Z",
}


@pytest.fixture
def client(store):
    """Create test client around the per-test store."""
    with TestClient(create_app(store)) as test_client:
        yield test_client


def test_health(client):
    response = client.get("/health")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "healthy"
    assert data["db_health"] is True
    assert data["counts"] == {"passwords": 0, "events": 0, "documents": 0, "settings": 0}


def test_command_list(client):
    response = client.get("/commands")
    assert response.status_code == 200
    assert "list_passwords" in response.json()["commands"]


def test_invoke_without_body(client):
    response = client.post("/invoke/list_passwords")
    assert response.status_code == 200
    assert response.json() == {"result": []}


def test_password_round_trip(client):
    response = client.post("/invoke/add_password", json={"entry": ENTRY})
    assert response.status_code == 200
    assert response.json() == {"result": None}

    response = client.post("/invoke/list_passwords")
    assert response.json()["result"] == [ENTRY]

    client.post("/invoke/delete_password", json={"id": "p1"})
    assert client.post("/invoke/list_passwords").json()["result"] == []


def test_duplicate_add_returns_error_detail(client):
    client.post("/invoke/add_password", json={"entry": ENTRY})
    response = client.post("/invoke/add_password", json={"entry": ENTRY})

    assert response.status_code == 400
    assert isinstance(response.json()["detail"], str)
    assert response.json()["detail"]


def test_invalid_payload_returns_error_detail(client):
    response = client.post("/invoke/set_setting", json={"key": "theme"})
    assert response.status_code == 400
    assert "value" in response.json()["detail"]


def test_unknown_command_is_404(client):
    response = client.post("/invoke/format_disk")
    assert response.status_code == 404
    assert response.json()["detail"] == "unknown command: format_disk"


def test_settings_upsert(client):
    client.post("/invoke/set_setting", json={"key": "language", "value": "zh-CN"})
    client.post("/invoke/set_setting", json={"key": "language", "value": "en-US"})

    response = client.post("/invoke/get_setting", json={"key": "language"})
    assert response.json() == {"result": "en-US"}


def test_missing_setting_is_null(client):
    response = client.post("/invoke/get_setting", json={"key": "nope"})
    assert response.status_code == 200
    assert response.json() == {"result": None}


def test_docs_hidden_unless_debug(client):
    assert client.get("/docs").status_code == 404
