from __future__ import annotations

import json

import pytest

from party_draw import create_app
from party_draw import config


def _data(response):
    body = response.get_json()
    assert body["success"] is True
    return body["data"]


def test_health(client):
    assert _data(client.get("/health")) == {"status": "ok"}


def test_register_returns_link_and_qr_payload(client):
    response = client.post("/api/participants")

    assert response.status_code == 201
    data = _data(response)
    participant = data["participant"]
    assert 1 <= participant["teamNumber"] <= 9
    assert 1 <= participant["lotteryNumber"] <= 90
    assert data["url"] == f"http://localhost:3000/participant/{participant['id']}"
    assert json.loads(data["qr_payload"]) == {
        "participantId": participant["id"],
        "teamNumber": participant["teamNumber"],
        "lotteryNumber": participant["lotteryNumber"],
    }


def test_lookup_by_link(client):
    participant = _data(client.post("/api/participants"))["participant"]

    page = _data(client.get(f"/participant/{participant['id']}"))
    api = _data(client.get(f"/api/participants/{participant['id']}"))

    assert page["participant"] == participant
    assert page["title"] == config.TestingConfig.APP_TITLE
    assert api["participant"] == participant


@pytest.mark.parametrize("path", ["/participant/unknown", "/api/participants/unknown"])
def test_lookup_miss_is_not_found(client, path):
    response = client.get(path)

    assert response.status_code == 404
    body = response.get_json()
    assert body["success"] is False
    assert body["error"]["code"] == "not_found"


def test_capacity_exhausted_is_retryable_conflict(storage):
    class TinyConfig(config.TestingConfig):
        TEAM_COUNT = 1
        MEMBERS_PER_TEAM = 2

    client = create_app(TinyConfig, storage=storage).test_client()
    assert client.post("/api/participants").status_code == 201
    assert client.post("/api/participants").status_code == 201

    response = client.post("/api/participants")

    assert response.status_code == 409
    error = response.get_json()["error"]
    assert error["code"] == "capacity_exhausted"
    assert error["details"]["retryable"] is True


def test_decode_qr(client):
    participant = _data(client.post("/api/participants"))["participant"]
    payload = json.dumps(
        {
            "participantId": participant["id"],
            "teamNumber": participant["teamNumber"],
            "lotteryNumber": participant["lotteryNumber"],
        }
    )

    decoded = _data(client.post("/api/qr/decode", json={"payload": payload}))

    assert decoded["participantId"] == participant["id"]


def test_decode_qr_rejects_garbage(client):
    response = client.post("/api/qr/decode", json={"payload": "garbage"})

    assert response.status_code == 400
    assert response.get_json()["error"]["code"] == "validation_error"


def test_decode_qr_requires_payload(client):
    response = client.post("/api/qr/decode", json={})

    assert response.status_code == 400
    assert "payload" in response.get_json()["error"]["details"]


def test_admin_stats(client):
    client.post("/api/admin/test-participant")

    data = _data(client.get("/api/admin/stats"))

    assert data["total_assigned"] == 1
    assert data["total_capacity"] == 90
    assert data["available_slots"] == 89
    assert len(data["team_stats"]) == 9
    assert sum(t["current_count"] for t in data["team_stats"]) == 1
    assert data["settings"]["max_lottery_number"] == 90
    assert data["settings"]["storage_backend"] == "memory"
    assert data["settings"]["storage_key"] == "year-end-party-participants"


def test_admin_test_participant(client):
    response = client.post("/api/admin/test-participant")

    assert response.status_code == 201
    assert "teamNumber" in _data(response)


def test_admin_clear(client):
    client.post("/api/participants")
    client.post("/api/participants")

    assert _data(client.delete("/api/admin/participants")) == {"cleared": 2}
    assert _data(client.get("/api/admin/stats"))["total_assigned"] == 0


def test_admin_export_download(client):
    created = _data(client.post("/api/participants"))["participant"]

    response = client.get("/api/admin/export")

    assert response.status_code == 200
    assert response.mimetype == "application/json"
    disposition = response.headers["Content-Disposition"]
    assert disposition.startswith('attachment; filename="year-end-party-participants-')
    assert disposition.endswith('.json"')
    assert json.loads(response.get_data(as_text=True)) == {created["id"]: created}


def test_unknown_route_uses_error_envelope(client):
    response = client.get("/no-such-page")

    assert response.status_code == 404
    assert response.get_json()["error"]["code"] == "not_found"


def test_admin_export_filename_is_quoted(storage):
    class SpacedKeyConfig(config.TestingConfig):
        STORAGE_KEY = "year end; party"

    client = create_app(SpacedKeyConfig, storage=storage).test_client()

    response = client.get("/api/admin/export")

    disposition = response.headers["Content-Disposition"]
    assert disposition.startswith('attachment; filename="year end; party-')
    assert disposition.endswith('.json"')
