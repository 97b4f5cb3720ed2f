"""HTTP tests for the channel URL endpoints."""

import asyncio

from tests.conftest import TEAM_URL

BASE = "/api/v1/channels/url"


def open_dialog(client, **overrides) -> dict:
    payload = {"current_url": "town-square", "current_team_url": TEAM_URL, **overrides}
    response = client.post(f"{BASE}/dialogs", json=payload)
    assert response.status_code == 201
    return response.json()["data"]


class TestSlugEndpoints:
    def test_normalize(self, client):
        response = client.post(f"{BASE}/normalize", json={"url": "  Town Square! "})

        assert response.status_code == 200
        assert response.json()["data"] == {"url": "townsquare"}

    def test_validate_accepted(self, client):
        response = client.post(f"{BASE}/validate", json={"url": "validslug"})
        body = response.json()

        assert response.status_code == 200
        assert body["success"] is True
        assert body["data"] == {"status": "valid", "url": "validslug"}

    def test_validate_rejected_is_not_http_error(self, client):
        response = client.post(f"{BASE}/validate", json={"url": "_"})
        body = response.json()

        assert response.status_code == 200
        assert body["success"] is False
        assert body["data"]["status"] == "invalid"
        assert [v["rule"] for v in body["data"]["violations"]] == [
            "too_short",
            "must_start_with_letter_or_number",
        ]
        assert body["data"]["violations"][0]["message_id"] == "change_url.longer"

    def test_validate_requires_url(self, client):
        response = client.post(f"{BASE}/validate", json={})
        body = response.json()

        assert response.status_code == 422
        assert body["success"] is False
        assert body["error"]["error_type"] == "validation_error"

    def test_shorten(self, client):
        response = client.post(f"{BASE}/shorten", json={"url": f"{TEAM_URL}/channels"})

        assert response.json()["data"]["short_url"] == "https://ch...team/channels/"


class TestChangeURLDialogEndpoints:
    def test_open_dialog(self, client):
        dialog = open_dialog(client)

        assert dialog["current_url"] == "town-square"
        assert dialog["title"] == "Change URL"
        assert dialog["submit_button_text"] == "Save"
        assert dialog["full_url"] == f"{TEAM_URL}/channels"
        assert dialog["max_length"] == 64
        assert dialog["overlay_delay_ms"] == 400
        assert dialog["user_edit"] is False

    def test_open_dialog_requires_team_url(self, client):
        response = client.post(f"{BASE}/dialogs", json={"current_url": "abc"})

        assert response.status_code == 422

    def test_unknown_dialog(self, client):
        response = client.get(f"{BASE}/dialogs/missing")
        body = response.json()

        assert response.status_code == 404
        assert body["error"]["error_type"] == "change_url_dialog_not_found"
        assert body["error"]["extra"] == {"field": "dialog_id", "value": "missing"}

    def test_typing_then_submit(self, client, channel_repository):
        dialog_id = open_dialog(client)["dialog_id"]

        typed = client.patch(f"{BASE}/dialogs/{dialog_id}/url", json={"url": "Off Topic"}).json()["data"]
        assert typed["current_url"] == "offtopic"
        assert typed["user_edit"] is True

        response = client.post(f"{BASE}/dialogs/{dialog_id}/submit")
        body = response.json()

        assert response.status_code == 200
        assert body["success"] is True
        assert body["data"]["submitted"] is True
        assert body["data"]["result"] == {"status": "valid", "url": "offtopic"}
        assert asyncio.run(channel_repository.exists(TEAM_URL, "offtopic")) is True
        assert client.get(f"{BASE}/dialogs/{dialog_id}").status_code == 404

    def test_invalid_submit_keeps_dialog_open(self, client):
        dialog_id = open_dialog(client)["dialog_id"]

        response = client.post(f"{BASE}/dialogs/{dialog_id}/submit", json={"url": "-abc"})
        body = response.json()

        assert response.status_code == 200
        assert body["success"] is False
        assert body["data"]["submitted"] is False
        assert body["data"]["dialog"]["has_error"] is True
        assert body["data"]["dialog"]["error"] == ["URL must start with a letter or number."]

        state = client.get(f"{BASE}/dialogs/{dialog_id}").json()["data"]
        assert state["url_error"][0]["rule"] == "must_start_with_letter_or_number"

    def test_taken_url_becomes_server_error(self, client, channel_repository):
        asyncio.run(channel_repository.add(TEAM_URL, "general"))
        dialog_id = open_dialog(client)["dialog_id"]

        body = client.post(f"{BASE}/dialogs/{dialog_id}/submit", json={"url": "general"}).json()

        assert body["success"] is False
        assert body["data"]["dialog"]["server_error"] == "A channel with that URL already exists."
        assert body["data"]["dialog"]["has_error"] is False

        props = {"current_url": "town-square"}
        data = client.put(f"{BASE}/dialogs/{dialog_id}/props", json=props).json()["data"]

        assert data["user_edit"] is True
        assert data["current_url"] == "general"

    def test_props_update_ignored_url_while_editing(self, client):
        dialog_id = open_dialog(client)["dialog_id"]
        client.patch(f"{BASE}/dialogs/{dialog_id}/url", json={"url": "draft"})

        response = client.put(
            f"{BASE}/dialogs/{dialog_id}/props",
            json={"current_url": "external", "server_error": "boom"},
        )
        data = response.json()["data"]

        assert data["current_url"] == "draft"
        assert data["server_error"] == "boom"
        assert data["error"] == ["boom"]

    def test_props_null_clears_server_error(self, client):
        dialog_id = open_dialog(client, server_error="boom")["dialog_id"]

        data = client.put(f"{BASE}/dialogs/{dialog_id}/props", json={"server_error": None}).json()["data"]

        assert data["server_error"] is None
        assert data["title"] == "Change URL"

    def test_cancel(self, client):
        dialog_id = open_dialog(client)["dialog_id"]
        client.patch(f"{BASE}/dialogs/{dialog_id}/url", json={"url": "draft"})

        response = client.post(f"{BASE}/dialogs/{dialog_id}/cancel")

        assert response.status_code == 200
        assert response.json()["data"]["user_edit"] is False
        assert client.get(f"{BASE}/dialogs/{dialog_id}").status_code == 404
