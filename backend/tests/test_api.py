"""
DragNotes Backend — HTTP API Tests
====================================

End-to-end request/response checks through the FastAPI app with an
in-memory database: status codes, error envelope, camelCase wire format
and owner isolation.
"""

import uuid

import pytest

from conftest import signup_and_login


class TestHealth:
    @pytest.mark.asyncio
    async def test_banner(self, test_client):
        response = await test_client.get("/")

        assert response.status_code == 200
        assert response.json()["message"] == "DragNotes API is running"

    @pytest.mark.asyncio
    async def test_health(self, test_client):
        response = await test_client.get("/health")

        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "healthy"
        assert body["database"] == "connected"

    @pytest.mark.asyncio
    async def test_request_id_is_echoed(self, test_client):
        response = await test_client.get("/", headers={"X-Request-ID": "trace-42"})
        assert response.headers["X-Request-ID"] == "trace-42"

    @pytest.mark.asyncio
    async def test_request_id_is_generated(self, test_client):
        response = await test_client.get("/")
        assert response.headers["X-Request-ID"]


class TestAuthEndpoints:
    @pytest.mark.asyncio
    async def test_signup_and_login(self, test_client):
        signup = await test_client.post(
            "/api/auth/signup", json={"email": "a@x.com", "password": "secret1"}
        )
        assert signup.status_code == 201
        assert signup.json()["message"] == "User created successfully"
        user_id = signup.json()["userId"]

        login = await test_client.post(
            "/api/auth/login", json={"email": "a@x.com", "password": "secret1"}
        )
        assert login.status_code == 200
        body = login.json()
        assert body["token"]
        assert body["expiresIn"] == 86_400
        assert body["userId"] == user_id
        assert body["user"]["email"] == "a@x.com"
        assert "passwordHash" not in body["user"]
        assert "password_hash" not in body["user"]

    @pytest.mark.asyncio
    async def test_duplicate_signup(self, test_client):
        await signup_and_login(test_client, email="a@x.com")

        response = await test_client.post(
            "/api/auth/signup", json={"email": "A@x.com", "password": "secret1"}
        )
        assert response.status_code == 422
        assert response.json()["message"] == "Email already exists."

    @pytest.mark.asyncio
    async def test_short_password(self, test_client):
        response = await test_client.post(
            "/api/auth/signup", json={"email": "a@x.com", "password": "123"}
        )

        assert response.status_code == 422
        body = response.json()
        assert body["error"] == "validation_error"
        assert body["errors"][0]["loc"] == ["body", "password"]

    @pytest.mark.asyncio
    async def test_malformed_email(self, test_client):
        response = await test_client.post(
            "/api/auth/signup", json={"email": "nope", "password": "secret1"}
        )
        assert response.status_code == 422

    @pytest.mark.asyncio
    async def test_wrong_password(self, test_client):
        await signup_and_login(test_client, email="a@x.com", password="secret1")

        response = await test_client.post(
            "/api/auth/login", json={"email": "a@x.com", "password": "wrong-one"}
        )
        assert response.status_code == 401
        assert response.headers["WWW-Authenticate"] == "Bearer"
        assert response.json()["error"] == "authentication_failed"

    @pytest.mark.asyncio
    async def test_profile(self, test_client):
        user_id, headers = await signup_and_login(test_client, username="Alice")

        response = await test_client.get("/api/auth/profile", headers=headers)

        assert response.status_code == 200
        assert response.json()["user"] == {"id": user_id, "email": "a@x.com", "username": "Alice"}

    @pytest.mark.asyncio
    async def test_profile_requires_token(self, test_client):
        response = await test_client.get("/api/auth/profile")
        assert response.status_code == 401


class TestNoteEndpoints:
    @pytest.mark.asyncio
    async def test_requires_authentication(self, test_client):
        assert (await test_client.get("/api/notes")).status_code == 401
        bad = await test_client.get("/api/notes", headers={"Authorization": "Bearer garbage"})
        assert bad.status_code == 401

    @pytest.mark.asyncio
    async def test_create_with_defaults(self, test_client):
        user_id, headers = await signup_and_login(test_client)

        response = await test_client.post("/api/notes", json={"title": "T"}, headers=headers)

        assert response.status_code == 201
        note = response.json()["note"]
        assert note["title"] == "T"
        assert note["blocks"] == []
        assert note["isFavorite"] is False
        assert note["isArchived"] is False
        assert note["userId"] == user_id
        assert "createdAt" in note and "updatedAt" in note

    @pytest.mark.asyncio
    async def test_create_with_blocks_and_fetch(self, test_client):
        _, headers = await signup_and_login(test_client)
        blocks = [
            {"id": "b1", "type": "heading", "content": {"text": "Hello"}, "order": 0},
            {"type": "checkbox", "content": {"text": "todo", "checked": True}, "order": 1},
        ]

        created = await test_client.post(
            "/api/notes", json={"title": "With blocks", "blocks": blocks}, headers=headers
        )
        note_id = created.json()["note"]["id"]
        fetched = await test_client.get(f"/api/notes/{note_id}", headers=headers)

        assert fetched.status_code == 200
        returned = fetched.json()["note"]["blocks"]
        assert [b["type"] for b in returned] == ["heading", "checkbox"]
        assert returned[0]["id"] == "b1"
        assert returned[1]["id"]
        assert returned[1]["content"] == {"text": "todo", "checked": True}

    @pytest.mark.asyncio
    async def test_invalid_block_type(self, test_client):
        _, headers = await signup_and_login(test_client)

        response = await test_client.post(
            "/api/notes",
            json={"title": "T", "blocks": [{"type": "video", "content": {}, "order": 0}]},
            headers=headers,
        )
        assert response.status_code == 422

    @pytest.mark.asyncio
    async def test_blank_title(self, test_client):
        _, headers = await signup_and_login(test_client)

        response = await test_client.post("/api/notes", json={"title": "   "}, headers=headers)
        assert response.status_code == 422

    @pytest.mark.asyncio
    async def test_update_toggle_and_delete(self, test_client):
        _, headers = await signup_and_login(test_client)
        note_id = (
            await test_client.post("/api/notes", json={"title": "Draft"}, headers=headers)
        ).json()["note"]["id"]

        updated = await test_client.put(
            f"/api/notes/{note_id}",
            json={"title": "Final", "blocks": [{"type": "text", "content": {"text": "x"}, "order": 0}]},
            headers=headers,
        )
        assert updated.status_code == 200
        assert updated.json()["note"]["title"] == "Final"

        fav = await test_client.patch(f"/api/notes/{note_id}/favorite", headers=headers)
        assert fav.json()["message"] == "Note added to favorites"
        assert fav.json()["note"]["isFavorite"] is True

        archived = await test_client.patch(f"/api/notes/{note_id}/archive", headers=headers)
        assert archived.json()["message"] == "Note archived"
        assert (await test_client.get("/api/notes", headers=headers)).json()["notes"] == []

        deleted = await test_client.delete(f"/api/notes/{note_id}", headers=headers)
        assert deleted.status_code == 200
        assert deleted.json()["message"] == "Note deleted successfully"
        assert (await test_client.get(f"/api/notes/{note_id}", headers=headers)).status_code == 404

    @pytest.mark.asyncio
    async def test_update_requires_blocks(self, test_client):
        _, headers = await signup_and_login(test_client)
        note_id = (
            await test_client.post("/api/notes", json={"title": "Draft"}, headers=headers)
        ).json()["note"]["id"]

        response = await test_client.put(
            f"/api/notes/{note_id}", json={"title": "Only title"}, headers=headers
        )
        assert response.status_code == 422

    @pytest.mark.asyncio
    async def test_other_users_note_is_not_found(self, test_client):
        _, alice = await signup_and_login(test_client, email="alice@x.com")
        _, bob = await signup_and_login(test_client, email="bob@x.com")
        note_id = (
            await test_client.post("/api/notes", json={"title": "Alice's"}, headers=alice)
        ).json()["note"]["id"]

        assert (await test_client.get(f"/api/notes/{note_id}", headers=bob)).status_code == 404
        assert (await test_client.delete(f"/api/notes/{note_id}", headers=bob)).status_code == 404
        assert (await test_client.get("/api/notes", headers=bob)).json()["notes"] == []
        assert (await test_client.get(f"/api/notes/{note_id}", headers=alice)).status_code == 200

    @pytest.mark.asyncio
    async def test_not_found_envelope(self, test_client):
        _, headers = await signup_and_login(test_client)

        for note_id in (uuid.uuid4(), "not-a-uuid"):
            response = await test_client.get(f"/api/notes/{note_id}", headers=headers)
            assert response.status_code == 404
            body = response.json()
            assert body["error"] == "not_found"
            assert body["message"] == "Note not found."
            assert body["request_id"]

    @pytest.mark.asyncio
    async def test_reorder(self, test_client):
        _, headers = await signup_and_login(test_client)
        ids = []
        for title in ("A", "B"):
            created = await test_client.post("/api/notes", json={"title": title}, headers=headers)
            ids.append(created.json()["note"]["id"])

        response = await test_client.post(
            "/api/notes/reorder",
            json={"sourceId": ids[0], "targetId": ids[1]},
            headers=headers,
        )

        assert response.status_code == 200
        assert response.json()["message"] == "Notes reordered successfully"
        listed = (await test_client.get("/api/notes", headers=headers)).json()["notes"]
        assert [n["title"] for n in listed] == ["A", "B"]

    @pytest.mark.asyncio
    async def test_reorder_unknown_note(self, test_client):
        _, headers = await signup_and_login(test_client)
        note_id = (
            await test_client.post("/api/notes", json={"title": "A"}, headers=headers)
        ).json()["note"]["id"]

        response = await test_client.post(
            "/api/notes/reorder",
            json={"sourceId": note_id, "targetId": str(uuid.uuid4())},
            headers=headers,
        )
        assert response.status_code == 404

    @pytest.mark.asyncio
    async def test_reorder_malformed_ids(self, test_client):
        _, headers = await signup_and_login(test_client)

        response = await test_client.post(
            "/api/notes/reorder",
            json={"sourceId": "x", "targetId": "y"},
            headers=headers,
        )
        assert response.status_code == 422
