import pytest

from molo.db.repositories import EntryRepository
from molo.services.token_service import TokenService


DIARY = {"id": "e1", "title": "Day 1", "content": "Hello", "date": "2024-01-01"}


async def test_end_to_end_flow(api):
    response = await api.get("/api/check-init-status")
    assert response.status_code == 200
    assert response.json() == {"success": True, "data": {"initialized": False}}

    response = await api.post("/api/initialize", json={"pin": "1234"})
    assert response.status_code == 200
    assert response.json() == {"success": True}

    response = await api.get("/api/check-init-status")
    assert response.json()["data"] == {"initialized": True}

    response = await api.post("/api/login", json={"pin": "1234"})
    assert response.status_code == 200
    data = response.json()["data"]
    assert data["expiresIn"] == 3600
    headers = {"Authorization": f"Bearer {data['token']}"}

    response = await api.post("/api/diaries", json=DIARY, headers=headers)
    assert response.status_code == 200
    saved = response.json()["data"]
    assert saved["id"] == "e1"
    assert saved["createdAt"] == saved["updatedAt"]

    response = await api.get("/api/diaries", headers=headers)
    assert response.status_code == 200
    listed = response.json()["data"]
    assert [d["id"] for d in listed] == ["e1"]
    assert listed[0]["content"] == "Hello"

    response = await api.post("/api/login", json={"pin": "9999"})
    assert response.status_code == 401
    assert response.json() == {"success": False, "error": "Invalid PIN"}


class TestAuthRoutes:
    async def test_initialize_twice(self, api):
        await api.post("/api/initialize", json={"pin": "1234"})

        response = await api.post("/api/initialize", json={"pin": "5678"})

        assert response.status_code == 400
        assert response.json() == {"success": False, "error": "System already initialized"}

    async def test_login_before_initialize(self, api):
        response = await api.post("/api/login", json={"pin": "1234"})

        assert response.status_code == 400
        assert response.json()["error"] == "System not initialized"

    async def test_password_key_is_accepted(self, api):
        response = await api.post("/api/initialize", json={"password": "hunter2"})
        assert response.status_code == 200

        response = await api.post("/api/login", json={"password": "hunter2"})
        assert response.status_code == 200
        assert response.json()["data"]["token"]

    @pytest.mark.parametrize("body", [{}, {"pin": ""}, {"pin": 1234}, {"pin": None}])
    async def test_invalid_pin_body(self, api, body):
        response = await api.post("/api/initialize", json=body)

        assert response.status_code == 400
        payload = response.json()
        assert payload["success"] is False
        assert "pin" in payload["error"]

        status = await api.get("/api/check-init-status")
        assert status.json()["data"] == {"initialized": False}


class TestProtectedRoutes:
    async def test_missing_token(self, api):
        response = await api.get("/api/diaries")

        assert response.status_code == 401
        assert response.headers["WWW-Authenticate"] == "Bearer"
        assert response.json() == {"success": False, "error": "No token provided"}

    @pytest.mark.parametrize("header", ["Bearer", "Basic abc", "Bearer not-a-token", "Token x"])
    async def test_bad_authorization_header(self, api, header):
        response = await api.get("/api/diaries", headers={"Authorization": header})

        assert response.status_code == 401
        assert response.json()["success"] is False

    async def test_expired_token(self, api, auth_headers):
        expired = TokenService(ttl=-10).issue()

        response = await api.get("/api/diaries", headers={"Authorization": f"Bearer {expired}"})

        assert response.status_code == 401
        assert response.json()["error"] == "Token expired"

    async def test_auth_is_checked_before_body(self, api):
        response = await api.post("/api/diaries", json={"title": ""})

        assert response.status_code == 401

    async def test_store_is_not_touched_without_token(self, api, monkeypatch):
        calls = []

        async def spy():
            calls.append(True)
            return []

        monkeypatch.setattr(EntryRepository, "get_all", staticmethod(spy))

        response = await api.get("/api/diaries")

        assert response.status_code == 401
        assert calls == []


class TestDiaryRoutes:
    async def test_update_preserves_created_at(self, api, auth_headers):
        first = (await api.post("/api/diaries", json=DIARY, headers=auth_headers)).json()["data"]

        updated = dict(DIARY, content="Hello again")
        second = (await api.post("/api/diaries", json=updated, headers=auth_headers)).json()["data"]

        assert second["createdAt"] == first["createdAt"]
        assert second["updatedAt"] >= first["updatedAt"]
        assert second["content"] == "Hello again"

    async def test_cipher_text_key_is_accepted(self, api, auth_headers):
        body = {"id": "e2", "title": "Secret", "cipherText": "U2FsdGVkX1+abc", "date": "2024-02-01"}

        response = await api.post("/api/diaries", json=body, headers=auth_headers)

        assert response.status_code == 200
        assert response.json()["data"]["content"] == "U2FsdGVkX1+abc"

    @pytest.mark.parametrize("missing", ["id", "title", "content", "date"])
    async def test_save_requires_fields(self, api, auth_headers, missing):
        body = {k: v for k, v in DIARY.items() if k != missing}

        response = await api.post("/api/diaries", json=body, headers=auth_headers)

        assert response.status_code == 400
        assert response.json()["success"] is False

    async def test_whitespace_title_is_rejected(self, api, auth_headers):
        response = await api.post("/api/diaries", json=dict(DIARY, title="   "), headers=auth_headers)

        assert response.status_code == 400
        assert "title" in response.json()["error"]

    async def test_get_single_diary(self, api, auth_headers):
        await api.post("/api/diaries", json=DIARY, headers=auth_headers)

        response = await api.get("/api/diaries/e1", headers=auth_headers)
        assert response.status_code == 200
        assert response.json()["data"]["title"] == "Day 1"

        response = await api.get("/api/diaries/nope", headers=auth_headers)
        assert response.status_code == 404
        assert response.json() == {"success": False, "error": "Diary not found"}

    async def test_delete_twice(self, api, auth_headers):
        await api.post("/api/diaries", json=DIARY, headers=auth_headers)

        response = await api.delete("/api/diaries/e1", headers=auth_headers)
        assert response.status_code == 200
        assert response.json() == {"success": True}

        response = await api.delete("/api/diaries/e1", headers=auth_headers)
        assert response.status_code == 404
        assert response.json()["success"] is False

        response = await api.get("/api/diaries", headers=auth_headers)
        assert response.json()["data"] == []

    @pytest.mark.parametrize("entry_id", ["a/b", "a?b", "a#b", "a b", "a%2Fb", "e1\n", "x" * 129])
    async def test_save_rejects_ids_that_cannot_be_addressed(self, api, auth_headers, entry_id):
        response = await api.post("/api/diaries", json=dict(DIARY, id=entry_id), headers=auth_headers)

        assert response.status_code == 400
        assert "id" in response.json()["error"]

        listed = await api.get("/api/diaries", headers=auth_headers)
        assert listed.json()["data"] == []

    @pytest.mark.parametrize("method", ["get", "delete"])
    async def test_malformed_path_id(self, api, auth_headers, method):
        response = await getattr(api, method)("/api/diaries/a%20b", headers=auth_headers)

        assert response.status_code == 400
        assert response.json() == {"success": False, "error": "Invalid entry ID"}

    async def test_uuid_id_can_be_fetched_and_deleted(self, api, auth_headers):
        entry_id = "550e8400-e29b-41d4-a716-446655440000"
        await api.post("/api/diaries", json=dict(DIARY, id=entry_id), headers=auth_headers)

        assert (await api.get(f"/api/diaries/{entry_id}", headers=auth_headers)).status_code == 200
        assert (await api.delete(f"/api/diaries/{entry_id}", headers=auth_headers)).status_code == 200

    async def test_storage_failure_is_reported_without_detail(self, api, auth_headers, monkeypatch):
        async def boom():
            raise RuntimeError("disk I/O error at /secret/path")

        monkeypatch.setattr(EntryRepository, "get_all", staticmethod(boom))

        response = await api.get("/api/diaries", headers=auth_headers)

        assert response.status_code == 500
        assert response.json() == {"success": False, "error": "Failed to fetch diaries"}


class TestMiscRoutes:
    async def test_unknown_route_uses_envelope(self, api):
        response = await api.get("/api/nope")

        assert response.status_code == 404
        assert response.json()["success"] is False

    async def test_health_hides_entry_count_from_anonymous_callers(self, api, auth_headers):
        await api.post("/api/diaries", json=DIARY, headers=auth_headers)

        anonymous = (await api.get("/api/health")).json()["data"]
        assert anonymous["status"] == "ok"
        assert anonymous["database"] == "connected"
        assert anonymous["initialized"] is True
        assert "entryCount" not in anonymous

        authed = (await api.get("/api/health", headers=auth_headers)).json()["data"]
        assert authed["entryCount"] == 1

    async def test_root(self, api):
        response = await api.get("/")

        assert response.status_code == 200
        body = response.json()
        assert body["success"] is True
        assert body["data"]["status"] == "operational"

    async def test_malformed_json_is_a_validation_error(self, api):
        response = await api.post(
            "/api/initialize",
            content=b'{"pin": "1234"',
            headers={"Content-Type": "application/json"}
        )

        assert response.status_code == 400
        assert response.json()["success"] is False

        status = await api.get("/api/check-init-status")
        assert status.json()["data"] == {"initialized": False}

    async def test_error_envelope_is_documented(self, api):
        schema = (await api.get("/openapi.json")).json()

        assert "ErrorResponse" in schema["components"]["schemas"]
        responses = schema["paths"]["/api/diaries/{entry_id}"]["delete"]["responses"]
        assert responses["404"]["content"]["application/json"]["schema"]["$ref"].endswith("/ErrorResponse")
