"""Tests for thought endpoints."""

import pytest

from thoughtbox.config import settings


@pytest.fixture
def protected_writes():
    """Require a token for POST /thoughts for the duration of a test."""
    original = settings.protect_thought_writes
    settings.protect_thought_writes = True
    yield
    settings.protect_thought_writes = original


class TestListThoughts:
    """Tests for GET /thoughts."""

    def test_requires_token(self, client):
        """Without a token the list is refused."""
        response = client.get("/thoughts")
        assert response.status_code == 401
        assert response.get_json() == {"response": "please log in", "success": False}

    def test_rejects_garbage_token(self, client, registered_user):
        """Scenario: 'garbage' is not a token."""
        response = client.get("/thoughts", headers={"Authorization": "garbage"})
        assert response.status_code == 401

    def test_lists_with_valid_token(self, client, auth_headers):
        """A registered token reaches the handler."""
        response = client.get("/thoughts", headers=auth_headers)
        assert response.status_code == 200
        assert response.get_json() == {"response": [], "success": True}

    def test_token_from_signin_works(self, client, registered_user):
        """The token returned by /signin opens the gate."""
        _payload, password = registered_user
        signin = client.post("/signin", json={"username": "carol", "password": password})
        token = signin.get_json()["response"]["accessToken"]

        response = client.get("/thoughts", headers={"Authorization": token})
        assert response.status_code == 200

    def test_lists_newest_first(self, client, auth_headers):
        """Thoughts come back newest first."""
        for message in ("first", "second", "third"):
            client.post("/thoughts", json={"message": message})

        data = client.get("/thoughts", headers=auth_headers).get_json()
        assert [t["message"] for t in data["response"]] == ["third", "second", "first"]

    def test_list_is_limited_to_page_size(self, client, auth_headers):
        """At most thoughts_page_size entries are returned."""
        original = settings.thoughts_page_size
        settings.thoughts_page_size = 2
        try:
            for i in range(4):
                client.post("/thoughts", json={"message": f"thought {i}"})
            data = client.get("/thoughts", headers=auth_headers).get_json()
        finally:
            settings.thoughts_page_size = original

        assert len(data["response"]) == 2


class TestCreateThought:
    """Tests for POST /thoughts."""

    def test_create_without_token_by_default(self, client):
        """Writes are open unless protect_thought_writes is set."""
        response = client.post("/thoughts", json={"message": "hello"})
        assert response.status_code == 201

        data = response.get_json()
        assert data["success"] is True
        assert data["response"]["message"] == "hello"
        assert set(data["response"]) == {"id", "message", "created_at"}

    def test_empty_message_rejected(self, client):
        response = client.post("/thoughts", json={"message": ""})
        assert response.status_code == 400
        assert response.get_json()["success"] is False

    def test_long_message_rejected(self, client):
        response = client.post("/thoughts", json={"message": "x" * 141})
        assert response.status_code == 400

    def test_missing_message_rejected(self, client):
        response = client.post("/thoughts", json={})
        assert response.status_code == 400

    def test_protected_writes_require_token(self, client, protected_writes):
        response = client.post("/thoughts", json={"message": "hello"})
        assert response.status_code == 401

    def test_protected_writes_checked_before_body(self, client, protected_writes):
        """An unauthenticated bad body is a 401, not a 400."""
        response = client.post("/thoughts", json={"message": ""})
        assert response.status_code == 401

    def test_protected_writes_accept_token(self, client, auth_headers, protected_writes):
        response = client.post("/thoughts", json={"message": "hello"}, headers=auth_headers)
        assert response.status_code == 201


class TestStoreUnavailable:
    """The gate when the database cannot be opened at all."""

    @pytest.fixture
    def unopenable_db(self, client, tmp_path):
        """Point the database path at a directory."""
        original = settings.database_path
        settings.database_path = str(tmp_path)
        yield
        settings.database_path = original

    def test_token_check_reports_lookup_failure(self, client, unopenable_db):
        response = client.get("/thoughts", headers={"Authorization": "abc"})
        assert response.status_code == 404
        assert response.get_json() == {
            "response": "could not verify access token",
            "success": False,
        }

    def test_missing_token_is_still_unauthorized(self, client, unopenable_db):
        """Without a token the store is never opened."""
        response = client.get("/thoughts")
        assert response.status_code == 401
        assert response.get_json() == {"response": "please log in", "success": False}
