"""Shared test fixtures for thoughtbox."""

import os
import sqlite3
import tempfile

import pytest

from thoughtbox.auth.service import CredentialService
from thoughtbox.config import settings
from thoughtbox.db import Core, init_db, init_schema
from thoughtbox.main import app


@pytest.fixture(autouse=True)
def fast_bcrypt():
    """Use the cheapest bcrypt work factor so tests stay fast."""
    original = settings.bcrypt_work_factor
    settings.bcrypt_work_factor = 4
    yield
    settings.bcrypt_work_factor = original


@pytest.fixture
def test_db():
    """Create in-memory test database with schema."""
    db = sqlite3.connect(":memory:")
    db.row_factory = sqlite3.Row
    init_schema(db)

    yield db

    db.close()


@pytest.fixture
def core(test_db):
    """Core wrapping the in-memory test database."""
    return Core(test_db)


@pytest.fixture
def service(core):
    """CredentialService backed by the in-memory store."""
    return CredentialService(core.users)


@pytest.fixture
def db_path():
    """Point settings.database_path at a fresh, initialized temp file."""
    fd, path = tempfile.mkstemp(suffix=".db")
    os.close(fd)
    os.unlink(path)

    original_db_path = settings.database_path
    settings.database_path = path
    try:
        init_db()
        yield path
    finally:
        settings.database_path = original_db_path
        try:
            os.unlink(path)
        except FileNotFoundError:
            pass


@pytest.fixture
def client(db_path):
    """Create test client for API testing.

    Uses a temp file database so every request-scoped Core sees the same data.
    Each test gets a fresh database.
    """
    app.config["TESTING"] = True
    with app.test_client() as client:
        yield client


@pytest.fixture
def registered_user(client):
    """Sign up a user through the API.

    Returns a tuple of (response payload, password).
    """
    password = "pass123"
    response = client.post("/signup", json={"username": "carol", "password": password})
    assert response.status_code == 201
    return response.get_json()["response"], password


@pytest.fixture
def auth_headers(registered_user):
    """Authorization header carrying the registered user's token verbatim."""
    payload, _password = registered_user
    return {"Authorization": payload["accessToken"]}
