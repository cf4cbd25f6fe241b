# File: tests/test_users_api.py

"""
HTTP-level tests for /users.

To run:
    pytest -q
"""

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import sessionmaker

from app.api.deps import get_db
from app.db.session import build_engine
from app.main import app

JOHN = {"name": "John Doe", "email": "john@example.com"}
JANE = {"name": "Jane Roe", "email": "jane@example.com"}


def test_create_then_get_first_user(client):
    resp = client.post("/users", json=JOHN)
    assert resp.status_code == 200
    created = resp.json()
    assert created["id"] is not None

    resp = client.get("/users/1")
    assert resp.status_code == 200
    data = resp.json()
    assert data["id"] == created["id"] == 1
    assert data["name"] == "John Doe"
    assert data["email"] == "john@example.com"


def test_list_users_empty(client):
    resp = client.get("/users")
    assert resp.status_code == 200
    assert resp.json() == []


@pytest.mark.parametrize("count", [1, 3])
def test_list_length_matches_posts(client, count):
    for i in range(count):
        resp = client.post("/users", json={"name": f"user{i}", "email": f"u{i}@example.com"})
        assert resp.status_code == 200

    resp = client.get("/users")
    assert resp.status_code == 200
    users = resp.json()
    assert len(users) == count
    assert [u["name"] for u in users] == [f"user{i}" for i in range(count)]


def test_get_unknown_user_returns_null(client):
    resp = client.get("/users/999")
    assert resp.status_code == 200
    assert resp.json() is None


def test_sequential_posts_get_distinct_ids(client):
    first = client.post("/users", json=JOHN).json()
    second = client.post("/users", json=JOHN).json()
    assert first["id"] != second["id"]


def test_duplicate_email_is_allowed(client):
    client.post("/users", json=JOHN)
    resp = client.post("/users", json={"name": "Johnny", "email": JOHN["email"]})
    assert resp.status_code == 200
    assert len(client.get("/users").json()) == 2


def test_client_supplied_id_is_ignored(client):
    client.post("/users", json=JOHN)
    resp = client.post("/users", json={"id": 1, **JANE})
    assert resp.status_code == 200
    assert resp.json()["id"] == 2
    assert client.get("/users/1").json()["name"] == "John Doe"


def test_create_user_missing_field(client):
    resp = client.post("/users", json={"name": "No Email"})
    assert resp.status_code == 422


def test_get_user_non_integer_id(client):
    resp = client.get("/users/abc")
    assert resp.status_code == 422


def test_storage_failure_returns_500():
    # No tables on this engine, so every query fails
    engine = build_engine("sqlite://")
    factory = sessionmaker(bind=engine)

    def broken_get_db():
        session = factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = broken_get_db
    try:
        resp = TestClient(app).get("/users")
    finally:
        app.dependency_overrides.clear()
        engine.dispose()

    assert resp.status_code == 500
    assert resp.json() == {"detail": "Database error."}


@pytest.mark.parametrize("user_id", [2**63, 99999999999999999999, -(2**63) - 1])
def test_get_user_id_beyond_integer_column_returns_null(client, user_id):
    client.post("/users", json=JOHN)
    resp = client.get(f"/users/{user_id}")
    assert resp.status_code == 200
    assert resp.json() is None


def test_routes_served_under_api_prefix(monkeypatch, session_factory):
    from app.core.config import settings
    from app.main import create_application

    monkeypatch.setattr(settings, "api_prefix", "/api/v1")
    prefixed = create_application()

    def override_get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    prefixed.dependency_overrides[get_db] = override_get_db
    prefixed_client = TestClient(prefixed)

    resp = prefixed_client.post("/api/v1/users", json=JOHN)
    assert resp.status_code == 200
    assert prefixed_client.get("/api/v1/users").json() == [resp.json()]
    assert prefixed_client.get("/api/v1/healthz").json() == {"status": "ok"}
    assert prefixed_client.get("/users").status_code == 404


def test_slash_only_prefix_mounts_at_root(monkeypatch):
    from app.core.config import Settings, settings
    from app.main import create_application

    monkeypatch.setattr(settings, "api_prefix", Settings(api_prefix="/").api_prefix)
    resp = TestClient(create_application()).get("/healthz")
    assert resp.status_code == 200
