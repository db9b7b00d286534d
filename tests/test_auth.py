"""
Tests for authentication endpoints and session verification
"""
import pytest
from fastapi import HTTPException
from starlette.requests import Request
from app.core import security
from app.core.config import settings
from app.models import User, Theme


def test_health_check(client):
    """Test health check endpoint"""
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json()["status"] == "healthy"


def test_root_endpoint(client):
    """Test root endpoint"""
    response = client.get("/")
    assert response.status_code == 200
    assert "message" in response.json()


def test_register_creates_user_and_theme(client, db):
    response = client.post("/api/register", json={
        "name": "bob",
        "display_name": "Bob",
        "description": "hello",
        "password": "secret",
        "theme": {"dark_mode": True},
    })
    assert response.status_code == 201
    data = response.json()
    assert data["name"] == "bob"
    assert data["theme"]["dark_mode"] is True
    assert data["icon_hash"] == settings.FALLBACK_ICON_HASH

    user = db.query(User).filter(User.name == "bob").one()
    assert user.password != "secret"
    assert db.query(Theme).filter(Theme.user_id == user.id).count() == 1


def test_register_reserved_name(client):
    response = client.post("/api/register", json={"name": "pipe", "password": "secret"})
    assert response.status_code == 400


def test_register_duplicate_name(client, db, create_user):
    create_user("alice")
    response = client.post("/api/register", json={"name": "alice", "password": "secret"})
    assert response.status_code == 409
    assert response.json()["detail"] == "the username is already taken"
    assert db.query(User).filter(User.name == "alice").count() == 1

    # the failed insert was rolled back; the session keeps working
    assert client.post("/api/register", json={"name": "bob", "password": "secret"}).status_code == 201


def test_login_and_me(client, create_user, login):
    create_user("alice", dark_mode=True)
    login(client, "alice")

    response = client.get("/api/user/me")
    assert response.status_code == 200
    data = response.json()
    assert data["name"] == "alice"
    assert data["theme"]["dark_mode"] is True


def test_login_wrong_password(client, create_user):
    create_user("alice")
    response = client.post("/api/login", json={"username": "alice", "password": "nope"})
    assert response.status_code == 401


def test_login_unknown_user(client):
    response = client.post("/api/login", json={"username": "ghost", "password": "nope"})
    assert response.status_code == 401


def test_no_session_is_forbidden(client):
    response = client.get("/api/user/me")
    assert response.status_code == 403


def test_logout_clears_session(client, create_user, login):
    create_user("alice")
    login(client, "alice")
    assert client.post("/api/logout").status_code == 200
    assert client.get("/api/user/me").status_code == 403


def test_expired_session(client, create_user, login, monkeypatch):
    create_user("alice")
    login(client, "alice")

    later = security.now_unix() + settings.SESSION_TTL + 10
    monkeypatch.setattr(security, "now_unix", lambda: later)

    response = client.get("/api/user/me")
    assert response.status_code == 401
    assert response.json()["detail"] == "session has expired"


def session_request(session):
    return Request({"type": "http", "session": session})


def test_session_without_user_id():
    expires = security.now_unix() + 100
    for session in ({"EXPIRES": expires}, {"EXPIRES": expires, "USERID": "1"}):
        with pytest.raises(HTTPException) as exc_info:
            security.verify_user_session(session_request(session))
        assert exc_info.value.status_code == 401
        assert exc_info.value.detail == "failed to get USERID value from session"


def test_session_without_expires():
    with pytest.raises(HTTPException) as exc_info:
        security.verify_user_session(session_request({"USERID": 1}))
    assert exc_info.value.status_code == 403


def test_valid_session_returns_user_id():
    session = {"USERID": 7, "EXPIRES": security.now_unix() + 100}
    assert security.verify_user_session(session_request(session)) == 7


def test_password_hash_roundtrip():
    hashed = security.hash_password("secret")
    assert security.verify_password("secret", hashed)
    assert not security.verify_password("other", hashed)
    assert not security.verify_password("secret", "not-a-bcrypt-hash")
