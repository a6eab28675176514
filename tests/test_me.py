from datetime import timedelta

from fastapi.testclient import TestClient

from backend.app.core.settings import get_settings
from backend.app.core.time import utc_now
from backend.app.main import app
from backend.app.models.user_session import UserSession


def test_me_returns_logged_in_user(client, school):
    login_response = client.post("/api/login", json={"username": "guru", "password": "guru123"})
    response = client.get("/api/me")
    assert response.status_code == 200
    assert response.json() == login_response.json()["user"]


def test_me_returns_student_binding(student_client, school):
    response = student_client.get("/api/me")
    assert response.status_code == 200
    data = response.json()
    assert data["username"] == "ahmad"
    assert data["student_id"] == school["ahmad_id"]


def test_me_without_cookie_returns_401(client):
    response = client.get("/api/me")
    assert response.status_code == 401


def test_me_with_unknown_token_returns_401(client, school):
    other = TestClient(app, cookies={get_settings().session_cookie_name: "not-a-real-token"})
    response = other.get("/api/me")
    assert response.status_code == 401


def test_me_with_expired_session_returns_401(client, school, db):
    client.post("/api/login", json={"username": "guru", "password": "guru123"})
    session_row = db.query(UserSession).first()
    session_row.expires_at = utc_now() - timedelta(minutes=1)
    db.commit()

    response = client.get("/api/me")
    assert response.status_code == 401
    db.expire_all()
    assert db.query(UserSession).count() == 0
