from datetime import timedelta

from jose import jwt

from newsletter_writer.auth import (
    create_access_token,
    get_password_hash,
    verify_password,
)
from newsletter_writer.config import get_settings


def test_password_hash_round_trip():
    hashed = get_password_hash("correct horse")

    assert hashed != "correct horse"
    assert verify_password("correct horse", hashed) is True
    assert verify_password("wrong", hashed) is False


def test_create_access_token_carries_subject():
    settings = get_settings()
    token = create_access_token({"sub": "user-1"}, expires_delta=timedelta(minutes=5))

    payload = jwt.decode(token, settings.jwt_secret_key, algorithms=[settings.jwt_algorithm])

    assert payload["sub"] == "user-1"
    assert "exp" in payload


def test_expired_token_is_rejected(call_action):
    token = create_access_token({"sub": "user-1"}, expires_delta=timedelta(minutes=-1))

    response = call_action("listCampaigns", {}, {"Authorization": f"Bearer {token}"})

    assert response.status_code == 401


def test_token_without_subject_is_rejected(call_action):
    token = create_access_token({"scope": "nothing"})

    response = call_action("listCampaigns", {}, {"Authorization": f"Bearer {token}"})

    assert response.status_code == 401


class TestAuthRoutes:

    def test_login_and_me(self, client, make_user):
        user = make_user("writer@example.com", password="s3cret")

        response = client.post(
            "/api/auth/login",
            json={"email": " Writer@Example.com ", "password": "s3cret"},
        )
        assert response.status_code == 200
        token = response.json()["access_token"]
        assert response.json()["token_type"] == "bearer"

        me = client.get("/api/auth/me", headers={"Authorization": f"Bearer {token}"})
        assert me.status_code == 200
        assert me.json()["id"] == user.id
        assert me.json()["email"] == "writer@example.com"

    def test_login_wrong_password(self, client, make_user):
        make_user("writer@example.com", password="s3cret")

        response = client.post(
            "/api/auth/login",
            json={"email": "writer@example.com", "password": "nope"},
        )

        assert response.status_code == 401
        assert response.json()["error"]["code"] == "UNAUTHORIZED"

    def test_login_user_without_password(self, client, make_user):
        make_user("magic@example.com")

        response = client.post(
            "/api/auth/login",
            json={"email": "magic@example.com", "password": "anything"},
        )

        assert response.status_code == 401

    def test_login_missing_fields(self, client):
        response = client.post("/api/auth/login", json={})
        assert response.status_code == 400

    def test_me_without_token(self, client):
        response = client.get("/api/auth/me")
        assert response.status_code == 401
