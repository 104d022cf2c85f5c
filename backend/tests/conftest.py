"""
Shared fixtures: an in-memory SQLite database behind the real app.
"""
import os

# Must be set before newsletter_writer.database builds its engine
os.environ["DATABASE_URL"] = "sqlite://"

import pytest
from fastapi.testclient import TestClient

from newsletter_writer.main import app
from newsletter_writer.database import Base, engine, SessionLocal
from newsletter_writer.auth import create_access_token, get_password_hash
from newsletter_writer.models import User


@pytest.fixture(autouse=True)
def reset_database():
    """Give every test empty tables."""
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    yield


@pytest.fixture
def db():
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def client():
    return TestClient(app)


@pytest.fixture
def make_user(db):
    """Factory creating an active user, with a password when one is given."""
    def _make_user(email="writer@example.com", password=None, is_active=True):
        user = User(
            email=email,
            name=email.split("@")[0],
            hashed_password=get_password_hash(password) if password else None,
            is_active=is_active,
        )
        db.add(user)
        db.commit()
        db.refresh(user)
        return user
    return _make_user


def auth_headers_for(user):
    token = create_access_token({"sub": str(user.id)})
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def auth_headers():
    return auth_headers_for


@pytest.fixture
def user_a(make_user):
    return make_user("alice@example.com")


@pytest.fixture
def user_b(make_user):
    return make_user("bob@example.com")


@pytest.fixture
def headers_a(user_a):
    return auth_headers_for(user_a)


@pytest.fixture
def headers_b(user_b):
    return auth_headers_for(user_b)


@pytest.fixture
def call_action(client):
    """POST to a named action and return the response."""
    def _call(name, payload=None, headers=None):
        return client.post(f"/api/actions/{name}", json=payload or {}, headers=headers or {})
    return _call


@pytest.fixture
def campaign_a(call_action, headers_a):
    response = call_action("createCampaign", {"name": "Weekly Dev Tips"}, headers_a)
    assert response.status_code == 200
    return response.json()["data"]["campaign"]


@pytest.fixture
def issue_a(call_action, headers_a, campaign_a):
    response = call_action(
        "createIssue",
        {"campaignId": campaign_a["id"], "subjectLine": "Issue 1"},
        headers_a,
    )
    assert response.status_code == 200
    return response.json()["data"]["issue"]
