"""
Shared fixtures: an in-memory SQLite database and JWT helpers.

Environment variables are set before `app` is imported because the
settings and the engine are created at import time.
"""
import os
from datetime import datetime, timedelta, timezone

os.environ["DATABASE_URL"] = "sqlite://"
os.environ["JWT_SECRET"] = "test-secret"

import pytest
from fastapi.testclient import TestClient
from jose import jwt
from sqlmodel import Session, SQLModel

from app.core.config import get_settings
from app.database import engine
from app.main import app

API = "/api"


def make_token(sub: str, expires_in: int = 3600, **claims) -> str:
    payload = {
        "sub": sub,
        "exp": datetime.now(timezone.utc) + timedelta(seconds=expires_in),
        **claims,
    }
    return jwt.encode(payload, "test-secret", algorithm="HS256")


def auth(sub: str, **claims) -> dict[str, str]:
    return {"Authorization": f"Bearer {make_token(sub, **claims)}"}


@pytest.fixture(autouse=True)
def reset_db():
    SQLModel.metadata.drop_all(engine)
    SQLModel.metadata.create_all(engine)
    yield


@pytest.fixture
def session():
    with Session(engine) as session:
        yield session


@pytest.fixture
def client():
    return TestClient(app)


@pytest.fixture
def settings():
    return get_settings()


@pytest.fixture
def login(client):
    """Hit the profile endpoint so the user row exists, return headers."""

    def _login(sub: str, **claims) -> dict[str, str]:
        headers = auth(sub, email=f"{sub}@example.com", **claims)
        resp = client.get(f"{API}/auth/user", headers=headers)
        assert resp.status_code == 200
        return headers

    return _login


@pytest.fixture
def create_plan(client):
    def _create(headers: dict[str, str], **overrides) -> dict:
        body = {
            "destination": "Tokyo",
            "startDate": "2025-03-01",
            "endDate": "2025-03-10",
            "description": "Cherry blossoms",
            "interests": ["Food", "Culture"],
        }
        body.update(overrides)
        resp = client.post(f"{API}/travel-plans", json=body, headers=headers)
        assert resp.status_code == 201, resp.text
        return resp.json()

    return _create
