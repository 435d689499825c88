"""Shared fixtures: in-memory SQLite database and an API client bound to it."""

import os

# Must be set before the application settings are imported
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["AUTO_CREATE_TABLES"] = "false"

import pytest
from fastapi.testclient import TestClient
from sqlmodel import Session, SQLModel

from app.core.config import settings
from app.db import base as _models  # noqa: F401
from app.db.session import build_engine, get_db
from app.main import app

# Cheap hashing keeps the suite fast
settings.BCRYPT_ROUNDS = 4


@pytest.fixture
def engine():
    test_engine = build_engine("sqlite://")
    SQLModel.metadata.create_all(test_engine)
    yield test_engine
    SQLModel.metadata.drop_all(test_engine)
    test_engine.dispose()


@pytest.fixture
def client(engine):
    def override_get_db():
        with Session(engine) as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def register(client):
    """Register a user and return the auth payload with ready-made headers."""

    def _register(email: str = "lifter@example.com", password: str = "strongpass1") -> dict:
        response = client.post("/auth/register", json={"email": email, "password": password})
        assert response.status_code == 201, response.text
        body = response.json()
        body["headers"] = {"Authorization": f"Bearer {body['access_token']}"}
        return body

    return _register


@pytest.fixture
def lifter(register):
    return register()


@pytest.fixture
def other(register):
    return register("other@example.com")
