"""Shared fixtures: in-memory database, API client and authenticated users."""

import os

os.environ["APP_ENV"] = "test"
os.environ["DATABASE_URL"] = "sqlite:///:memory:"
os.environ.setdefault("JWT_SECRET_KEY", "test-secret-key")

from datetime import date

import pytest
from fastapi.testclient import TestClient

from src.api.transactions.router import get_clock
from src.database.db import Base, engine, init_db
from src.main import app


@pytest.fixture(autouse=True)
def database():
    """Fresh schema for every test."""
    init_db()
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def client():
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def freeze_today():
    """Pin the date seen by the transactions router."""

    def _freeze(day: date):
        app.dependency_overrides[get_clock] = lambda: (lambda: day)

    return _freeze


def register_and_login(client, email="ana@example.com", password="secret123", name="Ana"):
    response = client.post("/auth/register", json={"email": email, "name": name, "password": password})
    assert response.status_code == 201
    response = client.post("/auth/login", json={"email": email, "password": password})
    assert response.status_code == 200
    return {"Authorization": f"Bearer {response.json()['data']['token']}"}


@pytest.fixture
def auth_headers(client):
    return register_and_login(client)


@pytest.fixture
def other_headers(client):
    return register_and_login(client, email="bruno@example.com", name="Bruno")
