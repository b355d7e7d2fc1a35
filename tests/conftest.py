"""
Pytest configuration and fixtures for testing.

This file provides reusable test fixtures for:
- In-memory MongoDB (mongomock) injected into the app
- FastAPI test client
- Signed-up users and their auth headers
"""

import mongomock
import pytest
from fastapi.testclient import TestClient

from jobtree.core.config import Settings
from jobtree.main import create_app


@pytest.fixture
def settings():
    """Test settings; low bcrypt cost keeps the suite fast."""
    return Settings(mongo_url="mongodb://localhost/jobtree_test", bcrypt_rounds=4)


@pytest.fixture
def mongo_client():
    """Fresh in-memory MongoDB for each test."""
    return mongomock.MongoClient(tz_aware=True)


@pytest.fixture
def client(settings, mongo_client):
    """
    FastAPI test client. Entering the context runs startup, which creates
    the unique indexes.
    """
    app = create_app(settings, mongo_client)
    with TestClient(app) as test_client:
        yield test_client


def signup(client, name, email, password):
    return client.post("/users", json={"user": name, "email": email, "password": password})


@pytest.fixture
def alice(client):
    """Signed-up user; returns the created user record."""
    response = signup(client, "alice", "a@x.com", "pw1")
    assert response.status_code == 201
    return response.json()


@pytest.fixture
def bob(client):
    response = signup(client, "bob", "b@x.com", "pw2")
    assert response.status_code == 201
    return response.json()


@pytest.fixture
def alice_headers(alice):
    return {"Authorization": alice["accessToken"]}


@pytest.fixture
def bob_headers(bob):
    return {"Authorization": bob["accessToken"]}
