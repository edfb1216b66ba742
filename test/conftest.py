import os

os.environ.setdefault("LOG_FILE", "")
os.environ.setdefault("BCRYPT_ROUNDS", "4")
os.environ.setdefault("JWT_SECRET_KEY", "test-secret-key")

import mongomock
import pytest
from fastapi.testclient import TestClient

from config import settings
from database import connection
from main import app


@pytest.fixture(scope="function")
def mongo_client():
    """In-memory MongoDB client plugged in place of the real one."""
    client = mongomock.MongoClient()
    connection.set_client(client)
    connection.ensure_indexes()
    try:
        yield client
    finally:
        connection.set_client(None)


@pytest.fixture(scope="function")
def users_collection(mongo_client):
    return mongo_client[settings.MONGO_DB][connection.USERS_COLLECTION_NAME]


@pytest.fixture(scope="function")
def client(mongo_client):
    # no context manager: the lifespan would ping a real server
    return TestClient(app)


@pytest.fixture
def user_data():
    return {
        "username": "alice",
        "email": "alice@example.com",
        "password": "wonderland1",
        "fullName": "Alice Liddell",
    }


@pytest.fixture
def registered_user(client, user_data):
    resp = client.post("/users/register", json=user_data)
    assert resp.status_code == 201
    return resp.json()["user"]


@pytest.fixture
def auth_headers(client, registered_user, user_data):
    resp = client.post(
        "/users/login",
        json={"username": user_data["username"], "password": user_data["password"]},
    )
    assert resp.status_code == 200
    return {"Authorization": f"Bearer {resp.json()['token']}"}
