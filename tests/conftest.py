# tests/conftest.py
import copy
from types import SimpleNamespace

import pytest
from fastapi.testclient import TestClient

from vlogsphere.config import settings
from vlogsphere.db import redis_client
from vlogsphere.main import app
from vlogsphere.security.main import create_access_token


class FakeCollection:
    """Just enough of an AsyncIOMotorCollection for the vlog routes."""

    def __init__(self):
        self.docs = {}
        self.find_calls = 0

    async def insert_one(self, doc):
        self.docs[doc["_id"]] = copy.deepcopy(doc)
        return SimpleNamespace(inserted_id=doc["_id"])

    async def find_one(self, query):
        self.find_calls += 1
        doc = self.docs.get(query.get("_id"))
        return copy.deepcopy(doc) if doc else None

    async def update_one(self, query, update):
        doc = self.docs.get(query.get("_id"))
        if doc is None:
            return SimpleNamespace(matched_count=0, modified_count=0)
        doc.update(copy.deepcopy(update.get("$set", {})))
        return SimpleNamespace(matched_count=1, modified_count=1)


class FakeDB:
    def __init__(self):
        self.vlogs = FakeCollection()


class FakeRedis:
    def __init__(self):
        self.store = {}

    async def get(self, key):
        return self.store.get(key)

    async def set(self, key, value, ex=None):
        self.store[key] = value

    async def delete(self, key):
        self.store.pop(key, None)


@pytest.fixture
def db():
    fake = FakeDB()
    app.mongodb = fake
    yield fake
    del app.mongodb


@pytest.fixture
def cache(monkeypatch):
    fake = FakeRedis()
    monkeypatch.setattr(redis_client, "redis_client", fake)
    return fake


@pytest.fixture
def client(db, cache):
    # no context manager: the lifespan would try to reach a real MongoDB
    return TestClient(app, base_url="http://testserver")


@pytest.fixture
def ai_tagging(monkeypatch):
    monkeypatch.setattr(settings, "AI_TAGGING_ENABLED", True)
    monkeypatch.setattr(settings, "MIN_DESCRIPTION_LENGTH", 50)


def auth_headers(user_id="user-1", username="alice", **extra):
    token = create_access_token({"user_id": user_id, "username": username, **extra})
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def headers():
    return auth_headers
