import os
import uuid

import mongomock
import pytest
from pymongo import MongoClient

from app.utils.config import settings


# Pre-computed so tests never pay for bcrypt
TEST_PASSWORD_HASH = "$2b$12$C6UzMDM.H6dfI/f/IKcEeO5Q7GkE2tD3pQbX1F7vYd0yH1b4tq6bK"


@pytest.fixture(name="database")
def database_fixture():
    client = mongomock.MongoClient()
    yield client["blog_db"]
    client.close()


@pytest.fixture(name="seed_settings", autouse=True)
def seed_settings_fixture(monkeypatch):
    monkeypatch.setattr(settings, "seed_admin_username", "admin")
    monkeypatch.setattr(settings, "seed_admin_email", "admin@example.com")
    monkeypatch.setattr(settings, "seed_admin_password_hash", TEST_PASSWORD_HASH)


@pytest.fixture(name="live_database")
def live_database_fixture():
    uri = os.environ.get("MONGO_TEST_URI")
    if not uri:
        pytest.skip("MONGO_TEST_URI not set")
    client = MongoClient(uri, serverSelectionTimeoutMS=5000, tz_aware=True)
    name = f"blog_db_test_{uuid.uuid4().hex[:8]}"
    yield client[name]
    client.drop_database(name)
    client.close()
