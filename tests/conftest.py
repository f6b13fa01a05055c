"""Shared test configuration and fixtures for FoodBridge tests"""

import logging

import fakeredis
import pytest
import redis
from fastapi.testclient import TestClient

from foodbridge.auth.session import ADMIN_EMAIL, ADMIN_PASSWORD, AuthSession
from foodbridge.main import app
from foodbridge.models.database import get_redis
from foodbridge.models.volunteer import VolunteerRecord
from foodbridge.services.admin_login_log import AdminLoginLog
from foodbridge.services.record_store import RecordStore
from foodbridge.services.volunteer_repository import VolunteerRepository

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


@pytest.fixture
def redis_client():
    """Isolated in-memory Redis for one test"""
    client = fakeredis.FakeRedis(server=fakeredis.FakeServer(), decode_responses=True)
    yield client
    client.flushall()


@pytest.fixture
def broken_redis(redis_client, monkeypatch):
    """Redis client whose every command fails as if the server were down"""

    def _fail(*args, **kwargs):
        raise redis.ConnectionError("Connection refused")

    for command in ("get", "set", "setex", "delete", "ping"):
        monkeypatch.setattr(redis_client, command, _fail)
    return redis_client


@pytest.fixture
def record_store(redis_client):
    return RecordStore(redis_client)


@pytest.fixture
def volunteer_repository(record_store):
    return VolunteerRepository(record_store)


@pytest.fixture
def admin_login_log(record_store):
    return AdminLoginLog(record_store)


@pytest.fixture
def auth_session(admin_login_log):
    return AuthSession(admin_login_log)


@pytest.fixture
def make_volunteer():
    """Factory for volunteer records with sensible defaults"""

    def _make_volunteer(**overrides) -> VolunteerRecord:
        data = {
            "first_name": "Mike",
            "last_name": "Chen",
            "email": "mike@x.com",
            "phone": "(555) 123-4567",
            "availability": "weekends",
            "skills": ["Driving"],
            "selected_slots": ["1"],
        }
        data.update(overrides)
        return VolunteerRecord(**data)

    return _make_volunteer


@pytest.fixture
def api_client(redis_client):
    """Test client wired to the in-memory Redis with a fresh, logged-out session"""
    original_overrides = app.dependency_overrides.copy()
    original_session = app.state.auth_session

    app.dependency_overrides.clear()
    app.dependency_overrides[get_redis] = lambda: redis_client
    app.state.auth_session = AuthSession(AdminLoginLog(RecordStore(redis_client)))

    client = TestClient(app)

    yield client

    app.dependency_overrides.clear()
    app.dependency_overrides.update(original_overrides)
    app.state.auth_session = original_session


@pytest.fixture
def admin_client(api_client):
    """Test client with the admin already logged in"""
    response = api_client.post(
        "/admin/login", json={"email": ADMIN_EMAIL, "password": ADMIN_PASSWORD}
    )
    assert response.status_code == 200
    return api_client
