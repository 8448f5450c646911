"""API test fixtures — fresh app + store per test, httpx async client.

Invariants:
    - Every test gets its own UserStore seeded with the three default users
    - Settings built explicitly, never from the cached get_settings()
    - raise_app_exceptions=False so the catch-all 500 handler is observable

Design Decisions:
    - ASGITransport over TestClient: async tests, same client as production callers
"""

import pytest
from httpx import ASGITransport, AsyncClient

from user_api.config import Settings
from user_api.core.user_store import UserStore
from user_api.main import create_app


@pytest.fixture
def settings():
    return Settings(log_format="text", log_level="WARNING")


@pytest.fixture
def store():
    return UserStore()


@pytest.fixture
def test_app(settings, store):
    return create_app(settings=settings, store=store)


@pytest.fixture
async def client(test_app):
    async with AsyncClient(
        transport=ASGITransport(app=test_app, raise_app_exceptions=False),
        base_url="http://test",
    ) as c:
        yield c
