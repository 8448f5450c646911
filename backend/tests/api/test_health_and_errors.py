"""Health & Global Handlers — liveness probe, unknown routes, catch-all 500.

Tests cover:
    - GET /health returns 200 with message and a UTC timestamp
    - unknown paths and unsupported methods return the route-not-found envelope
    - unhandled exceptions return a generic 500 without internal details
    - expose_error_details opts into including the exception text
"""

from datetime import datetime

from httpx import ASGITransport, AsyncClient

from user_api.config import Settings
from user_api.core.user_store import UserStore
from user_api.main import create_app


class _ExplodingStore(UserStore):
    def list_users(self):
        raise RuntimeError("secret internal failure")


async def test_health_check(client):
    res = await client.get("/health")
    assert res.status_code == 200
    body = res.json()
    assert body["success"] is True
    assert body["message"] == "Server is running"
    assert datetime.fromisoformat(body["timestamp"].replace("Z", "+00:00"))


async def test_health_independent_of_store(settings):
    app = create_app(settings=settings, store=_ExplodingStore())
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        res = await c.get("/health")
    assert res.status_code == 200


async def test_unknown_route_404(client):
    res = await client.get("/api/unknown")
    assert res.status_code == 404
    body = res.json()
    assert body["success"] is False
    assert body["message"] == "Route not found"
    assert body["error"]["code"] == "ROUTE_NOT_FOUND"


async def test_unsupported_method_404(client):
    res = await client.delete("/api/users")
    assert res.status_code == 404
    assert res.json()["message"] == "Route not found"


async def _get_users_with(settings):
    app = create_app(settings=settings, store=_ExplodingStore())
    async with AsyncClient(
        transport=ASGITransport(app=app, raise_app_exceptions=False),
        base_url="http://test",
    ) as c:
        return await c.get("/api/users")


async def test_unhandled_exception_returns_generic_500(settings):
    res = await _get_users_with(settings)
    assert res.status_code == 500
    body = res.json()
    assert body["success"] is False
    assert body["message"] == "Something went wrong!"
    assert "secret internal failure" not in res.text


async def test_unhandled_exception_detail_when_exposed():
    settings = Settings(log_format="text", expose_error_details=True)
    res = await _get_users_with(settings)
    assert res.status_code == 500
    assert res.json()["error"]["detail"] == "secret internal failure"


async def test_cors_header_present(client):
    res = await client.get("/api/users", headers={"Origin": "http://example.com"})
    assert res.headers["access-control-allow-origin"] == "*"
