"""Error Handling - verifies the 500 bucket stays generic and separate from 400/404.

Invariants:
    - StoreError -> 500 {"message": "Internal server error"}, cause never leaked
    - Any unexpected exception -> 500 with the same generic message
"""

from httpx import ASGITransport, AsyncClient

from portfolio.api.dependencies import get_project_repository
from portfolio.core.errors import StoreError


class _FailingRepository:
    def __init__(self, exc: Exception):
        self._exc = exc

    async def list(self, filters=None):
        raise self._exc

    async def get_by_id(self, record_id):
        raise self._exc


async def test_store_error_returns_generic_500(app, client):
    exc = StoreError("select", "project", "lost its connection")
    app.dependency_overrides[get_project_repository] = lambda: _FailingRepository(exc)

    res = await client.get("/api/projects")

    assert res.status_code == 500
    body = res.json()
    assert body["message"] == "Internal server error"
    assert body["error"]["code"] == "STORE_ERROR"
    assert "connection" not in res.text


async def test_unexpected_exception_returns_generic_500(app):
    failing = _FailingRepository(RuntimeError("secret internals"))
    app.dependency_overrides[get_project_repository] = lambda: failing

    async with AsyncClient(
        transport=ASGITransport(app=app, raise_app_exceptions=False),
        base_url="http://test",
    ) as c:
        res = await c.get("/api/projects/abc")

    assert res.status_code == 500
    assert res.json()["message"] == "Internal server error"
    assert "secret" not in res.text


async def test_not_found_is_not_an_internal_error(client):
    res = await client.get("/api/education/none")
    assert res.status_code == 404
    assert res.json()["error"]["code"] == "RECORD_NOT_FOUND"


async def test_handled_errors_carry_cors_headers(client):
    origin = "http://localhost:5173"

    not_found = await client.get("/api/projects/none", headers={"origin": origin})
    invalid = await client.post(
        "/api/projects", json={"title": "P", "description": "D", "sortOrder": 2**70},
        headers={"origin": origin},
    )

    assert not_found.status_code == 404
    assert invalid.status_code == 400
    for res in (not_found, invalid):
        assert res.headers["access-control-allow-origin"] == origin
