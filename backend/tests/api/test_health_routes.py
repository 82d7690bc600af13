"""Health API - liveness and readiness probes.

Invariants:
    - Readiness always answers: any store failure is a 503, never a 500
"""

from portfolio.infrastructure.database import DatabaseSessionManager


async def test_liveness(client):
    res = await client.get("/api/health/")
    assert res.status_code == 200
    assert res.json()["status"] == "healthy"


async def test_readiness_with_database(client):
    res = await client.get("/api/health/ready")
    assert res.status_code == 200
    assert res.json()["checks"]["database"] == "healthy"


async def test_readiness_without_database(app, client):
    app.state.db = None
    res = await client.get("/api/health/ready")
    assert res.status_code == 503
    assert res.json()["reason"] == "database_unavailable"


async def test_readiness_when_driver_raises_unexpected_error(app, client, test_engine):
    def broken_factory():
        raise RuntimeError("driver exploded")

    app.state.db = DatabaseSessionManager.from_session_factory(
        test_engine, broken_factory,
    )

    res = await client.get("/api/health/ready")

    assert res.status_code == 503
    assert res.json()["status"] == "not_ready"
