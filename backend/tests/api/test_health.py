"""Health Probes — liveness always 200, readiness follows database reachability."""

import showcase.infrastructure.database as db_module


async def test_liveness(client):
    res = await client.get("/api/v1/health/")
    assert res.status_code == 200
    assert res.json()["status"] == "healthy"


async def test_readiness_with_database(client):
    res = await client.get("/api/v1/health/ready")
    assert res.status_code == 200
    assert res.json() == {"status": "ready", "checks": {"database": "healthy"}}


async def test_readiness_without_database(client, monkeypatch):
    monkeypatch.setattr(db_module, "db_manager", None)

    res = await client.get("/api/v1/health/ready")
    assert res.status_code == 503
    assert res.json()["reason"] == "database_unavailable"
