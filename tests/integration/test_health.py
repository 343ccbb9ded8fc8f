import pytest

@pytest.mark.asyncio
@pytest.mark.integration
async def test_liveness(client, settings):
    r = await client.get(f"{settings.api_prefix}/health/liveness")
    assert r.status_code == 200
    assert r.json() == {"status": "ok"}

@pytest.mark.asyncio
@pytest.mark.integration
async def test_readiness(client, settings):
    r = await client.get(f"{settings.api_prefix}/health/readiness")
    assert r.status_code == 200
    assert r.json() == {"status": "ready"}

@pytest.mark.asyncio
@pytest.mark.integration
async def test_root(client, settings):
    r = await client.get("/")
    assert r.status_code == 200
    assert r.json() == {"service": settings.app_name, "status": "ok"}
