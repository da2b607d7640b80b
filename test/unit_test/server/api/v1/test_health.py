import pytest
from httpx import AsyncClient

from rockmundo import __version__

pytestmark = pytest.mark.asyncio


async def test_health_check(client: AsyncClient):
    response = await client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


async def test_version(client: AsyncClient):
    response = await client.get("/version")
    assert response.status_code == 200
    assert response.json() == {"version": __version__, "schema_version": "v1"}


async def test_request_timing_header(client: AsyncClient):
    response = await client.get("/health")
    assert float(response.headers["x-process-time"]) >= 0


async def test_openapi_lists_functions(client: AsyncClient):
    response = await client.get("/api/v1/openapi.json")
    assert response.status_code == 200
    paths = response.json()["paths"]
    for function in ("complete-major-event", "complete-festival-performance", "complete-jam-session", "progression"):
        assert f"/functions/v1/{function}" in paths
