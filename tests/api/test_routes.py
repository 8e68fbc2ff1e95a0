"""API Routes — health, urls, enterprises, compositions.

Tests cover:
    - Health probe returns service name and version
    - /urls/base applies base_http_url; /urls/localhost/{port} uses the bound host
    - Invalid port → 400 VALIDATION_ERROR envelope
    - /enterprises/{ern} uses the lookup wired from settings
    - Blank ERN → 404 RESOURCE_NOT_FOUND envelope
    - Injected lookup can be swapped through dependency_overrides
    - Unhandled exception → 500 INTERNAL_ERROR without internal details
    - /compositions: compose → 16, and_then → 10 for value 3
    - /compositions/fused-map: increment then square in one pass
"""

from httpx import ASGITransport, AsyncClient

from fnfun.api.routes.enterprises import get_enterprise_lookup
from fnfun.core.multiple_argument_lists import lookup_enterprise
from fnfun.main import app, lifespan
from fnfun.version import __version__


# ─── health ──────────────────────────────────────────────────────

async def test_health(client):
    res = await client.get("/api/v1/health/")
    assert res.status_code == 200
    assert res.json() == {
        "status": "healthy", "service": "fnfun-api", "version": __version__,
    }


# ─── urls ────────────────────────────────────────────────────────

async def test_base_url(client):
    res = await client.get(
        "/api/v1/urls/base", params={"host": "localhost", "port": 8080},
    )
    assert res.status_code == 200
    assert res.json() == {
        "host": "localhost", "port": 8080, "url": "http://localhost:8080",
    }


async def test_localhost_url_uses_partially_applied_function(client):
    res = await client.get("/api/v1/urls/localhost/80")
    assert res.status_code == 200
    assert res.json()["url"] == "http://localhost:80"


async def test_base_url_invalid_port_returns_validation_envelope(client):
    res = await client.get(
        "/api/v1/urls/base", params={"host": "localhost", "port": 70000},
    )
    assert res.status_code == 400
    error = res.json()["error"]
    assert error["code"] == "VALIDATION_ERROR"
    assert any(d["field"] == "query.port" for d in error["details"])


async def test_base_url_missing_host(client):
    res = await client.get("/api/v1/urls/base", params={"port": 8080})
    assert res.status_code == 400


# ─── enterprises ─────────────────────────────────────────────────

async def test_enterprise_found_with_wired_lookup(client):
    res = await client.get("/api/v1/enterprises/ENT123")
    assert res.status_code == 200
    assert res.json() == {"ern": "ENT123", "source": "http://localhost:8080"}


async def test_blank_enterprise_returns_404(client):
    res = await client.get("/api/v1/enterprises/%20")
    assert res.status_code == 404
    error = res.json()["error"]
    assert error["code"] == "RESOURCE_NOT_FOUND"
    assert error["category"] == "resource_not_found"


async def test_enterprise_lookup_can_be_overridden(client):
    app.dependency_overrides[get_enterprise_lookup] = (
        lambda: lookup_enterprise("directory.test", 9090)
    )
    res = await client.get("/api/v1/enterprises/ENT9")
    assert res.json()["source"] == "http://directory.test:9090"


async def test_unhandled_exception_returns_generic_500():
    def broken_lookup(ern):
        raise RuntimeError("secret internal detail")

    app.dependency_overrides[get_enterprise_lookup] = lambda: broken_lookup
    try:
        async with lifespan(app):
            async with AsyncClient(
                transport=ASGITransport(app=app, raise_app_exceptions=False),
                base_url="http://test",
            ) as c:
                res = await c.get("/api/v1/enterprises/ENT1")
    finally:
        app.dependency_overrides.clear()
    assert res.status_code == 500
    assert res.json()["error"]["code"] == "INTERNAL_ERROR"
    assert "secret" not in res.text


# ─── compositions ────────────────────────────────────────────────

async def test_compose_order(client):
    res = await client.post(
        "/api/v1/compositions", json={"order": "compose", "value": 3},
    )
    assert res.status_code == 200
    assert res.json() == {"order": "compose", "value": 3, "result": 16}


async def test_and_then_order(client):
    res = await client.post(
        "/api/v1/compositions", json={"order": "and_then", "value": 3},
    )
    assert res.json()["result"] == 10


async def test_unknown_order_rejected(client):
    res = await client.post(
        "/api/v1/compositions", json={"order": "sideways", "value": 3},
    )
    assert res.status_code == 400
    assert res.json()["error"]["code"] == "VALIDATION_ERROR"


async def test_fused_map(client):
    res = await client.post(
        "/api/v1/compositions/fused-map", json={"numbers": [1, 2, 3, 4, 5]},
    )
    assert res.status_code == 200
    assert res.json()["results"] == [4, 9, 16, 25, 36]


async def test_fused_map_rejects_out_of_range_numbers(client):
    res = await client.post(
        "/api/v1/compositions/fused-map", json={"numbers": [1, 10**7]},
    )
    assert res.status_code == 400
