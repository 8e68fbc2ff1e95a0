"""API test fixtures — FastAPI app driven through httpx.

Invariants:
    - Every client runs the real lifespan, so the enterprise lookup is wired
      exactly as in production
    - dependency_overrides cleared after each test
"""

import pytest
from httpx import ASGITransport, AsyncClient

from fnfun.main import app, lifespan


@pytest.fixture
async def client():
    """FastAPI test client with lifespan startup/shutdown."""
    async with lifespan(app):
        async with AsyncClient(
            transport=ASGITransport(app=app), base_url="http://test",
        ) as c:
            yield c
    app.dependency_overrides.clear()
