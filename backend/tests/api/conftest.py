"""API test fixtures — FastAPI test client with an injected claimable service.

Invariants:
    - Every test gets a fresh ClaimableAmountService driven by the fake clock
    - get_claimable_service dependency overridden; lifespan is not run

Design Decisions:
    - httpx ASGITransport: in-process requests, no server
"""

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from streampay.api.dependencies import get_claimable_service
from streampay.main import app
from streampay.services.claimable_service import ClaimableAmountService


@pytest.fixture
def service(clock):
    return ClaimableAmountService(cache_ttl_ms=10_000, clock=clock)


@pytest_asyncio.fixture
async def client(service):
    """FastAPI test client with the service dependency overridden."""
    app.dependency_overrides[get_claimable_service] = lambda: service
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()
