from contextlib import asynccontextmanager

import pytest
from httpx import ASGITransport, AsyncClient

from invitations.main import app


@pytest.fixture
def client_factory():
    """Build a test client with the given dependency overrides applied."""

    @asynccontextmanager
    async def factory(overrides: dict | None = None):
        app.dependency_overrides.update(overrides or {})
        transport = ASGITransport(app=app)
        try:
            async with AsyncClient(transport=transport, base_url="http://test") as client:
                yield client
        finally:
            app.dependency_overrides.clear()

    return factory


@pytest.fixture
async def client(client_factory):
    """Create a test client without overrides."""
    async with client_factory() as ac:
        yield ac
