import pytest
from httpx import ASGITransport, AsyncClient

from lenstrace.main import app


@pytest.fixture
async def test_client() -> AsyncClient:
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client

    app.dependency_overrides.clear()
