"""
Fixtures for integration tests
"""

import pytest
from httpx import ASGITransport, AsyncClient

from pokernight.core.config import Settings, get_settings
from pokernight.main import app


@pytest.fixture
def test_settings():
    """Settings for the API under test (ignores any local .env)."""
    return Settings(_env_file=None)


@pytest.fixture
async def client(test_settings):
    """
    HTTP client for testing API endpoints.

    Overrides the settings dependency so tests don't depend on the environment.
    """
    app.dependency_overrides[get_settings] = lambda: test_settings

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()
