"""
Backend-specific test fixtures and configuration.

These fixtures extend the global fixtures with an application wired to the
mock database, and response assertion helpers.
"""

import pytest
from fastapi.testclient import TestClient


# =============================================================================
# App Fixtures
# =============================================================================

@pytest.fixture
def app(settings, mock_mongo_client):
    """
    Create the FastAPI app with the mock MongoDB client.

    The client is handed to the app, so startup does not connect anywhere.
    """
    from fixture_api.main import create_app

    return create_app(settings, mongo_client=mock_mongo_client)


@pytest.fixture
def client(app):
    """TestClient running the app lifespan."""
    with TestClient(app) as c:
        yield c


# =============================================================================
# Service Fixtures
# =============================================================================

@pytest.fixture
def fixture_service(mock_mongo_client, fixtures_root):
    """FixtureService bound to the mock client and sample fixtures."""
    from fixture_api.services.fixture_service import FixtureService

    return FixtureService(mock_mongo_client, fixtures_root)


@pytest.fixture
def database_service(mock_mongo_client):
    """DatabaseService bound to the mock client."""
    from fixture_api.services.database_service import DatabaseService

    return DatabaseService(mock_mongo_client)


# =============================================================================
# Response Assertion Helpers
# =============================================================================

@pytest.fixture
def assert_error_response():
    """Helper to assert a plain-text error response."""
    def _assert(response, status_code: int, text_contains: str = None):
        assert response.status_code == status_code
        assert response.headers["content-type"].startswith("text/plain")
        if text_contains:
            assert text_contains.lower() in response.text.lower()
    return _assert
