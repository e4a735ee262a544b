"""
Global test fixtures for the DB fixture API.

This module provides shared fixtures for all tests including:
- Mock MongoDB (mongomock-motor)
- A fixtures directory populated with sample fixtures
- Settings pointing at that directory
"""

import sys
from pathlib import Path

import pytest
import pytest_asyncio

# Add backend to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "backend"))

from sample_fixtures import ORDERS_MODULE, PRODUCTS, USERS, write_json


# =============================================================================
# Filesystem Fixtures
# =============================================================================

@pytest.fixture
def fixtures_root(tmp_path) -> Path:
    """
    Create a fixtures directory with sample fixtures.

    Layout:
        users/seed.json          -> collection "users" (3 documents)
        shop/products.json       -> collection "products" (2 documents)
        shop/orders.py           -> collection "orders" (4 documents)
    """
    root = tmp_path / "fixtures"
    write_json(root / "users" / "seed.json", {"collection": "users", "documents": USERS})
    write_json(root / "shop" / "products.json", PRODUCTS)
    (root / "shop" / "orders.py").write_text(ORDERS_MODULE, encoding="utf-8")
    return root


@pytest.fixture
def settings(fixtures_root):
    """Settings pointing at the sample fixtures directory."""
    from fixture_api.config import Settings

    return Settings(
        dbhost="mongodb://test:27017",
        fixtures_dir=str(fixtures_root),
        app_env="test",
    )


# =============================================================================
# MongoDB Fixtures (mongomock-motor)
# =============================================================================

@pytest.fixture
def mock_mongo_client():
    """
    Create a mock async MongoDB client using mongomock-motor.

    The client is created outside any event loop so it can be shared with
    the TestClient's loop.
    """
    from mongomock_motor import AsyncMongoMockClient

    client = AsyncMongoMockClient()
    yield client
    client.close()


@pytest_asyncio.fixture
async def mock_async_mongo_client(mock_mongo_client):
    """Async flavour of the mock client, for service-level tests."""
    yield mock_mongo_client
