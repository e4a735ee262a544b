"""
Service layer for fixture and database operations.
"""
from fixture_api.services.database_service import DatabaseService
from fixture_api.services.fixture_catalog import list_fixtures
from fixture_api.services.fixture_service import FixtureService

__all__ = [
    "DatabaseService",
    "FixtureService",
    "list_fixtures",
]
