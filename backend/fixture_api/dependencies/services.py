"""
Service dependencies built from the application state.
"""
from fastapi import Depends, Request
from motor.motor_asyncio import AsyncIOMotorClient

from fixture_api.config import Settings
from fixture_api.database.connections import get_mongo_client
from fixture_api.services.database_service import DatabaseService
from fixture_api.services.fixture_service import FixtureService


async def get_app_settings(request: Request) -> Settings:
    """Dependency returning the settings the app was created with."""
    return request.app.state.settings


async def get_fixture_service(
    client: AsyncIOMotorClient = Depends(get_mongo_client),
    settings: Settings = Depends(get_app_settings),
) -> FixtureService:
    """Dependency to get FixtureService instance."""
    return FixtureService(client, settings.fixtures_dir)


async def get_database_service(
    client: AsyncIOMotorClient = Depends(get_mongo_client),
) -> DatabaseService:
    """Dependency to get DatabaseService instance."""
    return DatabaseService(client)
