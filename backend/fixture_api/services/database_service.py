"""
Destructive operations and collection dumps.

Drops are guarded by an existence check so repeating them is a no-op
rather than an error.
"""
import logging
from typing import Any

from motor.motor_asyncio import AsyncIOMotorClient

from fixture_api.database.catalog import collection_exists, database_exists

logger = logging.getLogger(__name__)


class DatabaseService:
    """Service for dropping and reading collections and databases."""

    def __init__(self, client: AsyncIOMotorClient):
        """Initialize with the shared MongoDB client."""
        self.client = client

    async def drop_collection(self, db_name: str, collection_name: str) -> bool:
        """
        Drop a collection if it exists.

        Returns:
            True if a drop was issued, False if the collection was absent.
        """
        if not await collection_exists(self.client, db_name, collection_name):
            logger.info(f"Collection doesn't exist: {db_name}.{collection_name}")
            return False

        await self.client[db_name].drop_collection(collection_name)
        logger.info(f"Dropped collection: {db_name}.{collection_name}")
        return True

    async def drop_database(self, db_name: str) -> bool:
        """
        Drop a database if it exists.

        The drop is awaited, so the database is gone from the server
        catalog once this returns.

        Returns:
            True if a drop was issued, False if the database was absent.
        """
        if not await database_exists(self.client, db_name):
            logger.info(f"Database doesn't exist: {db_name}")
            return False

        await self.client.drop_database(db_name)
        logger.info(f"Dropped database: {db_name}")
        return True

    async def get_collection(self, db_name: str, collection_name: str) -> list[dict[str, Any]]:
        """Return every document of a collection; empty if it does not exist."""
        cursor = self.client[db_name][collection_name].find()
        return await cursor.to_list(length=None)
