"""
MongoDB connection management.

One client is created at startup, kept on ``app.state`` and handed to
services through the ``get_mongo_client`` dependency.
"""
import logging

from fastapi import Request
from motor.motor_asyncio import AsyncIOMotorClient
from pymongo.errors import PyMongoError

from fixture_api.core.exceptions import DatabaseConnectionError

logger = logging.getLogger(__name__)


async def connect_database(uri: str) -> AsyncIOMotorClient:
    """
    Create the MongoDB client and verify the server answers.

    Raises:
        DatabaseConnectionError: If the client cannot be created or the
            server does not answer a ping.
    """
    try:
        client = AsyncIOMotorClient(uri)
        await client.admin.command("ping")
    except PyMongoError as e:
        raise DatabaseConnectionError(f"Failed to connect to MongoDB at {uri}: {e}") from e

    logger.info(f"Connected to MongoDB at {uri}")
    return client


async def close_database(client: AsyncIOMotorClient) -> None:
    """Close the MongoDB client."""
    client.close()
    logger.info("Database connection closed")


async def get_mongo_client(request: Request) -> AsyncIOMotorClient:
    """Dependency returning the client opened at startup."""
    return request.app.state.mongo_client
