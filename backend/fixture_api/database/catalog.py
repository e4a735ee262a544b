"""
Existence checks against the server's catalog metadata.

Both checks are read-only and safe to call for databases or collections
that were never created.
"""
from motor.motor_asyncio import AsyncIOMotorClient


async def collection_exists(
    client: AsyncIOMotorClient,
    db_name: str,
    collection_name: str,
) -> bool:
    """Check whether a collection exists in a database (exact name match)."""
    db = client[db_name]
    collection_names = await db.list_collection_names()
    return collection_name in collection_names


async def database_exists(client: AsyncIOMotorClient, db_name: str) -> bool:
    """Check whether the server knows a database (exact name match)."""
    database_names = await client.list_database_names()
    return db_name in database_names
