"""
Database module - MongoDB connection and catalog checks.
"""
from fixture_api.database.connections import (
    connect_database,
    close_database,
    get_mongo_client,
)
from fixture_api.database.catalog import collection_exists, database_exists

__all__ = [
    "connect_database",
    "close_database",
    "get_mongo_client",
    "collection_exists",
    "database_exists",
]
