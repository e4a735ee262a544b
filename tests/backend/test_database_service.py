"""
Tests for destructive operations and collection dumps.
"""

import pytest
from unittest.mock import AsyncMock, MagicMock, patch


class TestDropCollection:
    """Tests for DatabaseService.drop_collection."""

    @pytest.mark.asyncio
    async def test_drops_existing_collection(self, database_service, mock_async_mongo_client):
        await mock_async_mongo_client["testdb"]["users"].insert_one({"name": "Ada"})

        dropped = await database_service.drop_collection("testdb", "users")

        assert dropped is True
        assert "users" not in await mock_async_mongo_client["testdb"].list_collection_names()

    @pytest.mark.asyncio
    async def test_missing_collection_is_noop(self, database_service):
        assert await database_service.drop_collection("testdb", "ghosts") is False

    @pytest.mark.asyncio
    async def test_drop_twice_is_idempotent(self, database_service, mock_async_mongo_client):
        await mock_async_mongo_client["testdb"]["users"].insert_one({"name": "Ada"})

        first = await database_service.drop_collection("testdb", "users")
        second = await database_service.drop_collection("testdb", "users")

        assert (first, second) == (True, False)
        assert "users" not in await mock_async_mongo_client["testdb"].list_collection_names()

    @pytest.mark.asyncio
    async def test_does_not_drop_when_absent(self):
        """No drop command should be issued for an absent collection."""
        from fixture_api.services.database_service import DatabaseService

        client = MagicMock()
        db = MagicMock()
        db.drop_collection = AsyncMock()
        client.__getitem__.return_value = db

        with patch(
            "fixture_api.services.database_service.collection_exists",
            AsyncMock(return_value=False),
        ):
            await DatabaseService(client).drop_collection("testdb", "users")

        db.drop_collection.assert_not_awaited()


class TestDropDatabase:
    """Tests for DatabaseService.drop_database."""

    @pytest.mark.asyncio
    async def test_drops_existing_database(self, database_service, mock_async_mongo_client):
        await mock_async_mongo_client["testdb"]["users"].insert_one({"name": "Ada"})

        dropped = await database_service.drop_database("testdb")

        assert dropped is True
        assert "testdb" not in await mock_async_mongo_client.list_database_names()

    @pytest.mark.asyncio
    async def test_drop_twice_is_idempotent(self, database_service, mock_async_mongo_client):
        await mock_async_mongo_client["testdb"]["users"].insert_one({"name": "Ada"})

        first = await database_service.drop_database("testdb")
        second = await database_service.drop_database("testdb")

        assert (first, second) == (True, False)
        assert "testdb" not in await mock_async_mongo_client.list_database_names()

    @pytest.mark.asyncio
    async def test_drop_is_awaited(self):
        """The drop should complete before drop_database returns."""
        from fixture_api.services.database_service import DatabaseService

        client = MagicMock()
        client.drop_database = AsyncMock()

        with patch(
            "fixture_api.services.database_service.database_exists",
            AsyncMock(return_value=True),
        ):
            await DatabaseService(client).drop_database("testdb")

        client.drop_database.assert_awaited_once_with("testdb")

    @pytest.mark.asyncio
    async def test_other_databases_untouched(self, database_service, mock_async_mongo_client):
        await mock_async_mongo_client["testdb"]["users"].insert_one({"name": "Ada"})
        await mock_async_mongo_client["keepdb"]["users"].insert_one({"name": "Grace"})

        await database_service.drop_database("testdb")

        assert "keepdb" in await mock_async_mongo_client.list_database_names()


class TestGetCollection:
    """Tests for DatabaseService.get_collection."""

    @pytest.mark.asyncio
    async def test_returns_all_documents(self, database_service, mock_async_mongo_client):
        await mock_async_mongo_client["testdb"]["users"].insert_many(
            [{"_id": 1, "name": "Ada"}, {"_id": 2, "name": "Grace"}]
        )

        docs = await database_service.get_collection("testdb", "users")

        assert docs == [{"_id": 1, "name": "Ada"}, {"_id": 2, "name": "Grace"}]

    @pytest.mark.asyncio
    async def test_missing_collection_returns_empty_list(self, database_service):
        assert await database_service.get_collection("nodb", "users") == []
