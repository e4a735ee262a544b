"""
Fixture lifecycle: unloading and loading named fixtures into a database.

A fixture directory holds definition files, each targeting one collection:
- ``*.json``: Extended JSON. Either a list of documents, a single document,
  or an object ``{"collection": ..., "documents": [...]}`` naming the target
  collection explicitly.
- ``*.py``: a module exposing ``documents`` (a list, or a callable returning
  one) and optionally ``collection``.

Without an explicit name the file stem is the collection name.

Loading always clears the targeted collections before inserting, so a load
never merges with existing data. Collections are processed one after the
other with no rollback: a failure part way through leaves the collections
handled before it already changed.
"""
import importlib.util
import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional, Union

from bson import json_util
from bson.errors import BSONError
from fastapi.concurrency import run_in_threadpool
from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase

from fixture_api.core.exceptions import FixtureLoadError, FixtureNotFoundError
from fixture_api.services.fixture_catalog import fixture_directory, is_definition_file

logger = logging.getLogger(__name__)

ENVELOPE_KEYS = {"collection", "documents"}


@dataclass
class FixtureDefinition:
    """Documents read from one definition file and their target collection."""

    collection: str
    path: Path
    documents: list[dict[str, Any]] = field(default_factory=list)


def _as_documents(data: Any, path: Path) -> list[dict[str, Any]]:
    if isinstance(data, dict):
        return [data]
    if isinstance(data, list) and all(isinstance(doc, dict) for doc in data):
        return list(data)
    raise FixtureLoadError(
        f"{path} must define a document or a list of documents, got {type(data).__name__}"
    )


def _read_json(path: Path) -> FixtureDefinition:
    try:
        data = json_util.loads(path.read_text(encoding="utf-8"))
    except (OSError, ValueError, TypeError, BSONError) as e:
        raise FixtureLoadError(f"Failed to read fixture file {path}: {e}") from e

    collection = path.stem
    if isinstance(data, dict) and set(data) == ENVELOPE_KEYS:
        collection = data["collection"]
        data = data["documents"]
    if not isinstance(collection, str) or not collection:
        raise FixtureLoadError(f"{path} names an invalid collection: {collection!r}")

    return FixtureDefinition(collection, path, _as_documents(data, path))


def _read_python(path: Path) -> FixtureDefinition:
    module_name = f"_fixture_{path.parent.name}_{path.stem}"
    spec = importlib.util.spec_from_file_location(module_name, path)
    if spec is None or spec.loader is None:
        raise FixtureLoadError(f"Cannot import fixture module {path}")

    module = importlib.util.module_from_spec(spec)
    try:
        spec.loader.exec_module(module)
    except Exception as e:
        raise FixtureLoadError(f"Failed to execute fixture module {path}: {e}") from e

    if not hasattr(module, "documents"):
        raise FixtureLoadError(f"Fixture module {path} does not define 'documents'")
    documents = module.documents
    if callable(documents):
        try:
            documents = documents()
        except Exception as e:
            raise FixtureLoadError(f"'documents' in {path} raised: {e}") from e

    collection = getattr(module, "collection", path.stem)
    if not isinstance(collection, str) or not collection:
        raise FixtureLoadError(f"{path} names an invalid collection: {collection!r}")

    return FixtureDefinition(collection, path, _as_documents(documents, path))


def read_definition(path: Path) -> FixtureDefinition:
    """
    Read one definition file.

    Raises:
        FixtureLoadError: If the file cannot be read or does not define
            a document or a list of documents.
    """
    if path.suffix == ".py":
        return _read_python(path)
    return _read_json(path)


class FixtureSession:
    """
    A fixture bound to one database for the duration of a load or unload.

    Opening reads every definition file (sorted by file name) and fails with
    FixtureNotFoundError before touching the database when there are none.
    The session only borrows the shared client; closing it never closes the
    client.
    """

    def __init__(
        self,
        client: AsyncIOMotorClient,
        db_name: str,
        fixture_name: str,
        directory: Path,
    ):
        self.client = client
        self.db_name = db_name
        self.fixture_name = fixture_name
        self.directory = directory
        self.definitions: list[FixtureDefinition] = []
        self._db: Optional[AsyncIOMotorDatabase] = None

    async def __aenter__(self) -> "FixtureSession":
        await run_in_threadpool(self.open)
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        self.close()

    @property
    def is_open(self) -> bool:
        return self._db is not None

    @property
    def collections(self) -> list[str]:
        """Targeted collections in file order, without duplicates."""
        return list(dict.fromkeys(d.collection for d in self.definitions))

    def definition_files(self) -> list[Path]:
        """List the definition files of the fixture directory."""
        if not self.directory.is_dir():
            raise FixtureNotFoundError(self.fixture_name, f"directory {self.directory} not found")

        paths = [path for path in sorted(self.directory.iterdir()) if is_definition_file(path)]
        if not paths:
            raise FixtureNotFoundError(self.fixture_name)
        return paths

    def open(self) -> None:
        self.definitions = [read_definition(path) for path in self.definition_files()]
        self._db = self.client[self.db_name]

    def close(self) -> None:
        self._db = None
        self.definitions = []

    def _database(self) -> AsyncIOMotorDatabase:
        if self._db is None:
            raise RuntimeError(f"Fixture session for '{self.fixture_name}' is not open")
        return self._db

    async def unload(self) -> dict[str, int]:
        """Remove every document from each targeted collection."""
        db = self._database()
        removed: dict[str, int] = {}
        for collection in self.collections:
            result = await db[collection].delete_many({})
            removed[collection] = result.deleted_count
        return removed

    async def load(self) -> dict[str, int]:
        """Insert the documents of every definition file."""
        db = self._database()
        inserted: dict[str, int] = {}
        for definition in self.definitions:
            if definition.documents:
                try:
                    await db[definition.collection].insert_many(definition.documents)
                except BSONError as e:
                    raise FixtureLoadError(
                        f"Cannot encode documents of {definition.path}: {e}"
                    ) from e
            inserted[definition.collection] = (
                inserted.get(definition.collection, 0) + len(definition.documents)
            )
        return inserted


class FixtureService:
    """Service loading and unloading fixtures through the shared client."""

    def __init__(self, client: AsyncIOMotorClient, fixtures_root: Union[str, os.PathLike]):
        """Initialize with the shared client and the fixtures directory."""
        self.client = client
        self.fixtures_root = Path(fixtures_root)

    def session(self, db_name: str, fixture_name: str) -> FixtureSession:
        """Create a session for a fixture against a database."""
        directory = fixture_directory(self.fixtures_root, fixture_name)
        return FixtureSession(self.client, db_name, fixture_name, directory)

    def get_fixture_collections(self, fixture_name: str) -> list[str]:
        """
        List the collections a fixture targets.

        Raises:
            FixtureNotFoundError: If the fixture has no definition files.
            FixtureLoadError: If a definition file cannot be read.
        """
        directory = fixture_directory(self.fixtures_root, fixture_name)
        session = FixtureSession(self.client, "", fixture_name, directory)
        definitions = [read_definition(path) for path in session.definition_files()]
        return list(dict.fromkeys(d.collection for d in definitions))

    async def load_fixture(self, db_name: str, fixture_name: str) -> dict[str, int]:
        """
        Unload then load a fixture into a database.

        Returns:
            Number of documents inserted per collection.
        """
        async with self.session(db_name, fixture_name) as session:
            removed = await session.unload()
            logger.debug(f"Cleared {removed} before loading fixture {fixture_name}")
            inserted = await session.load()

        logger.info(f"Loaded fixture {fixture_name} into database {db_name}: {inserted}")
        return inserted

    async def unload_fixture(self, db_name: str, fixture_name: str) -> dict[str, int]:
        """
        Remove a fixture's documents from a database.

        Returns:
            Number of documents removed per collection.
        """
        async with self.session(db_name, fixture_name) as session:
            removed = await session.unload()

        logger.info(f"Unloaded fixture {fixture_name} from database {db_name}: {removed}")
        return removed
