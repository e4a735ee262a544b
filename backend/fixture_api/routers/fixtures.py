"""
Fixtures router: loading, unloading and listing fixtures.
"""
import logging

from fastapi import APIRouter, Depends, Response, status
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import JSONResponse, PlainTextResponse
from pymongo.errors import PyMongoError

from fixture_api.config import Settings
from fixture_api.core.exceptions import FixtureAPIError
from fixture_api.dependencies.params import require_db, require_fix, require_unload_fix
from fixture_api.dependencies.services import get_app_settings, get_fixture_service
from fixture_api.services.fixture_catalog import list_fixtures
from fixture_api.services.fixture_service import FixtureService

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Fixtures"])


@router.get(
    "/load-fixture",
    summary="Load a fixture into a database",
)
async def load_fixture(
    db: str = Depends(require_db),
    fix: str = Depends(require_fix),
    fixture_service: FixtureService = Depends(get_fixture_service),
):
    """
    Clear the collections targeted by fixture `fix` in database `db`,
    then insert the fixture's documents.
    """
    try:
        await fixture_service.load_fixture(db, fix)
    except (FixtureAPIError, PyMongoError):
        msg = f"Failed to load database fixture {fix} to database {db}"
        logger.exception(msg)
        return PlainTextResponse(msg, status_code=status.HTTP_400_BAD_REQUEST)

    return Response(status_code=status.HTTP_200_OK)


@router.get(
    "/unload-fixture",
    summary="Unload a fixture from a database",
)
async def unload_fixture(
    db: str = Depends(require_db),
    fix: str = Depends(require_unload_fix),
    fixture_service: FixtureService = Depends(get_fixture_service),
):
    """
    Remove every document from the collections targeted by fixture `fix`
    in database `db`. The collections themselves are kept.
    """
    try:
        await fixture_service.unload_fixture(db, fix)
    except (FixtureAPIError, PyMongoError):
        msg = f"Failed to unload database fixture {fix} from database {db}"
        logger.exception(msg)
        return PlainTextResponse(msg, status_code=status.HTTP_400_BAD_REQUEST)

    return Response(status_code=status.HTTP_200_OK)


@router.get(
    "/get-fixtures",
    response_model=list[str],
    summary="List available fixtures",
)
async def get_fixtures(settings: Settings = Depends(get_app_settings)):
    """List the names of the fixtures present in the fixtures directory."""
    try:
        names = await run_in_threadpool(lambda: sorted(list_fixtures(settings.fixtures_dir)))
    except FixtureAPIError:
        msg = f"Failed to list fixtures in directory {settings.fixtures_dir}"
        logger.exception(msg)
        return PlainTextResponse(msg, status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)

    return JSONResponse(names)
