"""
Collections router: dropping collections and databases, dumping collections.
"""
import logging

from bson import json_util
from fastapi import APIRouter, Depends, Response, status
from fastapi.responses import PlainTextResponse
from pymongo.errors import PyMongoError

from fixture_api.dependencies.params import require_col, require_db
from fixture_api.dependencies.services import get_database_service
from fixture_api.services.database_service import DatabaseService

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Collections"])


@router.get(
    "/drop-collection",
    summary="Drop a collection",
)
async def drop_collection(
    db: str = Depends(require_db),
    col: str = Depends(require_col),
    database_service: DatabaseService = Depends(get_database_service),
):
    """Drop collection `col` from database `db`. Succeeds when it is already absent."""
    try:
        await database_service.drop_collection(db, col)
    except PyMongoError:
        msg = f"Failed to drop collection {col} from database {db}"
        logger.exception(msg)
        return PlainTextResponse(msg, status_code=status.HTTP_400_BAD_REQUEST)

    return Response(status_code=status.HTTP_200_OK)


@router.get(
    "/drop-database",
    summary="Drop a database",
)
async def drop_database(
    db: str = Depends(require_db),
    database_service: DatabaseService = Depends(get_database_service),
):
    """Drop database `db`. Succeeds when it is already absent."""
    try:
        await database_service.drop_database(db)
    except PyMongoError:
        msg = f"Failed to drop database {db}"
        logger.exception(msg)
        return PlainTextResponse(msg, status_code=status.HTTP_400_BAD_REQUEST)

    return Response(status_code=status.HTTP_200_OK)


@router.get(
    "/get-collection",
    summary="Get every document of a collection",
)
async def get_collection(
    db: str = Depends(require_db),
    col: str = Depends(require_col),
    database_service: DatabaseService = Depends(get_database_service),
):
    """
    Return the documents of collection `col` in database `db` as a JSON array.

    BSON types are rendered as relaxed Extended JSON, e.g. `{"$oid": "..."}`
    for ObjectIds.
    """
    try:
        documents = await database_service.get_collection(db, col)
    except PyMongoError:
        msg = f"Failed to get collection {col} from database {db}"
        logger.exception(msg)
        return PlainTextResponse(msg, status_code=status.HTTP_400_BAD_REQUEST)

    return Response(
        content=json_util.dumps(documents, json_options=json_util.RELAXED_JSON_OPTIONS),
        media_type="application/json",
    )
