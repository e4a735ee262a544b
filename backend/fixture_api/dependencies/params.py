"""
Required query parameter dependencies.
"""
from typing import Callable, Optional

from fastapi import Query

from fixture_api.core.exceptions import MissingParameterError

DB_PARAM_MESSAGE = "Query parameter 'db' specifies database name."
FIX_PARAM_MESSAGE = "Query parameter 'fix' specifies name of fixture to load into database."
UNLOAD_FIX_PARAM_MESSAGE = "Query parameter 'fix' specifies name of fixture to unload from database."
COL_PARAM_MESSAGE = "Query parameter 'col' specifies name of collection."


def require_query_param(name: str, message: str) -> Callable:
    """
    Dependency factory for a required, non-empty query parameter.

    Usage:
        @router.get("/load-fixture")
        async def load(db: str = Depends(require_query_param("db", DB_PARAM_MESSAGE))):
            ...

    Args:
        name: Query parameter name
        message: Message returned to the caller when the parameter is missing

    Returns:
        Dependency function returning the parameter value
    """
    async def param_checker(
        value: Optional[str] = Query(None, alias=name, description=message),
    ) -> str:
        if not value:
            raise MissingParameterError(name, message)
        return value

    return param_checker


require_db = require_query_param("db", DB_PARAM_MESSAGE)
require_fix = require_query_param("fix", FIX_PARAM_MESSAGE)
require_unload_fix = require_query_param("fix", UNLOAD_FIX_PARAM_MESSAGE)
require_col = require_query_param("col", COL_PARAM_MESSAGE)
