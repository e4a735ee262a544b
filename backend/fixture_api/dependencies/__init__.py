"""
Dependencies for dependency injection in routes.
"""
from fixture_api.dependencies.params import (
    require_query_param,
    require_db,
    require_fix,
    require_unload_fix,
    require_col,
)
from fixture_api.dependencies.services import (
    get_app_settings,
    get_fixture_service,
    get_database_service,
)

__all__ = [
    "require_query_param",
    "require_db",
    "require_fix",
    "require_unload_fix",
    "require_col",
    "get_app_settings",
    "get_fixture_service",
    "get_database_service",
]
