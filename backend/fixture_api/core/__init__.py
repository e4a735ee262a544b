"""
Core module - Exceptions and logging setup.
"""
from fixture_api.core.exceptions import (
    FixtureAPIError,
    DatabaseConnectionError,
    ProductionEnvironmentError,
    MissingParameterError,
    FixtureNotFoundError,
    FixtureLoadError,
    CatalogScanError,
)
from fixture_api.core.logging import setup_logging

__all__ = [
    "FixtureAPIError",
    "DatabaseConnectionError",
    "ProductionEnvironmentError",
    "MissingParameterError",
    "FixtureNotFoundError",
    "FixtureLoadError",
    "CatalogScanError",
    "setup_logging",
]
