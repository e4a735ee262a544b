"""
Fixture API - FastAPI Application

HTTP control surface for loading, unloading and inspecting database fixtures.
Meant for test and staging environments only.
"""
import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.responses import PlainTextResponse
from motor.motor_asyncio import AsyncIOMotorClient

from fixture_api.config import Settings, ensure_not_production, get_settings
from fixture_api.core.exceptions import MissingParameterError
from fixture_api.core.logging import setup_logging
from fixture_api.database.connections import close_database, connect_database
from fixture_api.routers import collections, fixtures, health

logger = logging.getLogger(__name__)


def log_usage(settings: Settings) -> None:
    """Log the endpoints callers can use."""
    base = f"http://localhost:{settings.port}"
    logger.info(f"Please put your database fixtures in the '{settings.fixtures_dir}' directory.")
    logger.info("Use the following endpoints to load and unload your database fixtures:")
    logger.info(f"HTTP GET {base}/load-fixture?db=<db-name>&fix=<your-fixture-name>")
    logger.info(f"HTTP GET {base}/unload-fixture?db=<db-name>&fix=<your-fixture-name>")
    logger.info(f"HTTP GET {base}/drop-collection?db=<db-name>&col=<collection-name>")
    logger.info(f"HTTP GET {base}/drop-database?db=<db-name>")
    logger.info(f"HTTP GET {base}/get-collection?db=<db-name>&col=<collection-name>")
    logger.info(f"HTTP GET {base}/get-fixtures")


def create_app(
    settings: Optional[Settings] = None,
    mongo_client: Optional[AsyncIOMotorClient] = None,
) -> FastAPI:
    """
    Build the FastAPI application.

    Args:
        settings: Settings to use, defaults to the environment settings
        mongo_client: Client to use instead of connecting at startup.
            A client passed in is left open on shutdown.

    Raises:
        ProductionEnvironmentError: If settings point at a production deployment.
    """
    settings = settings or get_settings()
    ensure_not_production(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """
        Application lifespan manager.

        Startup:
        - Connect to MongoDB (failure aborts startup)

        Shutdown:
        - Close the connection opened at startup
        """
        setup_logging(settings.log_level)
        logger.info(f"Using DBHOST {settings.dbhost}")

        owns_client = mongo_client is None
        if owns_client:
            client = await connect_database(settings.dbhost)
        else:
            client = mongo_client
        app.state.mongo_client = client
        log_usage(settings)

        yield

        logger.info("Shutting down DB fixture API...")
        if owns_client:
            await close_database(client)

    app = FastAPI(
        title="DB Fixture API",
        description="Load, unload and inspect database fixtures. Do not run in production.",
        version="0.1.0",
        lifespan=lifespan,
    )
    app.state.settings = settings

    @app.exception_handler(MissingParameterError)
    async def missing_parameter_handler(request: Request, exc: MissingParameterError):
        return PlainTextResponse(exc.message, status_code=status.HTTP_400_BAD_REQUEST)

    app.include_router(health.router)
    app.include_router(fixtures.router)
    app.include_router(collections.router)

    return app
