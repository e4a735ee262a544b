"""
Run the fixture API with uvicorn.

Usage:
    python -m fixture_api

Environment Variables:
    DBHOST: MongoDB connection string (default: mongodb://localhost:27017)
    FIXTURES_DIR: Directory holding the fixtures (default: fixtures)
    HOST / PORT: Address to listen on (default: 0.0.0.0:3555)
    APP_ENV: Deployment mode; "production" refuses to start
    LOG_LEVEL: Logging level (default: INFO)
"""
import uvicorn

from fixture_api.config import get_settings
from fixture_api.main import create_app


def main() -> None:
    settings = get_settings()
    app = create_app(settings)
    uvicorn.run(app, host=settings.host, port=settings.port)


if __name__ == "__main__":
    main()
