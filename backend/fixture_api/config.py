"""
Application configuration loaded from environment variables.
"""
from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict

from fixture_api.core.exceptions import ProductionEnvironmentError


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    # MongoDB
    dbhost: str = "mongodb://localhost:27017"

    # Fixtures
    fixtures_dir: str = "fixtures"

    # HTTP server
    host: str = "0.0.0.0"
    port: int = 3555

    # Deployment mode, "production" refuses to start
    app_env: str = "development"

    # Logging
    log_level: str = "INFO"

    @property
    def in_production(self) -> bool:
        return self.app_env.strip().lower() == "production"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


def ensure_not_production(settings: Settings) -> None:
    """Refuse to run when deployed in production mode."""
    if settings.in_production:
        raise ProductionEnvironmentError("Don't run the DB fixture API in production!")
