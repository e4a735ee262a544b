"""
Tests for configuration and the production guard.
"""

import pytest

from fixture_api.config import Settings, ensure_not_production
from fixture_api.core.exceptions import ProductionEnvironmentError


class TestSettings:
    """Tests for Settings loaded from the environment."""

    def test_defaults(self, monkeypatch):
        for name in ("DBHOST", "FIXTURES_DIR", "PORT", "APP_ENV", "LOG_LEVEL"):
            monkeypatch.delenv(name, raising=False)

        settings = Settings(_env_file=None)

        assert settings.dbhost == "mongodb://localhost:27017"
        assert settings.fixtures_dir == "fixtures"
        assert settings.port == 3555
        assert settings.in_production is False

    def test_reads_environment_variables(self, monkeypatch):
        monkeypatch.setenv("DBHOST", "mongodb://db:27017")
        monkeypatch.setenv("FIXTURES_DIR", "/srv/fixtures")
        monkeypatch.setenv("PORT", "8080")

        settings = Settings(_env_file=None)

        assert settings.dbhost == "mongodb://db:27017"
        assert settings.fixtures_dir == "/srv/fixtures"
        assert settings.port == 8080

    @pytest.mark.parametrize("value", ["production", "Production", " PRODUCTION "])
    def test_production_detected(self, monkeypatch, value):
        monkeypatch.setenv("APP_ENV", value)

        assert Settings(_env_file=None).in_production is True


class TestProductionGuard:
    """The service must refuse to run in production."""

    def test_guard_raises_in_production(self):
        with pytest.raises(ProductionEnvironmentError):
            ensure_not_production(Settings(_env_file=None, app_env="production"))

    def test_guard_passes_outside_production(self):
        ensure_not_production(Settings(_env_file=None, app_env="staging"))

    def test_create_app_refuses_production(self, settings, mock_mongo_client):
        from fixture_api.main import create_app

        production = settings.model_copy(update={"app_env": "production"})

        with pytest.raises(ProductionEnvironmentError):
            create_app(production, mongo_client=mock_mongo_client)
