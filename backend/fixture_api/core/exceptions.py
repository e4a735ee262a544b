"""
Exception hierarchy for the fixture API.

Everything raised on purpose by the service derives from FixtureAPIError.
Routers convert per-request errors to a status code and a short message.
"""


class FixtureAPIError(Exception):
    """Base class for fixture API errors."""


class DatabaseConnectionError(FixtureAPIError, ConnectionError):
    """The database server is unreachable or rejected the handshake."""


class ProductionEnvironmentError(FixtureAPIError, RuntimeError):
    """The service was started in production mode."""


class MissingParameterError(FixtureAPIError):
    """A required query parameter is missing or empty."""

    def __init__(self, param_name: str, message: str):
        super().__init__(message)
        self.param_name = param_name
        self.message = message


class FixtureNotFoundError(FixtureAPIError, LookupError):
    """No fixture definitions exist under the requested fixture name."""

    def __init__(self, fixture_name: str, reason: str = "no fixture definition files found"):
        super().__init__(f"Fixture '{fixture_name}': {reason}")
        self.fixture_name = fixture_name


class FixtureLoadError(FixtureAPIError):
    """A fixture definition file could not be read."""


class CatalogScanError(FixtureAPIError, OSError):
    """The fixtures directory could not be scanned."""
