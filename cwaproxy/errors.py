"""Exception taxonomy raised while serving a forecast request.

Every failure that can occur between region resolution and normalization
is a ``ForecastError``. Callers catch these at the request boundary and
turn them into an ``ErrorEnvelope`` via ``service.envelope.classify_error``.
"""

from typing import Any


class ForecastError(Exception):
    """Base class for all classified forecast failures."""


class InvalidRegionError(ForecastError):
    def __init__(self, region_key: str):
        super().__init__(f"Unknown region key: {region_key!r}")
        self.region_key = region_key


class ConfigurationError(ForecastError):
    """Raised when the upstream credential is missing."""


class TransportError(ForecastError):
    """Raised when the upstream API could not be reached."""


class UpstreamError(ForecastError):
    """Raised when the upstream API answers with a non-2xx status."""

    def __init__(self, message: str, status_code: int, body: Any = None):
        super().__init__(message)
        self.status_code = status_code
        self.body = body


class NoLocationDataError(ForecastError):
    """Raised when the payload carries no usable location record."""


class NoWeatherElementsError(ForecastError):
    """Raised when the location record has no weather elements."""
