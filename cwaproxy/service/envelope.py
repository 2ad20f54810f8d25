"""Success and error envelopes for forecast responses."""

import logging
from typing import Any

from cwaproxy.errors import (
    ConfigurationError,
    InvalidRegionError,
    NoLocationDataError,
    NoWeatherElementsError,
    TransportError,
    UpstreamError,
)
from cwaproxy.models.errors import ErrorCategory, ErrorEnvelope
from cwaproxy.models.forecast import ForecastResponse

logger = logging.getLogger(__name__)

TRANSPORT_STATUS = 502


def success_envelope(response: ForecastResponse) -> dict[str, Any]:
    return {"success": True, "data": response.to_dict()}


def classify_error(exc: Exception) -> ErrorEnvelope:
    """Map any failure to a stable category, message and HTTP status."""
    if isinstance(exc, InvalidRegionError):
        return ErrorEnvelope(ErrorCategory.INVALID_REGION, "Invalid region key", 400)
    if isinstance(exc, ConfigurationError):
        return ErrorEnvelope(
            ErrorCategory.CONFIGURATION_ERROR,
            "CWA_API_KEY must be set in the environment or config file",
            500,
        )
    if isinstance(exc, UpstreamError):
        return ErrorEnvelope(
            ErrorCategory.UPSTREAM_ERROR, str(exc), exc.status_code, details=exc.body
        )
    if isinstance(exc, TransportError):
        return ErrorEnvelope(
            ErrorCategory.UPSTREAM_ERROR,
            "Unable to reach the CWA API, please try again later",
            TRANSPORT_STATUS,
            details=str(exc),
        )
    if isinstance(exc, NoLocationDataError):
        return ErrorEnvelope(
            ErrorCategory.NOT_FOUND, "No weather data available for this region", 404
        )
    if isinstance(exc, NoWeatherElementsError):
        return ErrorEnvelope(
            ErrorCategory.NOT_FOUND, "No weather elements available for this region", 404
        )

    logger.error("Unclassified failure", exc_info=exc)
    return ErrorEnvelope(
        ErrorCategory.INTERNAL_ERROR,
        "Unable to fetch weather data, please try again later",
        500,
    )
