"""FastAPI surface exposing the short-range and weekly forecast endpoints."""

import logging
from collections.abc import Callable

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from cwaproxy.catalog.regions import DEFAULT_CATALOG
from cwaproxy.config.schema import ServiceConfig
from cwaproxy.ingest.cwa_client import CwaClient
from cwaproxy.models.common import utc_now_iso
from cwaproxy.models.errors import ErrorCategory
from cwaproxy.models.forecast import ForecastResponse
from cwaproxy.service.envelope import classify_error, success_envelope
from cwaproxy.service.forecast_service import ForecastService

logger = logging.getLogger(__name__)


def create_app(
    config: ServiceConfig | None = None, service: ForecastService | None = None
) -> FastAPI:
    config = config or ServiceConfig()
    if service is None:
        service = ForecastService(DEFAULT_CATALOG, CwaClient.from_config(config.cwa))

    app = FastAPI(title="CWA Weather Proxy", version="0.1.0")
    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.server.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.state.service = service

    @app.get("/")
    def index():
        return {
            "message": "CWA weather forecast API",
            "endpoints": {
                "weather": "/api/weather/:city (e.g. /api/weather/taipei)",
                "weekly": "/api/weekly/:city (e.g. /api/weekly/taipei)",
                "health": "/api/health",
            },
            "supported_cities": service.catalog.keys(),
        }

    @app.get("/api/health")
    def health():
        return {"status": "OK", "timestamp": utc_now_iso()}

    @app.get("/api/weather/{city}")
    def get_weather(city: str):
        """36-hour forecast for a region key."""
        return _respond(service.short_range, city)

    @app.get("/api/weekly/{city}")
    def get_weekly_weather(city: str):
        """7-day forecast for a region key."""
        return _respond(service.weekly, city)

    @app.exception_handler(StarletteHTTPException)
    async def http_error(request: Request, exc: StarletteHTTPException):
        if exc.status_code == 404:
            return JSONResponse(
                {"error": str(ErrorCategory.NOT_FOUND), "message": "Route not found"},
                status_code=404,
            )
        category = (
            ErrorCategory.INVALID_REQUEST
            if exc.status_code < 500
            else ErrorCategory.INTERNAL_ERROR
        )
        return JSONResponse(
            {"error": str(category), "message": str(exc.detail)},
            status_code=exc.status_code,
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(Exception)
    async def unhandled_error(request: Request, exc: Exception):
        envelope = classify_error(exc)
        return JSONResponse(envelope.to_dict(), status_code=envelope.status_code)

    return app


def _respond(handler: Callable[[str], ForecastResponse], city: str) -> JSONResponse:
    try:
        response = handler(city)
    except Exception as e:
        envelope = classify_error(e)
        logger.warning(
            "Request for %s failed: %s %s", city, envelope.category, envelope.message
        )
        return JSONResponse(envelope.to_dict(), status_code=envelope.status_code)
    return JSONResponse(success_envelope(response))
