"""Forecast service: resolve region, fetch upstream, normalize."""

import logging

from cwaproxy.catalog.regions import RegionCatalog
from cwaproxy.errors import InvalidRegionError
from cwaproxy.ingest.cwa_client import CwaClient, Dataset
from cwaproxy.models.forecast import ForecastResponse
from cwaproxy.normalize.short_range import normalize_short_range
from cwaproxy.normalize.weekly import normalize_weekly

logger = logging.getLogger(__name__)


class ForecastService:
    def __init__(self, catalog: RegionCatalog, client: CwaClient):
        self.catalog = catalog
        self.client = client

    def short_range(self, region_key: str) -> ForecastResponse:
        """36-hour forecast intervals for one region."""
        raw = self.client.fetch(Dataset.SHORT_RANGE, self._resolve(region_key))
        return normalize_short_range(raw, region_key)

    def weekly(self, region_key: str) -> ForecastResponse:
        """7-day forecast, one record per calendar date."""
        raw = self.client.fetch(Dataset.WEEKLY, self._resolve(region_key))
        return normalize_weekly(raw, region_key)

    def _resolve(self, region_key: str) -> str:
        name = self.catalog.resolve(region_key)
        if name is None:
            logger.info("Rejected unknown region key %r", region_key)
            raise InvalidRegionError(region_key)
        return name
