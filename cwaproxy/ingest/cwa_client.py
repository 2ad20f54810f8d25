"""CWA open-data API client for the county forecast datasets."""

import logging
from enum import StrEnum

import httpx

from cwaproxy.config.schema import CWA_BASE_URL, CwaConfig
from cwaproxy.errors import ConfigurationError, TransportError, UpstreamError

logger = logging.getLogger(__name__)

DEFAULT_UPSTREAM_MESSAGE = "Unable to fetch weather data"


class Dataset(StrEnum):
    SHORT_RANGE = "short_range"
    WEEKLY = "weekly"


class CwaClient:
    """Single-attempt gateway to the CWA datastore endpoints.

    Never retries: one logical request maps to one upstream call.
    """

    def __init__(
        self,
        api_key: str = "",
        base_url: str = CWA_BASE_URL,
        timeout: float = 30.0,
        short_range_dataset: str = "F-C0032-001",
        weekly_dataset: str = "F-D0047-091",
    ):
        self.api_key = api_key
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.dataset_ids = {
            Dataset.SHORT_RANGE: short_range_dataset,
            Dataset.WEEKLY: weekly_dataset,
        }

    @classmethod
    def from_config(cls, config: CwaConfig) -> "CwaClient":
        return cls(
            api_key=config.api_key,
            base_url=config.base_url,
            timeout=config.timeout,
            short_range_dataset=config.short_range_dataset,
            weekly_dataset=config.weekly_dataset,
        )

    def fetch(self, dataset: Dataset, location_name: str) -> dict:
        """Fetch the raw payload of one dataset for one county.

        Raises ConfigurationError before any I/O when no credential is set.
        """
        if not self.api_key or not self.api_key.strip():
            raise ConfigurationError("CWA_API_KEY is not configured")

        dataset_id = self.dataset_ids[dataset]
        url = f"{self.base_url}/v1/rest/datastore/{dataset_id}"
        params = {"Authorization": self.api_key, "locationName": location_name}

        logger.info("CWA %s request for %s", dataset_id, location_name)
        try:
            resp = httpx.get(url, params=params, timeout=self.timeout)
        except httpx.RequestError as e:
            logger.error("CWA %s request failed for %s: %s", dataset_id, location_name, e)
            raise TransportError(f"Request failed: {e}") from e

        if resp.status_code >= 300:
            body = _decode_body(resp)
            logger.error(
                "CWA %s returned %d for %s: %s",
                dataset_id, resp.status_code, location_name, body,
            )
            message = DEFAULT_UPSTREAM_MESSAGE
            if isinstance(body, dict) and body.get("message"):
                message = str(body["message"])
            raise UpstreamError(message, resp.status_code, body)

        try:
            return resp.json()
        except ValueError as e:
            logger.error("CWA %s returned a non-JSON body for %s", dataset_id, location_name)
            raise UpstreamError(
                "Upstream response is not valid JSON", 502, resp.text
            ) from e


def _decode_body(resp: httpx.Response):
    try:
        return resp.json()
    except ValueError:
        return resp.text or None
