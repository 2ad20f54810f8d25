"""Tests for the CWA API client with mocked httpx."""

import httpx
import pytest
import respx

from cwaproxy.config.schema import CwaConfig
from cwaproxy.errors import ConfigurationError, TransportError, UpstreamError
from cwaproxy.ingest.cwa_client import CwaClient, Dataset

SHORT_RANGE_URL = "https://test-cwa.example.com/api/v1/rest/datastore/F-C0032-001"
WEEKLY_URL = "https://test-cwa.example.com/api/v1/rest/datastore/F-D0047-091"


class TestFetch:
    @respx.mock
    def test_short_range_success(self, cwa_client: CwaClient, short_range_payload: dict):
        route = respx.get(
            SHORT_RANGE_URL,
            params={"Authorization": "test-key", "locationName": "臺北市"},
        ).mock(return_value=httpx.Response(200, json=short_range_payload))

        result = cwa_client.fetch(Dataset.SHORT_RANGE, "臺北市")
        assert result["records"]["location"][0]["locationName"] == "臺北市"
        assert route.call_count == 1

    @respx.mock
    def test_weekly_uses_weekly_dataset(self, cwa_client: CwaClient, weekly_payload: dict):
        route = respx.get(WEEKLY_URL).mock(
            return_value=httpx.Response(200, json=weekly_payload)
        )

        result = cwa_client.fetch(Dataset.WEEKLY, "臺北市")
        assert "Locations" in result["records"]
        assert route.called

    @respx.mock
    def test_upstream_error_carries_status_and_message(self, cwa_client: CwaClient):
        respx.get(SHORT_RANGE_URL).mock(
            return_value=httpx.Response(401, json={"message": "Unauthorized"})
        )

        with pytest.raises(UpstreamError) as exc_info:
            cwa_client.fetch(Dataset.SHORT_RANGE, "臺北市")
        assert exc_info.value.status_code == 401
        assert str(exc_info.value) == "Unauthorized"
        assert exc_info.value.body == {"message": "Unauthorized"}

    @respx.mock
    def test_upstream_error_without_message(self, cwa_client: CwaClient):
        respx.get(SHORT_RANGE_URL).mock(return_value=httpx.Response(503, text="down"))

        with pytest.raises(UpstreamError) as exc_info:
            cwa_client.fetch(Dataset.SHORT_RANGE, "臺北市")
        assert exc_info.value.status_code == 503
        assert str(exc_info.value) == "Unable to fetch weather data"
        assert exc_info.value.body == "down"

    @respx.mock
    def test_no_retry(self, cwa_client: CwaClient):
        route = respx.get(SHORT_RANGE_URL).mock(return_value=httpx.Response(503))

        with pytest.raises(UpstreamError):
            cwa_client.fetch(Dataset.SHORT_RANGE, "臺北市")
        assert route.call_count == 1

    @respx.mock
    def test_transport_error(self, cwa_client: CwaClient):
        respx.get(SHORT_RANGE_URL).mock(side_effect=httpx.ConnectError("refused"))

        with pytest.raises(TransportError):
            cwa_client.fetch(Dataset.SHORT_RANGE, "臺北市")

    @respx.mock
    def test_timeout_is_transport_error(self, cwa_client: CwaClient):
        respx.get(WEEKLY_URL).mock(side_effect=httpx.ReadTimeout("slow"))

        with pytest.raises(TransportError):
            cwa_client.fetch(Dataset.WEEKLY, "臺北市")

    @respx.mock
    def test_non_json_body(self, cwa_client: CwaClient):
        respx.get(SHORT_RANGE_URL).mock(return_value=httpx.Response(200, text="<html>"))

        with pytest.raises(UpstreamError) as exc_info:
            cwa_client.fetch(Dataset.SHORT_RANGE, "臺北市")
        assert exc_info.value.status_code == 502


class TestCredential:
    @pytest.mark.parametrize("api_key", ["", "   "])
    def test_missing_key_makes_no_call(self, api_key: str):
        client = CwaClient(api_key=api_key, base_url="https://test-cwa.example.com/api")

        with respx.mock(assert_all_called=False) as mock:
            route = mock.get(SHORT_RANGE_URL).mock(return_value=httpx.Response(200, json={}))
            with pytest.raises(ConfigurationError):
                client.fetch(Dataset.SHORT_RANGE, "臺北市")
        assert not route.called

    def test_from_config(self):
        client = CwaClient.from_config(
            CwaConfig(api_key="k", base_url="https://x.example.com/api/", timeout=3.0)
        )
        assert client.api_key == "k"
        assert client.base_url == "https://x.example.com/api"
        assert client.timeout == 3.0
        assert client.dataset_ids[Dataset.WEEKLY] == "F-D0047-091"
