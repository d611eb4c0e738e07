"""Tests for the air-quality API client with mocked httpx."""

import httpx
import pytest
import respx

from pollencast.config.defaults import DEFAULT_LOCATION
from pollencast.config.schema import AppConfig
from pollencast.ingest.errors import DecodeError, TransportError
from pollencast.ingest.pollen_client import PollenClient
from pollencast.models.common import PollenSpecies

BASE_URL = "https://test-pollen.example.com/v1/air-quality"


@pytest.fixture
def client() -> PollenClient:
    return PollenClient(
        location=DEFAULT_LOCATION,
        species=[PollenSpecies.ALDER, PollenSpecies.BIRCH, PollenSpecies.GRASS],
        base_url=BASE_URL,
        timeout=5.0,
    )


def _route(client: PollenClient) -> respx.Route:
    return respx.get(BASE_URL, params=client.params)


class TestParams:
    def test_query(self, client: PollenClient):
        params = client.params
        assert params["latitude"] == "52.52"
        assert params["longitude"] == "13.41"
        assert params["hourly"] == "alder_pollen,birch_pollen,grass_pollen"
        assert params["timezone"] == "auto"
        assert params["forecast_days"] == "1"

    def test_from_config(self, default_config: AppConfig):
        c = PollenClient.from_config(default_config)
        assert c.base_url == BASE_URL
        assert c.species == [
            PollenSpecies.ALDER,
            PollenSpecies.BIRCH,
            PollenSpecies.GRASS,
        ]
        assert c.location.name == "Berlin"
        assert c.timeout == 30.0


class TestGetForecast:
    @respx.mock
    def test_success(self, client: PollenClient, berlin_payload: dict):
        _route(client).mock(return_value=httpx.Response(200, json=berlin_payload))

        raw = client.get_forecast()
        assert raw.latitude == 52.52
        assert raw.elevation == 38.0
        assert raw.timezone == "Europe/Berlin"
        assert len(raw.hourly.time) == 24
        assert len(raw.hourly.birch_pollen) == 24
        assert raw.hourly.ragweed_pollen is None

    @respx.mock
    def test_fixed_headers(self, client: PollenClient, berlin_payload: dict):
        route = _route(client).mock(
            return_value=httpx.Response(200, json=berlin_payload)
        )

        client.get_forecast()
        assert route.called
        request = route.calls[0].request
        assert "pollencast" in request.headers["user-agent"]
        assert request.headers["accept"] == "application/json"

    @respx.mock
    def test_single_request_on_server_error(self, client: PollenClient):
        route = _route(client).mock(return_value=httpx.Response(503))

        with pytest.raises(TransportError) as exc_info:
            client.get_forecast()
        assert exc_info.value.status_code == 503
        assert exc_info.value.timed_out is False
        assert route.call_count == 1

    @respx.mock
    def test_client_error_status(self, client: PollenClient):
        _route(client).mock(
            return_value=httpx.Response(400, json={"error": True, "reason": "bad"})
        )

        with pytest.raises(TransportError) as exc_info:
            client.get_forecast()
        assert exc_info.value.status_code == 400

    @respx.mock
    def test_timeout(self, client: PollenClient):
        _route(client).mock(side_effect=httpx.ReadTimeout("timed out"))

        with pytest.raises(TransportError) as exc_info:
            client.get_forecast()
        assert exc_info.value.timed_out is True
        assert exc_info.value.status_code is None

    @respx.mock
    def test_connection_error(self, client: PollenClient):
        _route(client).mock(side_effect=httpx.ConnectError("refused"))

        with pytest.raises(TransportError) as exc_info:
            client.get_forecast()
        assert exc_info.value.timed_out is False
        assert "Network error" in str(exc_info.value)

    @respx.mock
    def test_invalid_json(self, client: PollenClient):
        _route(client).mock(return_value=httpx.Response(200, text="<html>oops"))

        with pytest.raises(DecodeError):
            client.get_forecast()

    @respx.mock
    def test_unexpected_shape(self, client: PollenClient):
        _route(client).mock(
            return_value=httpx.Response(200, json={"latitude": 52.52})
        )

        with pytest.raises(DecodeError):
            client.get_forecast()

    @respx.mock
    def test_non_numeric_values(self, client: PollenClient, berlin_payload: dict):
        berlin_payload["hourly"]["grass_pollen"][3] = "lots"
        _route(client).mock(return_value=httpx.Response(200, json=berlin_payload))

        with pytest.raises(DecodeError):
            client.get_forecast()

    @respx.mock
    def test_unencodable_header(self):
        client = PollenClient(
            location=DEFAULT_LOCATION,
            species=[PollenSpecies.GRASS],
            base_url=BASE_URL,
            user_agent="pollencast/é",
        )

        with pytest.raises(TransportError, match="Invalid request"):
            client.get_forecast()
