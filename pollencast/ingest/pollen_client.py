"""Open-Meteo air-quality client for the hourly pollen forecast."""

import logging

import httpx
from pydantic import ValidationError

from pollencast.config.defaults import DEFAULT_LOCATION
from pollencast.config.schema import (
    OPEN_METEO_AIR_QUALITY_URL,
    AppConfig,
    LocationConfig,
)
from pollencast.ingest.errors import DecodeError, TransportError
from pollencast.models.common import PollenSpecies
from pollencast.models.forecast import RawForecastResponse

logger = logging.getLogger(__name__)

DEFAULT_USER_AGENT = "pollencast/0.1.0"


class PollenClient:
    def __init__(
        self,
        location: LocationConfig,
        species: list[PollenSpecies],
        base_url: str = OPEN_METEO_AIR_QUALITY_URL,
        user_agent: str = DEFAULT_USER_AGENT,
        timeout: float = 30.0,
        forecast_days: int = 1,
        timezone: str = "auto",
    ):
        self.location = location
        self.species = list(species)
        self.base_url = base_url
        self.user_agent = user_agent
        self.timeout = timeout
        self.forecast_days = forecast_days
        self.timezone = timezone

    @classmethod
    def from_config(cls, config: AppConfig) -> "PollenClient":
        return cls(
            location=config.location or DEFAULT_LOCATION,
            species=config.forecast.species,
            base_url=config.api.base_url,
            user_agent=config.api.user_agent,
            timeout=config.api.timeout_seconds,
            forecast_days=config.forecast.forecast_days,
            timezone=config.forecast.timezone,
        )

    @property
    def params(self) -> dict[str, str]:
        return {
            "latitude": str(self.location.latitude),
            "longitude": str(self.location.longitude),
            "hourly": ",".join(s.variable for s in self.species),
            "timezone": self.timezone,
            "forecast_days": str(self.forecast_days),
        }

    def get_forecast(self) -> RawForecastResponse:
        """Fetch the hourly pollen forecast for the configured location.

        One request, no retries.
        """
        headers = {"User-Agent": self.user_agent, "Accept": "application/json"}

        try:
            resp = httpx.get(
                self.base_url,
                params=self.params,
                headers=headers,
                timeout=self.timeout,
            )
            resp.raise_for_status()
        except httpx.TimeoutException as e:
            logger.error("Pollen forecast request timed out after %.1fs", self.timeout)
            raise TransportError(
                f"Request timeout after {self.timeout}s", timed_out=True
            ) from e
        except httpx.HTTPStatusError as e:
            status = e.response.status_code
            logger.error("Pollen forecast API returned HTTP %d", status)
            raise TransportError(f"HTTP error {status}", status_code=status) from e
        except httpx.RequestError as e:
            logger.error("Pollen forecast request failed: %s", e)
            raise TransportError(f"Network error: {e}") from e
        except (httpx.InvalidURL, UnicodeEncodeError) as e:
            logger.error("Pollen forecast request could not be built: %s", e)
            raise TransportError(f"Invalid request: {e}") from e

        try:
            payload = resp.json()
        except ValueError as e:
            raise DecodeError(f"Invalid JSON response: {e}") from e

        try:
            return RawForecastResponse.model_validate(payload)
        except ValidationError as e:
            raise DecodeError(
                f"Unexpected response shape: {e.error_count()} validation error(s)"
            ) from e
