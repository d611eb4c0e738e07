"""Forecast repository: fetch, map, and translate errors into a Failure."""

import logging

from pollencast.ingest.errors import DecodeError, MappingError, TransportError
from pollencast.ingest.mapper import map_forecast
from pollencast.ingest.pollen_client import PollenClient
from pollencast.models.forecast import ForecastEntity
from pollencast.models.result import Err, Failure, FailureKind, Ok, Result

logger = logging.getLogger(__name__)


class ForecastRepository:
    def __init__(self, client: PollenClient):
        self.client = client

    def fetch(self) -> Result[ForecastEntity]:
        """Fetch and map the forecast. Never raises for pipeline errors."""
        try:
            raw = self.client.get_forecast()
            forecast = map_forecast(raw)
        except TransportError as e:
            kind = FailureKind.TIMEOUT if e.timed_out else FailureKind.NETWORK
            failure = Failure(kind=kind, message=str(e), status_code=e.status_code)
        except (DecodeError, MappingError) as e:
            failure = Failure(kind=FailureKind.MALFORMED_PAYLOAD, message=str(e))
        else:
            logger.info(
                "Fetched pollen forecast: %d hours at (%.2f, %.2f)",
                len(forecast.hours), forecast.latitude, forecast.longitude,
            )
            return Ok(forecast)

        logger.warning("Forecast fetch failed (%s): %s", failure.kind, failure.message)
        return Err(failure)
