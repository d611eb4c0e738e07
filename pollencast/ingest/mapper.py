"""Mapping between the raw API payload and the forecast entity."""

from datetime import datetime

from pollencast.ingest.errors import MappingError
from pollencast.models.common import PollenSpecies
from pollencast.models.forecast import (
    ForecastEntity,
    HourlyPollen,
    RawForecastResponse,
    RawHourly,
)


def map_forecast(raw: RawForecastResponse) -> ForecastEntity:
    """Re-express parallel hourly sequences as one record per hour.

    Raises MappingError when location scalars are missing, when no species
    series is present, or when any series length differs from the time axis.
    """
    missing = [
        name
        for name in ("latitude", "longitude", "elevation")
        if getattr(raw, name) is None
    ]
    if missing:
        raise MappingError(f"Missing location fields: {', '.join(missing)}")

    hourly = raw.hourly
    series: dict[PollenSpecies, list[float | None]] = {}
    for species in PollenSpecies:
        values = hourly.series(species)
        if values is None:
            continue
        if len(values) != len(hourly.time):
            raise MappingError(
                f"{species.variable} has {len(values)} values "
                f"for {len(hourly.time)} timestamps"
            )
        series[species] = values

    if not series:
        raise MappingError("Payload contains no pollen series")

    hours = []
    for i, stamp in enumerate(hourly.time):
        hours.append(
            HourlyPollen(
                timestamp=_parse_time(stamp),
                concentrations={s: values[i] for s, values in series.items()},
            )
        )

    units = {
        s: raw.hourly_units[s.variable]
        for s in series
        if s.variable in raw.hourly_units
    }

    return ForecastEntity(
        latitude=raw.latitude,
        longitude=raw.longitude,
        elevation=raw.elevation,
        timezone=raw.timezone,
        hours=tuple(hours),
        units=units,
        species=tuple(series),
    )


def to_raw(forecast: ForecastEntity) -> RawForecastResponse:
    """Serialize a forecast back to the wire shape."""
    hourly: dict[str, list] = {
        "time": [_format_time(h.timestamp) for h in forecast.hours]
    }
    for species in forecast.species:
        hourly[species.variable] = forecast.series(species)

    return RawForecastResponse(
        latitude=forecast.latitude,
        longitude=forecast.longitude,
        elevation=forecast.elevation,
        timezone=forecast.timezone,
        hourly_units={s.variable: unit for s, unit in forecast.units.items()},
        hourly=RawHourly(**hourly),
    )


def _parse_time(stamp: str) -> datetime:
    try:
        return datetime.fromisoformat(stamp)
    except ValueError as e:
        raise MappingError(f"Unparseable timestamp: {stamp!r}") from e


def _format_time(ts: datetime) -> str:
    # API timestamps are minute precision
    if ts.second == 0 and ts.microsecond == 0:
        return ts.isoformat(timespec="minutes")
    return ts.isoformat()
