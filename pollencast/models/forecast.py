"""Pollen forecast models: raw API payload and the immutable domain entity."""

from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import datetime
from types import MappingProxyType

from pydantic import BaseModel

from pollencast.models.common import PollenSpecies


class RawHourly(BaseModel):
    """Parallel hourly sequences; index i across all lists is the same hour."""

    model_config = {"extra": "ignore"}

    time: list[str]
    alder_pollen: list[float | None] | None = None
    birch_pollen: list[float | None] | None = None
    grass_pollen: list[float | None] | None = None
    mugwort_pollen: list[float | None] | None = None
    olive_pollen: list[float | None] | None = None
    ragweed_pollen: list[float | None] | None = None

    def series(self, species: PollenSpecies) -> list[float | None] | None:
        return getattr(self, species.variable)


class RawForecastResponse(BaseModel):
    """Open-Meteo air-quality response, as it arrives on the wire."""

    model_config = {"extra": "ignore"}

    latitude: float | None = None
    longitude: float | None = None
    elevation: float | None = None
    timezone: str = "GMT"
    utc_offset_seconds: int = 0
    hourly_units: dict[str, str] = {}
    hourly: RawHourly


@dataclass(frozen=True)
class HourlyPollen:
    timestamp: datetime
    concentrations: Mapping[PollenSpecies, float | None]

    # Read-only mappings cannot be hashed
    __hash__ = None  # type: ignore[assignment]

    def __post_init__(self) -> None:
        object.__setattr__(
            self, "concentrations", MappingProxyType(dict(self.concentrations))
        )


@dataclass(frozen=True)
class ForecastEntity:
    latitude: float
    longitude: float
    elevation: float
    timezone: str
    hours: tuple[HourlyPollen, ...]
    units: Mapping[PollenSpecies, str] = field(default_factory=dict)
    species: tuple[PollenSpecies, ...] = ()

    __hash__ = None  # type: ignore[assignment]

    def __post_init__(self) -> None:
        object.__setattr__(self, "hours", tuple(self.hours))
        object.__setattr__(self, "units", MappingProxyType(dict(self.units)))
        if not self.species and self.hours:
            present = self.hours[0].concentrations
            object.__setattr__(
                self, "species", tuple(s for s in PollenSpecies if s in present)
            )
        else:
            object.__setattr__(self, "species", tuple(self.species))

    def series(self, species: PollenSpecies) -> list[float | None]:
        return [h.concentrations.get(species) for h in self.hours]

    def peak(self, species: PollenSpecies) -> tuple[datetime, float] | None:
        """Hour and value of the highest concentration, ignoring missing hours."""
        best: tuple[datetime, float] | None = None
        for h in self.hours:
            value = h.concentrations.get(species)
            if value is None:
                continue
            if best is None or value > best[1]:
                best = (h.timestamp, value)
        return best
