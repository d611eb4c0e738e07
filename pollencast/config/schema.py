"""Pydantic v2 configuration schema with strict validation."""

from pydantic import BaseModel, Field, field_validator

from pollencast.models.common import PollenSpecies

OPEN_METEO_AIR_QUALITY_URL = "https://air-quality-api.open-meteo.com/v1/air-quality"


class ApiConfig(BaseModel):
    model_config = {"extra": "forbid"}

    base_url: str = OPEN_METEO_AIR_QUALITY_URL
    user_agent: str = "pollencast/0.1.0"
    timeout_seconds: float = Field(default=30.0, gt=0.0)

    @field_validator("user_agent")
    @classmethod
    def _ascii_header(cls, v: str) -> str:
        if not v.isascii():
            raise ValueError("user_agent must be ASCII (sent as an HTTP header)")
        return v


class LocationConfig(BaseModel):
    model_config = {"extra": "forbid"}

    name: str
    latitude: float = Field(ge=-90.0, le=90.0)
    longitude: float = Field(ge=-180.0, le=180.0)


class ForecastConfig(BaseModel):
    model_config = {"extra": "forbid"}

    species: list[PollenSpecies] = Field(
        default=[PollenSpecies.ALDER, PollenSpecies.BIRCH, PollenSpecies.GRASS],
        min_length=1,
    )
    forecast_days: int = Field(default=1, ge=1, le=4)
    timezone: str = "auto"


class AppConfig(BaseModel):
    model_config = {"extra": "forbid"}

    api: ApiConfig = ApiConfig()
    location: LocationConfig | None = None
    forecast: ForecastConfig = ForecastConfig()
