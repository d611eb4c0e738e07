"""Shared test fixtures."""

import json
from pathlib import Path

import pytest
import yaml

from pollencast.config.defaults import DEFAULT_LOCATION
from pollencast.config.schema import AppConfig
from pollencast.models.forecast import RawForecastResponse

FIXTURE_DIR = Path(__file__).parent / "fixtures"


@pytest.fixture
def fixtures_dir() -> Path:
    """Return the path to the test fixtures directory."""
    return FIXTURE_DIR


@pytest.fixture
def berlin_payload() -> dict:
    """24 hourly entries for alder, birch and grass."""
    with open(FIXTURE_DIR / "open_meteo_pollen_berlin.json") as f:
        return json.load(f)


@pytest.fixture
def berlin_raw(berlin_payload: dict) -> RawForecastResponse:
    return RawForecastResponse.model_validate(berlin_payload)


@pytest.fixture
def default_config() -> AppConfig:
    """Return default AppConfig pointed at a test host."""
    return AppConfig(
        api={"base_url": "https://test-pollen.example.com/v1/air-quality"},
        location=DEFAULT_LOCATION,
    )


@pytest.fixture
def config_yaml_path(tmp_path: Path) -> Path:
    """Write a minimal valid config YAML and return its path."""
    data = {
        "api": {"timeout_seconds": 10},
        "forecast": {"species": ["birch", "grass"], "forecast_days": 2},
    }
    path = tmp_path / "test_config.yaml"
    with open(path, "w") as f:
        yaml.dump(data, f)
    return path
