"""Default forecast location."""

from pollencast.config.schema import LocationConfig

DEFAULT_LOCATION = LocationConfig(name="Berlin", latitude=52.52, longitude=13.41)
