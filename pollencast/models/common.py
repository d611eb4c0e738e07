"""Common types and helpers shared across models."""

from datetime import UTC, datetime
from enum import StrEnum


class PollenSpecies(StrEnum):
    ALDER = "alder"
    BIRCH = "birch"
    GRASS = "grass"
    MUGWORT = "mugwort"
    OLIVE = "olive"
    RAGWEED = "ragweed"

    @property
    def variable(self) -> str:
        """Hourly variable name used by the air-quality API."""
        return f"{self.value}_pollen"


def utc_now() -> datetime:
    return datetime.now(UTC)


def utc_now_iso() -> str:
    return utc_now().isoformat()
