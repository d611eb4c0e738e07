"""Screen state variants observed by the display layer."""

from dataclasses import dataclass, field
from enum import StrEnum
from typing import TypeAlias

from pollencast.models.forecast import ForecastEntity
from pollencast.models.result import Failure


class ScreenStatus(StrEnum):
    IDLE = "idle"
    LOADING = "loading"
    LOADED = "loaded"
    FAILED = "failed"


@dataclass(frozen=True)
class Idle:
    status: ScreenStatus = field(default=ScreenStatus.IDLE, init=False)


@dataclass(frozen=True)
class Loading:
    status: ScreenStatus = field(default=ScreenStatus.LOADING, init=False)


@dataclass(frozen=True)
class Loaded:
    forecast: ForecastEntity
    status: ScreenStatus = field(default=ScreenStatus.LOADED, init=False)


@dataclass(frozen=True)
class Failed:
    failure: Failure
    status: ScreenStatus = field(default=ScreenStatus.FAILED, init=False)


ScreenState: TypeAlias = Idle | Loading | Loaded | Failed
