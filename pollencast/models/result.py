"""Fetch outcome models: the failure value and the success/failure result."""

from dataclasses import dataclass
from enum import StrEnum
from typing import Generic, TypeAlias, TypeVar

T = TypeVar("T")


class FailureKind(StrEnum):
    NETWORK = "network"
    TIMEOUT = "timeout"
    MALFORMED_PAYLOAD = "malformed_payload"


@dataclass(frozen=True)
class Failure:
    kind: FailureKind
    message: str
    status_code: int | None = None


@dataclass(frozen=True)
class Ok(Generic[T]):
    value: T


@dataclass(frozen=True)
class Err:
    failure: Failure


Result: TypeAlias = Ok[T] | Err
