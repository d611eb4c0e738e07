"""Exceptions raised by the fetch pipeline below the repository."""


class PollenError(Exception):
    """Base exception for forecast retrieval errors."""


class TransportError(PollenError):
    """Connection failure, non-2xx status, or timeout."""

    def __init__(
        self, message: str, status_code: int | None = None, timed_out: bool = False
    ):
        super().__init__(message)
        self.status_code = status_code
        self.timed_out = timed_out


class DecodeError(PollenError):
    """Body is not JSON or does not have the expected shape."""


class MappingError(PollenError):
    """Payload decoded but cannot form a consistent forecast."""
