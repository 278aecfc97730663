"""Error kinds raised by the temperature lookup."""
from __future__ import annotations

from enum import Enum
from typing import Optional


class ErrorKind(str, Enum):
    INVALID_INPUT = "invalid_input"
    CACHE_ERROR = "cache_error"
    PROVIDER_UNAVAILABLE = "provider_unavailable"
    PROVIDER_BAD_RESPONSE = "provider_bad_response"


class WeatherLookupError(RuntimeError):
    """Base error for a failed lookup.

    Subclasses pin ``kind`` and a default message so callers can either
    catch a specific class or branch on :attr:`kind`.
    """

    kind: ErrorKind
    default_message = "weather lookup failed"

    def __init__(self, message: Optional[str] = None) -> None:
        super().__init__(message or self.default_message)

    @property
    def message(self) -> str:
        return str(self)


class InvalidInput(WeatherLookupError):
    """Raised when the location is missing or empty."""

    kind = ErrorKind.INVALID_INPUT
    default_message = "missing location query parameter"


class CacheError(WeatherLookupError):
    """Raised when the cache store fails for a reason other than a miss."""

    kind = ErrorKind.CACHE_ERROR
    default_message = "cache store failure"


class ProviderUnavailable(WeatherLookupError):
    """Raised when the upstream request could not be completed."""

    kind = ErrorKind.PROVIDER_UNAVAILABLE
    default_message = "failed to connect to the Visual Crossing API"


class ProviderBadResponse(WeatherLookupError):
    """Raised when the upstream payload cannot be read or parsed."""

    kind = ErrorKind.PROVIDER_BAD_RESPONSE
    default_message = "something happened with the response from the Visual Crossing API"


__all__ = [
    "ErrorKind",
    "WeatherLookupError",
    "InvalidInput",
    "CacheError",
    "ProviderUnavailable",
    "ProviderBadResponse",
]
