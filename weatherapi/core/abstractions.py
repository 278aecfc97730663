"""Core abstractions for the temperature lookup."""
from __future__ import annotations

from typing import Optional, Protocol

from weatherapi.core.schemas import ConditionsResponse


class CacheStore(Protocol):
    """Key/value store with a per-key expiry.

    ``get`` returns ``None`` when the key is absent or expired and raises
    :class:`~weatherapi.core.errors.CacheError` on any other failure.
    """

    def get(self, key: str) -> Optional[str]:
        ...

    def set(self, key: str, value: str, ttl: float) -> None:
        ...


class WeatherProvider(Protocol):
    """A data source returning current conditions for a location."""

    name: str

    def current_conditions(self, location: str) -> ConditionsResponse:
        """Fetch current conditions for the provided location string."""
        ...


__all__ = ["CacheStore", "WeatherProvider"]
