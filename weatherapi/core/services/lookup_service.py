"""Cache-aside temperature lookup."""
from __future__ import annotations

import logging
from typing import Optional

from weatherapi.core.abstractions import CacheStore, WeatherProvider
from weatherapi.core.errors import CacheError, InvalidInput, WeatherLookupError
from weatherapi.core.temperature import format_temperature


class TemperatureLookupService:
    """Serve current temperatures from the cache, falling back to a provider.

    On a miss the provider response is written under every alias it reports
    (echoed address, resolved address, station ids). Writes happen one by
    one; a failed write aborts the lookup and leaves earlier writes in place.
    Nothing is written under the query string itself unless the provider
    echoes it back unchanged as ``address``.
    """

    DEFAULT_TTL = 60 * 60

    def __init__(
        self,
        *,
        cache: CacheStore,
        provider: WeatherProvider,
        ttl: float = DEFAULT_TTL,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self.cache = cache
        self.provider = provider
        self.ttl = ttl
        self._log = logger or logging.getLogger(__name__)

    def lookup(self, location: Optional[str]) -> str:
        if not location:
            raise InvalidInput()

        cached = self._read(location)
        if cached is not None:
            self._log.debug("Cache hit for %r", location)
            return cached

        self._log.debug("Cache miss for %r, querying %s", location, self.provider.name)
        response = self.provider.current_conditions(location)
        temperature = format_temperature(response.temperature)
        for alias in response.aliases:
            self._write(alias, temperature)
        return temperature

    # Helpers ------------------------------------------------------------
    def _read(self, key: str) -> Optional[str]:
        try:
            return self.cache.get(key)
        except WeatherLookupError:
            raise
        except Exception as exc:  # noqa: BLE001 - stores outside this package may raise anything
            raise CacheError(f"cache read failed: {exc}") from exc

    def _write(self, key: str, value: str) -> None:
        try:
            self.cache.set(key, value, self.ttl)
        except WeatherLookupError:
            raise
        except Exception as exc:  # noqa: BLE001
            raise CacheError(f"cache write failed: {exc}") from exc


__all__ = ["TemperatureLookupService"]
