"""Cache stores used by the lookup service."""
from __future__ import annotations

import logging
from typing import Optional

from django.core.cache import caches
from django.core.cache.backends.base import BaseCache

from weatherapi.core.errors import CacheError

logger = logging.getLogger(__name__)

_MISSING = object()


class DjangoCacheStore:
    """Expose a configured Django cache alias as a cache store.

    The backend is resolved through ``caches`` on every call so each worker
    thread uses its own connection handle. Any backend exception (for
    instance ``django_redis`` connection errors) becomes :class:`CacheError`.
    """

    def __init__(self, alias: str = "default", backend: Optional[BaseCache] = None) -> None:
        self.alias = alias
        self._backend = backend

    @property
    def backend(self) -> BaseCache:
        return self._backend if self._backend is not None else caches[self.alias]

    def get(self, key: str) -> Optional[str]:
        try:
            value = self.backend.get(key, _MISSING)
        except Exception as exc:  # noqa: BLE001 - any backend failure is a cache error
            logger.error("Cache read failed for %r", key, exc_info=exc)
            raise CacheError(f"cache read failed: {exc}") from exc
        if value is _MISSING:
            return None
        return value

    def set(self, key: str, value: str, ttl: float) -> None:
        try:
            self.backend.set(key, value, ttl)
        except Exception as exc:  # noqa: BLE001 - any backend failure is a cache error
            logger.error("Cache write failed for %r", key, exc_info=exc)
            raise CacheError(f"cache write failed: {exc}") from exc


__all__ = ["DjangoCacheStore"]
