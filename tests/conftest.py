from __future__ import annotations

import time
from typing import Callable, Dict, List, Optional, Tuple

import pytest

from weatherapi.core.errors import CacheError, WeatherLookupError
from weatherapi.core.schemas import ConditionsResponse


class InMemoryCacheStore:
    """A lightweight TTL store emulating Redis behaviour for tests."""

    def __init__(self, time_func: Callable[[], float] = time.monotonic) -> None:
        self._time_func = time_func
        self._storage: Dict[str, Tuple[float, str]] = {}

    def get(self, key: str) -> Optional[str]:
        item = self._storage.get(key)
        if not item:
            return None
        expires_at, value = item
        if expires_at <= self._time_func():
            self._storage.pop(key, None)
            return None
        return value

    def set(self, key: str, value: str, ttl: float) -> None:
        self._storage[key] = (self._time_func() + ttl, value)

    def keys(self) -> List[str]:
        now = self._time_func()
        return [key for key, (expires_at, _) in self._storage.items() if expires_at > now]


class RecordingStore(InMemoryCacheStore):
    """In-memory store that records calls and can fail on demand."""

    def __init__(self, *, fail_get: bool = False, fail_set_on: Optional[int] = None) -> None:
        super().__init__()
        self.fail_get = fail_get
        self.fail_set_on = fail_set_on
        self.gets: List[str] = []
        self.sets: List[Tuple[str, str, float]] = []

    def get(self, key: str) -> Optional[str]:
        self.gets.append(key)
        if self.fail_get:
            raise CacheError("connection refused")
        return super().get(key)

    def set(self, key: str, value: str, ttl: float) -> None:
        if self.fail_set_on is not None and len(self.sets) == self.fail_set_on:
            self.sets.append((key, value, ttl))
            raise CacheError("connection reset")
        self.sets.append((key, value, ttl))
        super().set(key, value, ttl)


class StubProvider:
    name = "stub"

    def __init__(self, payload: Optional[Dict] = None, error: Optional[WeatherLookupError] = None) -> None:
        self.payload = payload or {}
        self.error = error
        self.calls: List[str] = []

    def current_conditions(self, location: str) -> ConditionsResponse:
        self.calls.append(location)
        if self.error is not None:
            raise self.error
        return ConditionsResponse.model_validate(self.payload)


def make_payload(address="London", resolved="London, England, United Kingdom", temp=7.5, stations=("EGLC", "D5621")):
    return {
        "address": address,
        "resolvedAddress": resolved,
        "currentConditions": {"temp": temp, "stations": list(stations)},
    }


@pytest.fixture()
def store() -> RecordingStore:
    return RecordingStore()


@pytest.fixture()
def make_store():
    return RecordingStore


@pytest.fixture()
def make_provider():
    return StubProvider


@pytest.fixture()
def payload_factory():
    return make_payload
