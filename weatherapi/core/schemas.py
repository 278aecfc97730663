"""Payload schema for the upstream current-conditions document."""
from __future__ import annotations

from typing import Any, List

from pydantic import BaseModel, ConfigDict, Field, field_validator

from weatherapi.core.temperature import to_float32

__all__ = ["ConditionsResponse", "CurrentConditions"]


class CurrentConditions(BaseModel):
    model_config = ConfigDict(extra="ignore")

    temp: float = Field(0.0, strict=True)
    stations: List[str] = Field(default_factory=list)

    @field_validator("temp", mode="before")
    @classmethod
    def _temp_default(cls, value: Any) -> Any:
        return 0.0 if value is None else value

    @field_validator("temp")
    @classmethod
    def _single_precision(cls, value: float) -> float:
        return to_float32(value)

    @field_validator("stations", mode="before")
    @classmethod
    def _stations_default(cls, value: Any) -> Any:
        return [] if value is None else value


class ConditionsResponse(BaseModel):
    """Subset of the provider response used to populate the cache.

    Every field is optional on the wire; absent or ``null`` values fall back
    to an empty string, ``0`` and an empty station list.
    """

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    address: str = ""
    resolved_address: str = Field("", alias="resolvedAddress")
    current_conditions: CurrentConditions = Field(
        default_factory=CurrentConditions, alias="currentConditions"
    )

    @field_validator("address", "resolved_address", mode="before")
    @classmethod
    def _address_default(cls, value: Any) -> Any:
        return "" if value is None else value

    @field_validator("current_conditions", mode="before")
    @classmethod
    def _conditions_default(cls, value: Any) -> Any:
        return {} if value is None else value

    @property
    def temperature(self) -> float:
        return self.current_conditions.temp

    @property
    def aliases(self) -> List[str]:
        """Cache keys for this response, in write order.

        The echoed address comes first, then the resolved address, then each
        station as reported. Duplicates are kept.
        """

        return [self.address, self.resolved_address, *self.current_conditions.stations]
