"""Visual Crossing timeline API provider."""
from __future__ import annotations

import logging
import os
from typing import Optional
from urllib.parse import quote

import requests
from pydantic import ValidationError

from weatherapi.core.errors import ProviderBadResponse
from weatherapi.core.providers.base import HttpWeatherProvider, RequestConfig
from weatherapi.core.schemas import ConditionsResponse


logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = (
    "https://weather.visualcrossing.com/VisualCrossingWebServices/rest/services/timeline"
)


class VisualCrossingProvider(HttpWeatherProvider):
    """Fetch current conditions from the Visual Crossing timeline endpoint."""

    name = "visualcrossing"

    def __init__(
        self,
        *,
        api_key: str,
        base_url: str = DEFAULT_BASE_URL,
        unit_group: str = "uk",
        session: Optional[requests.Session] = None,
        request_config: Optional[RequestConfig] = None,
    ) -> None:
        super().__init__(session=session, request_config=request_config)
        self.api_key = api_key
        self.base_url = base_url.rstrip("/")
        self.unit_group = unit_group
        self._testing_mode = os.environ.get("TESTING_MODE", "0") == "1"

    def current_conditions(self, location: str) -> ConditionsResponse:  # noqa: D401
        """Return the parsed current conditions for ``location``."""
        url = f"{self.base_url}/{quote(location, safe='')}"
        params = {"unitGroup": self.unit_group, "key": self.api_key, "contentType": "json"}
        response = self._request("GET", url, params=params)
        if self._testing_mode:
            logger.info("Visual Crossing request", extra={"url": url, "status": response.status_code})

        data = self._read_json(response)
        try:
            return ConditionsResponse.model_validate(data)
        except ValidationError as exc:
            logger.error("Visual Crossing payload did not validate: %s", exc)
            raise ProviderBadResponse() from exc


__all__ = ["DEFAULT_BASE_URL", "VisualCrossingProvider"]
