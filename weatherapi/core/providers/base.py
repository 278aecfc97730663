from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Optional

import requests
from requests import Response

from weatherapi.core.errors import ProviderBadResponse, ProviderUnavailable


logger = logging.getLogger(__name__)


@dataclass
class RequestConfig:
    timeout: float = 10.0


class HttpWeatherProvider:
    """Base class mapping transport failures onto lookup error kinds.

    A single attempt is made per call; retries are left to the caller.
    """

    name = "http"

    def __init__(
        self,
        session: Optional[requests.Session] = None,
        request_config: Optional[RequestConfig] = None,
    ) -> None:
        self.request_config = request_config or RequestConfig()
        self.session = session or requests.Session()
        self._log = logger

    def _handle_response(self, response: Response) -> Response:
        if response.status_code >= 400:
            self._log.error("Provider returned %s: %s", response.status_code, response.text[:500])
            raise ProviderBadResponse()
        return response

    def _request(self, method: str, url: str, **kwargs: Any) -> Response:
        try:
            response = self.session.request(
                method,
                url,
                timeout=self.request_config.timeout,
                **kwargs,
            )
        except (requests.exceptions.ChunkedEncodingError, requests.exceptions.ContentDecodingError) as exc:
            # the exchange completed but the body could not be read
            self._log.error("Unreadable body from %s", self.name, exc_info=exc)
            raise ProviderBadResponse() from exc
        except requests.RequestException as exc:
            self._log.error("Request to %s failed", self.name, exc_info=exc)
            raise ProviderUnavailable() from exc
        return self._handle_response(response)

    def _read_json(self, response: Response) -> Any:
        try:
            return response.json()
        except (ValueError, requests.RequestException) as exc:
            self._log.error("Unreadable payload from %s: %s", self.name, exc)
            raise ProviderBadResponse() from exc


__all__ = ["HttpWeatherProvider", "RequestConfig"]
