"""REST API view answering current-temperature queries."""
from __future__ import annotations

import logging
from functools import lru_cache

from django.conf import settings
from rest_framework import renderers, status
from rest_framework.negotiation import BaseContentNegotiation
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.views import APIView

from weatherapi.core.cache import DjangoCacheStore
from weatherapi.core.errors import ErrorKind, WeatherLookupError
from weatherapi.core.providers.base import RequestConfig
from weatherapi.core.providers.visualcrossing import VisualCrossingProvider
from weatherapi.core.services.lookup_service import TemperatureLookupService


logger = logging.getLogger(__name__)

ERROR_STATUS = {
    ErrorKind.INVALID_INPUT: status.HTTP_400_BAD_REQUEST,
    ErrorKind.CACHE_ERROR: status.HTTP_500_INTERNAL_SERVER_ERROR,
    ErrorKind.PROVIDER_UNAVAILABLE: status.HTTP_500_INTERNAL_SERVER_ERROR,
    ErrorKind.PROVIDER_BAD_RESPONSE: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


@lru_cache(maxsize=1)
def get_lookup_service() -> TemperatureLookupService:
    provider = VisualCrossingProvider(
        api_key=settings.VISUAL_CROSSING_API_KEY,
        base_url=settings.VISUAL_CROSSING_BASE_URL,
        unit_group=settings.VISUAL_CROSSING_UNIT_GROUP,
        request_config=RequestConfig(timeout=settings.VISUAL_CROSSING_TIMEOUT),
    )
    return TemperatureLookupService(
        cache=DjangoCacheStore(settings.WEATHER_CACHE_ALIAS),
        provider=provider,
        ttl=settings.WEATHER_CACHE_TTL,
    )


class PlainTextRenderer(renderers.BaseRenderer):
    media_type = "text/plain"
    format = "txt"
    charset = "utf-8"

    def render(self, data, accepted_media_type=None, renderer_context=None):
        return str(data).encode(self.charset)


class IgnoreClientContentNegotiation(BaseContentNegotiation):
    """Always answer with the first renderer, whatever the Accept header says."""

    def select_parser(self, request, parsers):
        return parsers[0] if parsers else None

    def select_renderer(self, request, renderers, format_suffix=None):
        return (renderers[0], renderers[0].media_type)


class WeatherView(APIView):
    """Return the current temperature for ``?location=``."""

    permission_classes = [AllowAny]
    renderer_classes = [PlainTextRenderer]
    content_negotiation_class = IgnoreClientContentNegotiation

    def get(self, request, *args, **kwargs):  # noqa: D401
        """Return the temperature as plain text."""
        location = request.query_params.get("location", "")
        try:
            temperature = get_lookup_service().lookup(location)
        except WeatherLookupError as exc:
            status_code = ERROR_STATUS[exc.kind]
            if status_code >= 500:
                logger.error("Lookup for %r failed (%s): %s", location, exc.kind.value, exc)
            else:
                logger.info("Rejected lookup: %s", exc)
            return Response(exc.message, status=status_code)
        return Response(temperature, status=status.HTTP_200_OK)
