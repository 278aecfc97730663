"""Management command to look up a temperature using the same stack as the API."""
from __future__ import annotations

from typing import Any

from django.core.management.base import BaseCommand, CommandError

from weatherapi.api.views import get_lookup_service
from weatherapi.core.errors import WeatherLookupError


class Command(BaseCommand):
    help = "Print the current temperature for a location, using the cache when possible"

    def add_arguments(self, parser) -> None:  # noqa: D401
        parser.add_argument("--location", type=str, help="Location string passed to the provider")

    def handle(self, *args: Any, **options: Any) -> None:  # noqa: D401
        location = options.get("location") or ""
        try:
            temperature = get_lookup_service().lookup(location)
        except WeatherLookupError as exc:
            raise CommandError(exc.message) from exc
        self.stdout.write(temperature)
