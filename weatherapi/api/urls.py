"""API URL configuration."""
from __future__ import annotations

from django.urls import path

from weatherapi.api.views import WeatherView

urlpatterns = [
    path("", WeatherView.as_view(), name="weather"),
]
