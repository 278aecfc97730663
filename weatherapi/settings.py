"""Django settings for the temperature lookup service."""
from __future__ import annotations

import os
from pathlib import Path

from django.core.exceptions import ImproperlyConfigured

BASE_DIR = Path(__file__).resolve().parent.parent


def env(name: str, default: str | None = None) -> str:
    """Fetch environment variables while allowing explicit defaults."""

    value = os.environ.get(name, default)
    if value is None:
        raise ImproperlyConfigured(f"Environment variable {name} is required")
    return value


SECRET_KEY = env("DJANGO_SECRET_KEY")
DEBUG = os.environ.get("DJANGO_DEBUG", "0") == "1"
ALLOWED_HOSTS = os.environ.get("DJANGO_ALLOWED_HOSTS", "*").split(",")

INSTALLED_APPS = [
    "django.contrib.contenttypes",
    "django.contrib.auth",
    "rest_framework",
    "weatherapi.api",
]

MIDDLEWARE = [
    "django.middleware.security.SecurityMiddleware",
    "django.middleware.common.CommonMiddleware",
]

ROOT_URLCONF = "weatherapi.urls"

WSGI_APPLICATION = "weatherapi.wsgi.application"

DEFAULT_AUTO_FIELD = "django.db.models.BigAutoField"

REDIS_CONNECTION_STRING = os.environ.get("REDIS_CONNECTION_STRING")
if REDIS_CONNECTION_STRING:
    CACHES = {
        "default": {
            "BACKEND": "django_redis.cache.RedisCache",
            "LOCATION": REDIS_CONNECTION_STRING,
            "OPTIONS": {
                "CLIENT_CLASS": "django_redis.client.DefaultClient",
            },
        }
    }
else:
    CACHES = {
        "default": {
            "BACKEND": "django.core.cache.backends.locmem.LocMemCache",
            "LOCATION": "weather-local",
        }
    }

WEATHER_CACHE_ALIAS = os.environ.get("WEATHER_CACHE_ALIAS", "default")
WEATHER_CACHE_TTL = int(os.environ.get("WEATHER_CACHE_TTL", "3600"))

VISUAL_CROSSING_API_KEY = os.environ.get("VISUAL_CROSSING_API_KEY", "")
VISUAL_CROSSING_BASE_URL = os.environ.get(
    "VISUAL_CROSSING_BASE_URL",
    "https://weather.visualcrossing.com/VisualCrossingWebServices/rest/services/timeline",
)
VISUAL_CROSSING_UNIT_GROUP = os.environ.get("VISUAL_CROSSING_UNIT_GROUP", "uk")
VISUAL_CROSSING_TIMEOUT = float(os.environ.get("VISUAL_CROSSING_TIMEOUT", "10"))

REST_FRAMEWORK = {
    "DEFAULT_RENDERER_CLASSES": [
        "rest_framework.renderers.JSONRenderer",
    ],
    "DEFAULT_AUTHENTICATION_CLASSES": [],
    "DEFAULT_PERMISSION_CLASSES": [
        "rest_framework.permissions.AllowAny",
    ],
    "UNAUTHENTICATED_USER": None,
}

LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "simple": {"format": "%(asctime)s %(levelname)s %(name)s: %(message)s"},
    },
    "handlers": {
        "console": {"class": "logging.StreamHandler", "formatter": "simple"},
    },
    "loggers": {
        "weatherapi": {
            "handlers": ["console"],
            "level": os.environ.get("WEATHER_LOG_LEVEL", "INFO"),
        },
    },
}

LANGUAGE_CODE = "en-us"
TIME_ZONE = "UTC"
USE_I18N = True
USE_TZ = True
