from __future__ import annotations

import os

import django
import pytest
import requests_mock as requests_mock_lib


os.environ.setdefault("DJANGO_SECRET_KEY", "test-secret")
os.environ.setdefault("DJANGO_SETTINGS_MODULE", "weatherapi.settings")
os.environ.setdefault("TESTING_MODE", "1")
os.environ.setdefault("VISUAL_CROSSING_API_KEY", "test-key")
os.environ.setdefault("VISUAL_CROSSING_BASE_URL", "https://vc.test/timeline")
os.environ.pop("REDIS_CONNECTION_STRING", None)

django.setup()


@pytest.fixture()
def requests_mock():
    with requests_mock_lib.Mocker() as mocker:
        yield mocker
