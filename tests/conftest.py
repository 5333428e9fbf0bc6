"""Pytest configuration and shared fixtures."""

import os

import django
from django.core.cache import cache
from django.test import Client

import pytest

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "alert_service.settings_test")
django.setup()


@pytest.fixture(autouse=True)
def clear_alert_type_cache():
    """Start every test with an empty cache."""
    cache.clear()
    yield
    cache.clear()


@pytest.fixture
def api_client():
    """Provide Django test client."""
    return Client()
