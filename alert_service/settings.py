"""Django settings for the alert service.

Values are read from environment variables with development defaults.
"""

import os
from pathlib import Path

from alerts.constants import DEFAULT_ALERTS_PER_PAGE

BASE_DIR = Path(__file__).resolve().parent.parent


def _env_bool(name: str, default: bool = False) -> bool:
    return os.getenv(name, str(default)).lower() in ("1", "true", "yes", "on")


SECRET_KEY = os.getenv("DJANGO_SECRET_KEY", "django-insecure-alert-service-dev-key")

DEBUG = _env_bool("DEBUG", False)

ALLOWED_HOSTS = [
    host.strip()
    for host in os.getenv("ALLOWED_HOSTS", "localhost,127.0.0.1").split(",")
    if host.strip()
]

INSTALLED_APPS = [
    "django.contrib.contenttypes",
    "django.contrib.auth",
    "rest_framework",
    "alerts.apps.AlertsConfig",
]

MIDDLEWARE = [
    "alerts.middleware.RequestIDMiddleware",
    "alerts.middleware.ProcessTimeMiddleware",
    "django.middleware.security.SecurityMiddleware",
    "django.middleware.common.CommonMiddleware",
]

ROOT_URLCONF = "alert_service.urls"

WSGI_APPLICATION = "alert_service.wsgi.application"

DATABASES = {
    "default": {
        "ENGINE": os.getenv("DB_ENGINE", "django.db.backends.postgresql"),
        "NAME": os.getenv("DB_NAME", "forum"),
        "USER": os.getenv("DB_USER", "forum"),
        "PASSWORD": os.getenv("DB_PASSWORD", ""),
        "HOST": os.getenv("DB_HOST", "localhost"),
        "PORT": os.getenv("DB_PORT", "5432"),
        "CONN_MAX_AGE": int(os.getenv("DB_CONN_MAX_AGE", "60")),
    }
}

REDIS_URL = os.getenv("REDIS_URL", "")

if REDIS_URL:
    CACHES = {
        "default": {
            "BACKEND": "django.core.cache.backends.redis.RedisCache",
            "LOCATION": REDIS_URL,
        }
    }
else:
    CACHES = {
        "default": {
            "BACKEND": "django.core.cache.backends.locmem.LocMemCache",
        }
    }

# Cache alias holding the alert type snapshot
ALERTS_CACHE_ALIAS = os.getenv("ALERTS_CACHE_ALIAS", "default")

# Page size used when a caller asks for limit 0
ALERTS_PER_PAGE = int(os.getenv("ALERTS_PER_PAGE", DEFAULT_ALERTS_PER_PAGE))

# Base URL for links in formatted alerts
FORUM_BASE_URL = os.getenv("FORUM_BASE_URL", "http://localhost")

# Shared secret used to validate access tokens
JWT_SECRET = os.getenv("JWT_SECRET", "")

REST_FRAMEWORK = {
    "DEFAULT_AUTHENTICATION_CLASSES": [
        "alerts.auth.JWTAuthentication",
    ],
    "DEFAULT_PERMISSION_CLASSES": [
        "rest_framework.permissions.IsAuthenticated",
    ],
    "DEFAULT_RENDERER_CLASSES": [
        "rest_framework.renderers.JSONRenderer",
    ],
    "EXCEPTION_HANDLER": "alerts.exceptions.custom_exception_handler",
    "UNAUTHENTICATED_USER": None,
}

LANGUAGE_CODE = "en-us"
TIME_ZONE = "UTC"
USE_I18N = False
USE_TZ = True

APPEND_SLASH = False

# structlog is configured by alerts.logging.setup_logging() in the WSGI entry
# point, so Django must not reset the root logger.
LOGGING_CONFIG = None

TEST_MODE = False
