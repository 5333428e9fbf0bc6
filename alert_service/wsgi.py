"""WSGI entry point for the alert service."""

import os

from django.core.wsgi import get_wsgi_application

from alerts.logging import setup_logging

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "alert_service.settings")

setup_logging()

application = get_wsgi_application()
