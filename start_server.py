"""Production server startup script for the alert service.

Starts the Django application with Gunicorn. Worker and bind settings can be
overridden with GUNICORN_BIND, GUNICORN_WORKERS and GUNICORN_THREADS.
"""

import os
import sys

from gunicorn.app.wsgiapp import run


def build_gunicorn_argv() -> list[str]:
    """Return the Gunicorn command line for the alert service."""
    return [
        "gunicorn",
        "alert_service.wsgi:application",
        "--bind",
        os.getenv("GUNICORN_BIND", "0.0.0.0:8000"),
        "--workers",
        os.getenv("GUNICORN_WORKERS", "4"),
        "--threads",
        os.getenv("GUNICORN_THREADS", "2"),
        "--timeout",
        "30",
        "--access-logfile",
        "-",
        "--error-logfile",
        "-",
    ]


def main():
    """Start the alert service using Gunicorn."""
    sys.argv = build_gunicorn_argv()
    run()


if __name__ == "__main__":
    main()
