"""
ASGI entry point for the checkout backend.

Run with ``uvicorn bacs_checkout.asgi:application --port 4242``.  The
default settings module is the development configuration.
"""

import os

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "bacs_checkout.settings.dev")

from django.conf import settings  # noqa: E402
from django.core.asgi import get_asgi_application  # noqa: E402
from django.contrib.staticfiles.handlers import ASGIStaticFilesHandler  # noqa: E402

application = get_asgi_application()

# Serve /static/ (admin and API docs assets) when using uvicorn in DEBUG mode
if settings.DEBUG:
    application = ASGIStaticFilesHandler(application)
