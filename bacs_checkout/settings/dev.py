"""
Development settings for the checkout backend.

Extends the base settings by enabling debugging and allowing all hosts.  Do
not use these settings in production.
"""
from .base import *  # noqa

# Development toggles
DEBUG = True
ALLOWED_HOSTS = ["*", "127.0.0.1", "localhost"]
CSRF_TRUSTED_ORIGINS = ["http://127.0.0.1:4242", "http://localhost:4242"]
LOGGING["loggers"]["payments"]["level"] = "DEBUG"  # noqa: F405
