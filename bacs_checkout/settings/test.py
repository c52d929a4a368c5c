"""
Test settings.

SQLite in memory, Celery tasks executed inline and no throttling, so the
suite runs without Postgres or Redis.
"""
from .base import *  # noqa

DEBUG = False
ALLOWED_HOSTS = ["testserver", "localhost"]

DATABASES = {
    "default": {
        "ENGINE": "django.db.backends.sqlite3",
        "NAME": ":memory:",
    }
}

CELERY_TASK_ALWAYS_EAGER = True
CELERY_TASK_EAGER_PROPAGATES = True
CELERY_BROKER_URL = "memory://"
CELERY_RESULT_BACKEND = "cache+memory://"

REST_FRAMEWORK = {
    **REST_FRAMEWORK,  # noqa: F405
    "DEFAULT_THROTTLE_CLASSES": [],
}

STRIPE_SECRET_KEY = "sk_test_123"
STRIPE_PUBLISHABLE_KEY = "pk_test_123"
STRIPE_WEBHOOK_SECRET = "whsec_test_secret"
STRIPE_API_VERSION = None
CHECKOUT_PAYMENT_METHOD_TYPES = ["bacs_debit"]
DOMAIN = "http://testserver"

PASSWORD_HASHERS = ["django.contrib.auth.hashers.MD5PasswordHasher"]
