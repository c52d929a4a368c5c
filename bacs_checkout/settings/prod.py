"""
Production settings for the checkout backend.

Serves the Checkout endpoints over HTTPS only and refuses to start
without the Stripe secrets: an empty STRIPE_WEBHOOK_SECRET would make
POST /webhook accept unsigned events, and anyone could then mark
sessions complete or change mandate status.
"""
from django.core.exceptions import ImproperlyConfigured

from .base import *  # noqa

DEBUG = False

for _name in ("STRIPE_SECRET_KEY", "STRIPE_WEBHOOK_SECRET"):
    if not globals()[_name]:
        raise ImproperlyConfigured(f"{_name} must be set in production.")

if SECRET_KEY == "dev-insecure":  # noqa: F405
    raise ImproperlyConfigured("DJANGO_SECRET_KEY must be set in production.")

# Stripe posts webhooks over HTTPS; the hosted Checkout redirect returns
# the customer to DOMAIN, which must be https as well.
SESSION_COOKIE_SECURE = True
CSRF_COOKIE_SECURE = True
SECURE_SSL_REDIRECT = True
SECURE_PROXY_SSL_HEADER = ("HTTP_X_FORWARDED_PROTO", "https")

SECURE_HSTS_SECONDS = 31536000
SECURE_HSTS_INCLUDE_SUBDOMAINS = True
