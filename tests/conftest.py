"""
Common test fixtures for the checkout API tests.

Provides helpers for building Stripe-shaped objects and webhook events,
and for signing webhook payloads with the same scheme Stripe uses
(``t=<timestamp>,v1=<hmac-sha256>``) so that signature verification runs
for real.
"""
import hashlib
import hmac
import json
import time

import pytest
import stripe
from django.conf import settings


def sign_payload(payload: str, secret: str, timestamp: int | None = None) -> str:
    """Return a Stripe-Signature header value for ``payload``."""
    timestamp = int(time.time()) if timestamp is None else timestamp
    signed = f"{timestamp}.{payload}".encode("utf-8")
    signature = hmac.new(secret.encode("utf-8"), signed, hashlib.sha256).hexdigest()
    return f"t={timestamp},v1={signature}"


@pytest.fixture
def stripe_object():
    """Build a Stripe object of the given class from a plain dict."""

    def build(cls, values):
        return cls.construct_from(values, settings.STRIPE_SECRET_KEY)

    return build


@pytest.fixture
def make_event():
    """Build a Stripe event payload (as a JSON string)."""

    def build(event_type, data_object, event_id="evt_test_1", livemode=False):
        return json.dumps(
            {
                "id": event_id,
                "object": "event",
                "type": event_type,
                "livemode": livemode,
                "created": int(time.time()),
                "data": {"object": data_object},
            }
        )

    return build


@pytest.fixture
def post_webhook(client):
    """POST a payload to /webhook, signed with the configured secret by default."""

    def post(payload, signature=None, secret=None):
        headers = {}
        if signature is None and (secret or settings.STRIPE_WEBHOOK_SECRET):
            signature = sign_payload(payload, secret or settings.STRIPE_WEBHOOK_SECRET)
        if signature is not None:
            headers["HTTP_STRIPE_SIGNATURE"] = signature
        return client.post(
            "/webhook", data=payload, content_type="application/json", **headers
        )

    return post


@pytest.fixture
def checkout_session_values():
    return {
        "id": "cs_test_a1b2c3",
        "object": "checkout.session",
        "mode": "setup",
        "customer": "cus_test_123",
        "payment_method_types": ["bacs_debit"],
        "setup_intent": None,
        "status": "open",
        "url": "https://checkout.stripe.com/c/pay/cs_test_a1b2c3",
    }


@pytest.fixture
def sign():
    return sign_payload
