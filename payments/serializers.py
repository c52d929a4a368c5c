"""
Serializers for the payments app.

These serializers describe the small JSON bodies exchanged with the
browser and perform minimal validation.  Stripe objects themselves are
passed through untouched; heavy lifting (talking to Stripe) happens in
the views and tasks.
"""
from __future__ import annotations

from rest_framework import serializers


# Locales accepted by Checkout's ``locale`` parameter
CHECKOUT_LOCALES = (
    "auto", "bg", "cs", "da", "de", "el", "en", "en-GB", "es", "es-419",
    "et", "fi", "fil", "fr", "fr-CA", "hr", "hu", "id", "it", "ja", "ko",
    "lt", "lv", "ms", "mt", "nb", "nl", "pl", "pt", "pt-BR", "ro", "ru",
    "sk", "sl", "sv", "th", "tr", "vi", "zh", "zh-HK", "zh-TW",
)
_LOCALES_BY_KEY = {locale.lower(): locale for locale in CHECKOUT_LOCALES}


def checkout_locale(value: str) -> str:
    """Map a browser language tag onto a locale Checkout accepts.

    The full tag wins when Checkout knows it ("en-GB", "pt-BR"), then its
    language ("fr-FR" -> "fr"); anything else becomes "auto" so Checkout
    picks from the browser instead of rejecting the session.
    """
    key = value.strip().replace("_", "-").lower()
    if not key:
        return ""
    if key in _LOCALES_BY_KEY:
        return _LOCALES_BY_KEY[key]
    return _LOCALES_BY_KEY.get(key.split("-")[0], "auto")


class ConfigSerializer(serializers.Serializer):
    """Response of GET /config."""

    publicKey = serializers.CharField()


class CreateCheckoutSessionSerializer(serializers.Serializer):
    """Optional body of POST /create-checkout-session."""

    locale = serializers.CharField(required=False, allow_blank=True, max_length=35)
    name = serializers.CharField(required=False, allow_blank=True, max_length=255)
    email = serializers.EmailField(required=False, allow_blank=True)

    def validate_locale(self, value):
        return checkout_locale(value) if value else ""


class CheckoutSessionCreatedSerializer(serializers.Serializer):
    """Response of POST /create-checkout-session."""

    sessionId = serializers.CharField()


class WebhookAckSerializer(serializers.Serializer):
    """Response of POST /webhook."""

    status = serializers.CharField()
