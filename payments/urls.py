"""
URL configuration for the payments app.

The paths match what the Stripe Checkout client script calls and have no
trailing slash.  Include this module at the site root.
"""
from django.urls import path
from .views import (
    CheckoutSessionView,
    ConfigView,
    CreateCheckoutSessionView,
    StripeWebhookView,
)

urlpatterns = [
    path("config", ConfigView.as_view(), name="stripe-config"),
    path("checkout-session", CheckoutSessionView.as_view(), name="checkout-session"),
    path("create-checkout-session", CreateCheckoutSessionView.as_view(), name="create-checkout-session"),
    path("webhook", StripeWebhookView.as_view(), name="stripe-webhook"),
]
