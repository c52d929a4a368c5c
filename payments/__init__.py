"""
Payments app package for the checkout backend.

This package exposes the endpoints the browser needs to set up a Bacs
Direct Debit mandate through Stripe's hosted Checkout page: the
publishable key, Checkout session creation and retrieval, and the Stripe
webhook callback.  Verified webhook events are stored and processed by a
Celery task.  See payments/views.py for API details.
"""
