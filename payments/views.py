"""
Views for the payments app.

This module exposes the four endpoints the Checkout client needs:

1. ConfigView
   - URL: /config
   - Method: GET
   - Purpose: returns the publishable key so the browser can initialise
     Stripe.js.

2. CheckoutSessionView
   - URL: /checkout-session?sessionId=cs_...
   - Method: GET
   - Purpose: fetches a Checkout Session from Stripe so the success page
     can display it.

3. CreateCheckoutSessionView
   - URL: /create-checkout-session
   - Method: POST
   - Body (all optional): {"locale": "en-GB", "name": "...", "email": "..."}
   - Purpose: creates a Customer and a setup-mode Checkout Session that
     collects a bacs_debit mandate, and returns its id for
     ``stripe.redirectToCheckout``.

4. StripeWebhookView
   - URL: /webhook
   - Method: POST
   - Purpose: verifies the Stripe-Signature header, stores the event and
     queues it for processing.

None of the endpoints require authentication.  Stripe errors are returned
as HTTP 400.
"""
from __future__ import annotations

import json
import logging

import stripe
from django.conf import settings
from django.db import IntegrityError
from django.http import HttpResponse
from drf_spectacular.utils import OpenApiParameter, OpenApiTypes, extend_schema
from rest_framework import status, views
from rest_framework.response import Response

from .models import CheckoutSession, WebhookEvent
from .serializers import (
    CheckoutSessionCreatedSerializer,
    ConfigSerializer,
    CreateCheckoutSessionSerializer,
    WebhookAckSerializer,
)
from .tasks import process_webhook_event

logger = logging.getLogger(__name__)


def _configure_stripe() -> None:
    stripe.api_key = settings.STRIPE_SECRET_KEY
    if settings.STRIPE_API_VERSION:
        stripe.api_version = settings.STRIPE_API_VERSION


def _stripe_error_response(detail: str, exc: stripe.StripeError) -> Response:
    logger.warning("%s: %s", detail, exc)
    return Response(
        {
            "detail": detail,
            "stripe_error": getattr(exc, "user_message", None) or str(exc),
        },
        status=status.HTTP_400_BAD_REQUEST,
    )


def _delete_customer(customer_id: str) -> None:
    """Remove a Customer whose Checkout Session was never created."""
    try:
        stripe.Customer.delete(customer_id)
    except stripe.StripeError as e:
        logger.warning("Customer %s could not be deleted: %s", customer_id, e)


class ConfigView(views.APIView):
    """Return the publishable key used to initialise Stripe.js."""

    @extend_schema(responses=ConfigSerializer)
    def get(self, request):
        return Response({"publicKey": settings.STRIPE_PUBLISHABLE_KEY})


class CheckoutSessionView(views.APIView):
    """Fetch a Checkout Session to display the JSON result on the success page."""

    @extend_schema(
        parameters=[OpenApiParameter(
            name="sessionId",
            type=OpenApiTypes.STR,
            location=OpenApiParameter.QUERY,
            required=True,
            description="Checkout Session id (cs_...)",
        )],
        responses=OpenApiTypes.OBJECT,
    )
    def get(self, request):
        session_id = (request.query_params.get("sessionId") or "").strip()
        if not session_id:
            return Response(
                {"detail": "sessionId is required."},
                status=status.HTTP_400_BAD_REQUEST,
            )

        _configure_stripe()
        try:
            session = stripe.checkout.Session.retrieve(session_id)
        except stripe.StripeError as e:
            return _stripe_error_response("Checkout session could not be retrieved.", e)

        # str() of a StripeObject is its full JSON representation
        return Response(json.loads(str(session)))


class CreateCheckoutSessionView(views.APIView):
    """Create a setup-mode Checkout Session for a new Customer."""

    @extend_schema(
        request=CreateCheckoutSessionSerializer,
        responses=CheckoutSessionCreatedSerializer,
    )
    def post(self, request):
        serializer = CreateCheckoutSessionSerializer(data=request.data or {})
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data

        customer_params = {
            key: data[key] for key in ("name", "email") if data.get(key)
        }

        # {CHECKOUT_SESSION_ID} is filled in by Stripe on redirect
        params = dict(
            mode="setup",
            payment_method_types=list(settings.CHECKOUT_PAYMENT_METHOD_TYPES),
            success_url=f"{settings.DOMAIN}/success.html?session_id={{CHECKOUT_SESSION_ID}}",
            cancel_url=f"{settings.DOMAIN}/canceled.html",
        )
        if data.get("locale"):
            params["locale"] = data["locale"]

        _configure_stripe()
        try:
            customer = stripe.Customer.create(**customer_params)
        except stripe.StripeError as e:
            return _stripe_error_response("Checkout session could not be created.", e)
        try:
            session = stripe.checkout.Session.create(customer=customer.id, **params)
        except stripe.StripeError as e:
            _delete_customer(customer.id)
            return _stripe_error_response("Checkout session could not be created.", e)

        CheckoutSession.objects.create(
            stripe_session_id=session.id,
            stripe_customer_id=customer.id,
            locale=data.get("locale", ""),
        )
        logger.info("Created checkout session %s for customer %s", session.id, customer.id)
        return Response({"sessionId": session.id})


class StripeWebhookView(views.APIView):
    """Handle incoming Stripe webhook events."""

    permission_classes = []  # no authentication
    throttle_classes = []

    @extend_schema(request=OpenApiTypes.OBJECT, responses=WebhookAckSerializer)
    def post(self, request):
        payload = request.body
        webhook_secret = settings.STRIPE_WEBHOOK_SECRET

        if webhook_secret:
            # Verify the signature using the raw body and the endpoint secret
            sig_header = request.META.get("HTTP_STRIPE_SIGNATURE", "")
            try:
                stripe.Webhook.construct_event(
                    payload=payload, sig_header=sig_header, secret=webhook_secret
                )
            except ValueError:
                # Invalid payload
                logger.warning("Webhook payload could not be parsed.")
                return HttpResponse(status=400)
            except stripe.SignatureVerificationError:
                logger.warning("Webhook signature verification failed.")
                return HttpResponse(status=400)
        else:
            logger.warning("STRIPE_WEBHOOK_SECRET is not set; accepting unverified webhook.")

        try:
            event = json.loads(payload)
        except ValueError:
            return HttpResponse(status=400)
        if not isinstance(event, dict) or not event.get("id") or not event.get("type"):
            logger.warning("Webhook event without id or type rejected.")
            return HttpResponse(status=400)

        record = self._store(event, verified=bool(webhook_secret))
        if record.processed_at is not None:
            logger.info("Event %s already processed; ignoring redelivery.", record.stripe_event_id)
        else:
            process_webhook_event.delay(record.pk)

        return Response({"status": "success"}, status=status.HTTP_200_OK)

    @staticmethod
    def _store(event, *, verified):
        defaults = {
            "type": event["type"],
            "livemode": bool(event.get("livemode")),
            "verified": verified,
            "payload": event,
        }
        try:
            record, _ = WebhookEvent.objects.get_or_create(
                stripe_event_id=event["id"], defaults=defaults
            )
        except IntegrityError:
            # Concurrent redelivery of the same event
            record = WebhookEvent.objects.get(stripe_event_id=event["id"])
        return record
