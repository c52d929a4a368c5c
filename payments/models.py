"""
Database models for the payments app.

Stripe remains the source of truth for customers, Checkout sessions and
mandates.  These tables keep a local trail of what this backend created
and what Stripe told it afterwards: the setup-mode Checkout sessions it
opened, every webhook event it accepted, and the latest known state of
each Bacs Direct Debit mandate.
"""
from __future__ import annotations

from django.db import models


class CheckoutSession(models.Model):
    """A setup-mode Checkout session created through /create-checkout-session."""

    STATUS_OPEN = "open"
    STATUS_COMPLETE = "complete"
    STATUS_EXPIRED = "expired"
    STATUS_CHOICES = [
        (STATUS_OPEN, "Open"),
        (STATUS_COMPLETE, "Complete"),
        (STATUS_EXPIRED, "Expired"),
    ]

    stripe_session_id = models.CharField(
        max_length=255,
        unique=True,
        help_text="Stripe Checkout Session identifier (cs_...)",
    )
    stripe_customer_id = models.CharField(
        max_length=255,
        blank=True,
        help_text="Stripe Customer the mandate is collected for",
    )
    stripe_setup_intent_id = models.CharField(
        max_length=255,
        blank=True,
        help_text="SetupIntent created by Checkout, known once the session completes",
    )
    mode = models.CharField(max_length=20, default="setup")
    status = models.CharField(
        max_length=10,
        choices=STATUS_CHOICES,
        default=STATUS_OPEN,
    )
    locale = models.CharField(max_length=10, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["-created_at"]

    def __str__(self) -> str:
        return f"{self.stripe_session_id} ({self.get_status_display()})"


class WebhookEvent(models.Model):
    """A Stripe event received on /webhook.

    Stripe may deliver the same event more than once; the unique event id
    makes storing it idempotent and ``processed_at`` records whether the
    handler already ran.
    """

    stripe_event_id = models.CharField(max_length=255, unique=True)
    type = models.CharField(max_length=255, db_index=True)
    livemode = models.BooleanField(default=False)
    verified = models.BooleanField(
        default=True,
        help_text="False when the event was accepted without a signing secret",
    )
    payload = models.JSONField(default=dict)
    processed_at = models.DateTimeField(null=True, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ["-created_at"]

    def __str__(self) -> str:
        return f"{self.type} ({self.stripe_event_id})"

    @property
    def data_object(self) -> dict:
        """The ``data.object`` of the event payload, or ``{}``."""
        data = self.payload.get("data") or {}
        obj = data.get("object") if isinstance(data, dict) else None
        return obj if isinstance(obj, dict) else {}


class Mandate(models.Model):
    """Latest known state of a Bacs Direct Debit mandate."""

    STATUS_ACTIVE = "active"
    STATUS_INACTIVE = "inactive"
    STATUS_PENDING = "pending"
    STATUS_CHOICES = [
        (STATUS_ACTIVE, "Active"),
        (STATUS_INACTIVE, "Inactive"),
        (STATUS_PENDING, "Pending"),
    ]

    stripe_mandate_id = models.CharField(max_length=255, unique=True)
    stripe_payment_method_id = models.CharField(max_length=255, blank=True)
    status = models.CharField(
        max_length=10,
        choices=STATUS_CHOICES,
        default=STATUS_PENDING,
    )
    type = models.CharField(
        max_length=20,
        blank=True,
        help_text="Stripe mandate type (multi_use / single_use)",
    )
    stripe_event_created = models.DateTimeField(
        null=True,
        blank=True,
        help_text="Creation time of the last mandate.updated event applied",
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["-updated_at"]

    def __str__(self) -> str:
        return f"Mandate {self.stripe_mandate_id} ({self.get_status_display()})"
