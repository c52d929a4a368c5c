"""
Celery tasks for the payments app.

These tasks decouple processing of Stripe webhook events from the
request/response cycle.  POST /webhook stores each verified event and
queues ``process_webhook_event``; the task runs the handler registered
for the event type and marks the event processed.
"""
from __future__ import annotations

import logging

from celery import shared_task
from django.db import transaction
from django.utils import timezone

from .models import WebhookEvent
from .webhooks import dispatch_webhook

logger = logging.getLogger(__name__)


@shared_task
def process_webhook_event(webhook_event_id: int, force: bool = False) -> bool:
    """Dispatch a stored webhook event to its handler.

    Args:
        webhook_event_id: Primary key of the ``WebhookEvent`` row.
        force: Run the handler even if the event was already processed
            (used by the admin "re-run" action).

    Returns:
        True if the event was processed by this call.
    """
    with transaction.atomic():
        try:
            event = WebhookEvent.objects.select_for_update().get(pk=webhook_event_id)
        except WebhookEvent.DoesNotExist:
            logger.warning("Webhook event %s no longer exists", webhook_event_id)
            return False
        if event.processed_at is not None and not force:
            return False

        try:
            with transaction.atomic():
                dispatch_webhook(event.type, event.data_object, event.payload)
        except Exception:
            # Stripe already got its 200; leave the row unprocessed so it
            # can be re-run from the admin.
            logger.exception(
                "Error handling event %s (%s)", event.stripe_event_id, event.type
            )
            return False

        event.processed_at = timezone.now()
        event.save(update_fields=["processed_at"])
    return True
