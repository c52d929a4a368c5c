"""
Stripe webhook event handlers.

Events reach this module after POST /webhook has verified and stored
them and the Celery task in ``payments.tasks`` has picked them up.
Handlers are registered per event type and receive the event's
``data.object`` as a plain dict, followed by the whole event payload
(``{}`` when dispatched without one).

Stripe does not deliver events in order.  ``mandate.updated`` compares
the event's ``created`` timestamp with the last one applied and ignores
older events.

Handled event types:
- ``checkout.session.completed``           → mark the local session complete
- ``mandate.updated``                      → record the mandate's new status
- ``payment_method.automatically_updated`` → log only

Anything else is acknowledged and ignored.
"""
from __future__ import annotations

import logging
from datetime import datetime, timezone as dt_timezone
from typing import Any, Callable, Dict

from django.db import transaction

from .models import CheckoutSession, Mandate

logger = logging.getLogger(__name__)

Handler = Callable[[Dict[str, Any], Dict[str, Any]], None]

_HANDLERS: Dict[str, Handler] = {}


def register_handler(event_type: str) -> Callable[[Handler], Handler]:
    """Register the decorated function as the handler for ``event_type``."""

    def decorator(func: Handler) -> Handler:
        _HANDLERS[event_type] = func
        return func

    return decorator


def get_handler(event_type: str) -> Handler | None:
    return _HANDLERS.get(event_type)


def dispatch_webhook(
    event_type: str,
    data_object: Dict[str, Any],
    event: Dict[str, Any] | None = None,
) -> bool:
    """Run the handler registered for ``event_type``.

    Returns:
        True if a handler ran, False if the event type is not handled.
    """
    handler = get_handler(event_type)
    if handler is None:
        logger.debug("Unhandled event type: %s", event_type)
        return False
    handler(data_object, event or {})
    return True


@register_handler("checkout.session.completed")
def handle_checkout_session_completed(session: Dict[str, Any], event: Dict[str, Any]) -> None:
    """The customer finished the hosted page; Checkout created a SetupIntent."""
    session_id = session.get("id")
    logger.info(
        "Checkout session completed session=%s customer=%s setup_intent=%s",
        session_id,
        session.get("customer"),
        session.get("setup_intent"),
    )
    if not session_id:
        logger.warning("checkout.session.completed without a session id")
        return

    with transaction.atomic():
        CheckoutSession.objects.update_or_create(
            stripe_session_id=session_id,
            defaults={
                "status": CheckoutSession.STATUS_COMPLETE,
                "stripe_customer_id": session.get("customer") or "",
                "stripe_setup_intent_id": session.get("setup_intent") or "",
                "mode": session.get("mode") or "setup",
            },
        )


@register_handler("mandate.updated")
def handle_mandate_updated(mandate: Dict[str, Any], event: Dict[str, Any]) -> None:
    """A Bacs mandate changed state (pending → active, or was revoked)."""
    mandate_id = mandate.get("id")
    status = mandate.get("status") or Mandate.STATUS_PENDING
    logger.info("Mandate updated mandate=%s status=%s", mandate_id, status)
    if not mandate_id:
        logger.warning("mandate.updated without a mandate id")
        return

    event_created = _event_created(event)
    with transaction.atomic():
        current = (
            Mandate.objects.select_for_update()
            .filter(stripe_mandate_id=mandate_id)
            .first()
        )
        if (
            current is not None
            and current.stripe_event_created is not None
            and event_created is not None
            and event_created < current.stripe_event_created
        ):
            logger.info(
                "Ignoring stale mandate.updated mandate=%s event=%s",
                mandate_id,
                event.get("id"),
            )
            return

        defaults = {
            "status": status,
            "type": mandate.get("type") or "",
            "stripe_payment_method_id": mandate.get("payment_method") or "",
        }
        if event_created is not None:
            defaults["stripe_event_created"] = event_created
        Mandate.objects.update_or_create(stripe_mandate_id=mandate_id, defaults=defaults)


def _event_created(event: Dict[str, Any]) -> datetime | None:
    created = event.get("created")
    if not isinstance(created, int):
        return None
    return datetime.fromtimestamp(created, tz=dt_timezone.utc)


@register_handler("payment_method.automatically_updated")
def handle_payment_method_automatically_updated(
    payment_method: Dict[str, Any], event: Dict[str, Any]
) -> None:
    logger.info(
        "Payment method automatically updated payment_method=%s customer=%s",
        payment_method.get("id"),
        payment_method.get("customer"),
    )
