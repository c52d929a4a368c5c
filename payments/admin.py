"""
Django admin registration for the payments app.

Provides list displays and filters for Checkout sessions, webhook events
and mandates to facilitate troubleshooting by administrators.  Stored
webhook events that failed processing can be re-queued from here.
"""
from django.contrib import admin
from .models import CheckoutSession, Mandate, WebhookEvent
from .tasks import process_webhook_event


@admin.register(CheckoutSession)
class CheckoutSessionAdmin(admin.ModelAdmin):
    list_display = (
        "stripe_session_id",
        "stripe_customer_id",
        "status",
        "stripe_setup_intent_id",
        "created_at",
    )
    list_filter = ("status", "mode")
    search_fields = ("stripe_session_id", "stripe_customer_id", "stripe_setup_intent_id")
    ordering = ("-created_at",)


@admin.register(WebhookEvent)
class WebhookEventAdmin(admin.ModelAdmin):
    list_display = (
        "stripe_event_id",
        "type",
        "livemode",
        "verified",
        "processed_at",
        "created_at",
    )
    list_filter = ("type", "livemode", "verified")
    search_fields = ("stripe_event_id",)
    ordering = ("-created_at",)
    actions = ["reprocess"]

    @admin.action(description="Re-run the handler for selected events")
    def reprocess(self, request, queryset):
        for event in queryset:
            process_webhook_event.delay(event.pk, force=True)
        self.message_user(request, f"Queued {queryset.count()} event(s).")


@admin.register(Mandate)
class MandateAdmin(admin.ModelAdmin):
    list_display = (
        "stripe_mandate_id",
        "stripe_payment_method_id",
        "status",
        "type",
        "updated_at",
    )
    list_filter = ("status", "type")
    search_fields = ("stripe_mandate_id", "stripe_payment_method_id")
    ordering = ("-updated_at",)
