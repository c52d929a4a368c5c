"""
Initial migration for the payments app.

Creates the CheckoutSession, WebhookEvent and Mandate tables.  Each
table is keyed on the corresponding Stripe identifier so that records
can be upserted from webhook events.
"""
from django.db import migrations, models


class Migration(migrations.Migration):
    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="CheckoutSession",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                (
                    "stripe_session_id",
                    models.CharField(
                        help_text="Stripe Checkout Session identifier (cs_...)",
                        max_length=255,
                        unique=True,
                    ),
                ),
                (
                    "stripe_customer_id",
                    models.CharField(
                        blank=True,
                        help_text="Stripe Customer the mandate is collected for",
                        max_length=255,
                    ),
                ),
                (
                    "stripe_setup_intent_id",
                    models.CharField(
                        blank=True,
                        help_text="SetupIntent created by Checkout, known once the session completes",
                        max_length=255,
                    ),
                ),
                ("mode", models.CharField(default="setup", max_length=20)),
                (
                    "status",
                    models.CharField(
                        choices=[
                            ("open", "Open"),
                            ("complete", "Complete"),
                            ("expired", "Expired"),
                        ],
                        default="open",
                        max_length=10,
                    ),
                ),
                ("locale", models.CharField(blank=True, max_length=10)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
            ],
            options={"ordering": ["-created_at"]},
        ),
        migrations.CreateModel(
            name="WebhookEvent",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("stripe_event_id", models.CharField(max_length=255, unique=True)),
                ("type", models.CharField(db_index=True, max_length=255)),
                ("livemode", models.BooleanField(default=False)),
                (
                    "verified",
                    models.BooleanField(
                        default=True,
                        help_text="False when the event was accepted without a signing secret",
                    ),
                ),
                ("payload", models.JSONField(default=dict)),
                ("processed_at", models.DateTimeField(blank=True, null=True)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
            ],
            options={"ordering": ["-created_at"]},
        ),
        migrations.CreateModel(
            name="Mandate",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("stripe_mandate_id", models.CharField(max_length=255, unique=True)),
                ("stripe_payment_method_id", models.CharField(blank=True, max_length=255)),
                (
                    "status",
                    models.CharField(
                        choices=[
                            ("active", "Active"),
                            ("inactive", "Inactive"),
                            ("pending", "Pending"),
                        ],
                        default="pending",
                        max_length=10,
                    ),
                ),
                (
                    "type",
                    models.CharField(
                        blank=True,
                        help_text="Stripe mandate type (multi_use / single_use)",
                        max_length=20,
                    ),
                ),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
            ],
            options={"ordering": ["-updated_at"]},
        ),
    ]
