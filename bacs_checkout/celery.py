"""
Celery application for the Bacs checkout backend.

POST /webhook answers Stripe as soon as an event is verified and stored;
the ``payments.tasks.process_webhook_event`` task then updates the local
CheckoutSession and Mandate records from a worker.  The worker reads its
broker and result backend (``CELERY_BROKER_URL``, from ``REDIS_URL``)
from the Django settings, and tests run the task eagerly through
``CELERY_TASK_ALWAYS_EAGER`` in ``settings.test``.

Start a worker with ``celery -A bacs_checkout worker -l info``.
"""
import os
from celery import Celery

# Set default Django settings for Celery to pick configuration from settings
os.environ.setdefault("DJANGO_SETTINGS_MODULE", "bacs_checkout.settings.dev")

celery_app = Celery("bacs_checkout")

# Namespacing Celery settings with the "CELERY_" prefix in Django settings
celery_app.config_from_object("django.conf:settings", namespace="CELERY")
celery_app.autodiscover_tasks()
