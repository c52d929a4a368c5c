"""
Client page views.

The browser side of the integration is a handful of static files kept in
``settings.STATIC_DIR``.  They are served from the site root so the
redirect URLs handed to Stripe (``/success.html``, ``/canceled.html``)
resolve to them.
"""
from django.conf import settings
from django.views.static import serve


def index(request):
    return serve(request, "index.html", document_root=settings.STATIC_DIR)


def client_asset(request, path):
    """Serve one of the client files (html, js, css) from STATIC_DIR."""
    return serve(request, path, document_root=settings.STATIC_DIR)
