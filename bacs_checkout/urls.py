"""
URL configuration for the checkout backend.

The four Stripe endpoints live at the site root (``/config``,
``/checkout-session``, ``/create-checkout-session``, ``/webhook``) next to
the client pages.  The OpenAPI schema and Swagger UI are exposed under
``/api/``.
"""

from django.contrib import admin
from django.urls import include, path, re_path
from drf_spectacular.views import SpectacularAPIView, SpectacularSwaggerView

from bacs_checkout.views import client_asset, index


urlpatterns = [
    path("", index, name="index"),
    path("admin/", admin.site.urls),

    #  Swagger
    path("api/schema/", SpectacularAPIView.as_view(), name="schema"),
    path("api/docs/", SpectacularSwaggerView.as_view(url_name="schema"), name="swagger-ui"),

    path("", include("payments.urls")),

    re_path(r"^(?P<path>[\w\-]+\.(?:html|js|css))$", client_asset, name="client-asset"),
]
