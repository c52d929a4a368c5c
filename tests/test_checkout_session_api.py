"""
API tests for Checkout session creation and retrieval.

Stripe is mocked: the tests check that the endpoints hand the right
parameters to the SDK and pass its results (or errors) back to the
browser.
"""
from unittest import mock

import pytest
import stripe

from payments.models import CheckoutSession


def _invalid_request(message="Your request was invalid."):
    return stripe.InvalidRequestError(message, param=None)


@pytest.mark.django_db
def test_create_checkout_session_returns_sdk_session_id(
    client, stripe_object, checkout_session_values
):
    customer = stripe_object(stripe.Customer, {"id": "cus_test_123", "object": "customer"})
    session = stripe_object(stripe.checkout.Session, checkout_session_values)

    with mock.patch("stripe.Customer.create", return_value=customer) as create_customer, \
            mock.patch("stripe.checkout.Session.create", return_value=session) as create_session:
        resp = client.post("/create-checkout-session", {}, content_type="application/json")

    assert resp.status_code == 200
    assert resp.json() == {"sessionId": "cs_test_a1b2c3"}
    create_customer.assert_called_once_with()
    create_session.assert_called_once_with(
        customer="cus_test_123",
        mode="setup",
        payment_method_types=["bacs_debit"],
        success_url="http://testserver/success.html?session_id={CHECKOUT_SESSION_ID}",
        cancel_url="http://testserver/canceled.html",
    )


@pytest.mark.django_db
def test_create_checkout_session_records_open_session(
    client, stripe_object, checkout_session_values
):
    customer = stripe_object(stripe.Customer, {"id": "cus_test_123", "object": "customer"})
    session = stripe_object(stripe.checkout.Session, checkout_session_values)

    with mock.patch("stripe.Customer.create", return_value=customer), \
            mock.patch("stripe.checkout.Session.create", return_value=session):
        client.post("/create-checkout-session", {"locale": "en-GB"}, content_type="application/json")

    record = CheckoutSession.objects.get(stripe_session_id="cs_test_a1b2c3")
    assert record.status == CheckoutSession.STATUS_OPEN
    assert record.stripe_customer_id == "cus_test_123"
    assert record.mode == "setup"
    assert record.locale == "en-GB"


@pytest.mark.django_db
def test_create_checkout_session_passes_locale_and_customer_details(
    client, stripe_object, checkout_session_values
):
    customer = stripe_object(stripe.Customer, {"id": "cus_test_123", "object": "customer"})
    session = stripe_object(stripe.checkout.Session, checkout_session_values)
    payload = {"locale": "fr-FR", "name": "Max Mustermann", "email": "max@example.com"}

    with mock.patch("stripe.Customer.create", return_value=customer) as create_customer, \
            mock.patch("stripe.checkout.Session.create", return_value=session) as create_session:
        resp = client.post("/create-checkout-session", payload, content_type="application/json")

    assert resp.status_code == 200
    create_customer.assert_called_once_with(name="Max Mustermann", email="max@example.com")
    assert create_session.call_args.kwargs["locale"] == "fr"


@pytest.mark.django_db
def test_create_checkout_session_uses_configured_domain_and_methods(
    client, settings, stripe_object, checkout_session_values
):
    settings.DOMAIN = "https://shop.example.com"
    settings.CHECKOUT_PAYMENT_METHOD_TYPES = ["bacs_debit", "card"]
    customer = stripe_object(stripe.Customer, {"id": "cus_test_123", "object": "customer"})
    session = stripe_object(stripe.checkout.Session, checkout_session_values)

    with mock.patch("stripe.Customer.create", return_value=customer), \
            mock.patch("stripe.checkout.Session.create", return_value=session) as create_session:
        client.post("/create-checkout-session", {}, content_type="application/json")

    kwargs = create_session.call_args.kwargs
    assert kwargs["payment_method_types"] == ["bacs_debit", "card"]
    assert kwargs["success_url"].startswith("https://shop.example.com/success.html")
    assert kwargs["cancel_url"] == "https://shop.example.com/canceled.html"


@pytest.mark.django_db
def test_create_checkout_session_rejects_invalid_email(client):
    with mock.patch("stripe.Customer.create") as create_customer:
        resp = client.post(
            "/create-checkout-session", {"email": "not-an-email"}, content_type="application/json"
        )
    assert resp.status_code == 400
    assert "email" in resp.json()
    create_customer.assert_not_called()


@pytest.mark.django_db
def test_create_checkout_session_stripe_error_is_400(client, stripe_object):
    customer = stripe_object(stripe.Customer, {"id": "cus_test_123", "object": "customer"})

    with mock.patch("stripe.Customer.create", return_value=customer), \
            mock.patch("stripe.checkout.Session.create", side_effect=_invalid_request("No such price")), \
            mock.patch("stripe.Customer.delete"):
        resp = client.post("/create-checkout-session", {}, content_type="application/json")

    assert resp.status_code == 400
    body = resp.json()
    assert body["detail"] == "Checkout session could not be created."
    assert "No such price" in body["stripe_error"]
    assert not CheckoutSession.objects.exists()


@pytest.mark.django_db
def test_create_checkout_session_deletes_customer_when_session_fails(client, stripe_object):
    customer = stripe_object(stripe.Customer, {"id": "cus_test_123", "object": "customer"})

    with mock.patch("stripe.Customer.create", return_value=customer), \
            mock.patch("stripe.checkout.Session.create", side_effect=_invalid_request()), \
            mock.patch("stripe.Customer.delete") as delete_customer:
        resp = client.post("/create-checkout-session", {}, content_type="application/json")

    assert resp.status_code == 400
    delete_customer.assert_called_once_with("cus_test_123")


@pytest.mark.django_db
def test_create_checkout_session_customer_error_skips_session(client):
    with mock.patch("stripe.Customer.create", side_effect=_invalid_request("Bad email")), \
            mock.patch("stripe.checkout.Session.create") as create_session, \
            mock.patch("stripe.Customer.delete") as delete_customer:
        resp = client.post("/create-checkout-session", {}, content_type="application/json")

    assert resp.status_code == 400
    create_session.assert_not_called()
    delete_customer.assert_not_called()


@pytest.mark.django_db
@pytest.mark.parametrize(
    "browser_locale, sent",
    [
        ("en-GB", "en-GB"),
        ("pt-br", "pt-BR"),
        ("zh_TW", "zh-TW"),
        ("de-AT", "de"),
        ("uk-UA", "auto"),
    ],
)
def test_create_checkout_session_maps_browser_locale(
    client, stripe_object, checkout_session_values, browser_locale, sent
):
    customer = stripe_object(stripe.Customer, {"id": "cus_test_123", "object": "customer"})
    session = stripe_object(stripe.checkout.Session, checkout_session_values)

    with mock.patch("stripe.Customer.create", return_value=customer), \
            mock.patch("stripe.checkout.Session.create", return_value=session) as create_session:
        resp = client.post(
            "/create-checkout-session", {"locale": browser_locale}, content_type="application/json"
        )

    assert resp.status_code == 200
    assert create_session.call_args.kwargs["locale"] == sent


@pytest.mark.django_db
def test_create_checkout_session_rejects_get(client):
    resp = client.get("/create-checkout-session")
    assert resp.status_code == 405


@pytest.mark.django_db
def test_checkout_session_passes_vendor_object_through(
    client, stripe_object, checkout_session_values
):
    session = stripe_object(stripe.checkout.Session, checkout_session_values)

    with mock.patch("stripe.checkout.Session.retrieve", return_value=session) as retrieve:
        resp = client.get("/checkout-session", {"sessionId": "cs_test_a1b2c3"})

    assert resp.status_code == 200
    retrieve.assert_called_once_with("cs_test_a1b2c3")
    assert resp.json() == checkout_session_values


@pytest.mark.django_db
def test_checkout_session_requires_session_id(client):
    with mock.patch("stripe.checkout.Session.retrieve") as retrieve:
        resp = client.get("/checkout-session")
    assert resp.status_code == 400
    assert resp.json()["detail"] == "sessionId is required."
    retrieve.assert_not_called()


@pytest.mark.django_db
def test_checkout_session_unknown_id_is_400(client):
    with mock.patch(
        "stripe.checkout.Session.retrieve",
        side_effect=_invalid_request("No such checkout.session: cs_missing"),
    ):
        resp = client.get("/checkout-session", {"sessionId": "cs_missing"})
    assert resp.status_code == 400
    assert "cs_missing" in resp.json()["stripe_error"]
