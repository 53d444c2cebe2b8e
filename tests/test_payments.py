import pytest
import stripe

BOOKING_DATA = {
    "propertyId": "prop-villa",
    "startDate": "2026-07-01T00:00:00.000Z",
    "endDate": "2026-07-04T00:00:00.000Z",
    "guestCount": 4,
    "userEmail": "ada@example.com",
}


@pytest.fixture
def fake_stripe(monkeypatch):
    captured = {"calls": []}

    def fake_create(**kwargs):
        captured["calls"].append(kwargs)
        return {"id": "pi_test_abc", "client_secret": "pi_test_abc_secret_xyz"}

    monkeypatch.setattr(stripe.PaymentIntent, "create", staticmethod(fake_create))
    return captured


def test_creates_intent_with_metadata(client, fake_stripe):
    resp = client.post("/api/payments/create-intent", json={
        "amount": 3040,
        "bookingData": BOOKING_DATA,
    })

    assert resp.status_code == 200
    assert resp.get_json() == {
        "clientSecret": "pi_test_abc_secret_xyz",
        "paymentIntentId": "pi_test_abc",
    }

    kwargs = fake_stripe["calls"][0]
    assert kwargs["amount"] == 304000
    assert kwargs["currency"] == "gbp"
    assert kwargs["automatic_payment_methods"] == {"enabled": True}
    assert kwargs["metadata"] == {
        "propertyId": "prop-villa",
        "startDate": "2026-07-01T00:00:00.000Z",
        "endDate": "2026-07-04T00:00:00.000Z",
        "guestCount": "4",
        "userEmail": "ada@example.com",
    }


def test_fractional_amount_is_rounded_to_pence(client, fake_stripe):
    resp = client.post("/api/payments/create-intent", json={
        "amount": 732.5,
        "bookingData": BOOKING_DATA,
    })

    assert resp.status_code == 200
    assert fake_stripe["calls"][0]["amount"] == 73250


def test_optional_ids_are_forwarded(client, fake_stripe):
    data = dict(BOOKING_DATA, userId="user-1", bookingId="booking-1")

    client.post("/api/payments/create-intent", json={"amount": 100, "bookingData": data})

    meta = fake_stripe["calls"][0]["metadata"]
    assert meta["userId"] == "user-1"
    assert meta["bookingId"] == "booking-1"


@pytest.mark.parametrize("amount", [0, -5, None, "abc", True, "NaN", "Infinity", "1e400", 1e300])
def test_invalid_amount_never_reaches_stripe(client, fake_stripe, amount):
    resp = client.post("/api/payments/create-intent", json={
        "amount": amount,
        "bookingData": BOOKING_DATA,
    })

    assert resp.status_code == 400
    assert resp.get_json() == {"error": "Invalid amount"}
    assert fake_stripe["calls"] == []


@pytest.mark.parametrize("key", [None, "", "sk_test_mock_secret_key"])
def test_unconfigured_stripe_is_unavailable(client, app, fake_stripe, key):
    app.config["STRIPE_SECRET_KEY"] = key

    resp = client.post("/api/payments/create-intent", json={
        "amount": 100,
        "bookingData": BOOKING_DATA,
    })

    assert resp.status_code == 503
    assert fake_stripe["calls"] == []


def test_stripe_error_is_reported(client, monkeypatch):
    def failing_create(**kwargs):
        raise stripe.APIConnectionError("network down")

    monkeypatch.setattr(stripe.PaymentIntent, "create", staticmethod(failing_create))

    resp = client.post("/api/payments/create-intent", json={
        "amount": 100,
        "bookingData": BOOKING_DATA,
    })

    assert resp.status_code == 500
    assert resp.get_json() == {"error": "Failed to create payment intent"}


def test_non_object_body_is_rejected(client, fake_stripe):
    resp = client.post("/api/payments/create-intent", json=[100, BOOKING_DATA])

    assert resp.status_code == 400
    assert resp.get_json() == {"error": "Invalid amount"}
    assert fake_stripe["calls"] == []
