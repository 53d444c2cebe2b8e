"""
Shared pytest fixtures: an app on in-memory SQLite, a test client, and a
couple of catalogue rows to book against.
"""
import hashlib
import hmac
import json
import time
from datetime import date, datetime

import pytest

from app import create_app
from config import Config
from models import db
from models.booking import Booking
from models.property import Property

WEBHOOK_SECRET = "whsec_test_secret"


class TestConfig(Config):
    TESTING = True
    SECRET_KEY = "test-secret"
    SQLALCHEMY_DATABASE_URI = "sqlite://"
    STRIPE_SECRET_KEY = "sk_test_123"
    STRIPE_WEBHOOK_SECRET = WEBHOOK_SECRET
    STRIPE_CURRENCY = "gbp"
    TAX_RATE = 0.10


@pytest.fixture
def app():
    app = create_app(TestConfig)
    with app.app_context():
        db.create_all()
    yield app
    with app.app_context():
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def villa(app):
    """A four-bedroom villa: 850/night, 150 cleaning, 85 service, sleeps 8."""
    with app.app_context():
        prop = Property(
            id="prop-villa",
            title="Luxury Ocean View Villa",
            description="Panoramic sea views.",
            property_type="villa",
            address="12 Harbour Road",
            city="St Ives",
            county="Cornwall",
            region="England",
            country="United Kingdom",
            postcode="TR26 1LP",
            images=[],
            amenities=["WiFi", "Pool", "Parking"],
            nightly_price=850,
            cleaning_fee=150,
            service_fee=85,
            max_guests=8,
            bedrooms=4,
            bathrooms=3,
            beds=4,
            rating=4.9,
            review_count=127,
            featured=True,
        )
        db.session.add(prop)
        db.session.commit()
    return "prop-villa"


@pytest.fixture
def cabin(app):
    """A highland cabin: 275/night, 100 cleaning, 27.50 service, sleeps 6."""
    with app.app_context():
        prop = Property(
            id="prop-cabin",
            title="Cosy Highland Cabin",
            property_type="cabin",
            address="Glen Nevis Estate",
            city="Fort William",
            region="Scotland",
            country="United Kingdom",
            images=[],
            amenities=["WiFi", "Hot Tub", "Fireplace"],
            nightly_price=275,
            cleaning_fee=100,
            service_fee=27.50,
            max_guests=6,
            bedrooms=3,
            bathrooms=2,
            beds=3,
            rating=4.8,
            review_count=156,
            featured=False,
        )
        db.session.add(prop)
        db.session.commit()
    return "prop-cabin"


def add_booking(app, property_id, start, end, status="confirmed", **fields):
    with app.app_context():
        booking = Booking(
            property_id=property_id,
            start_date=date.fromisoformat(start),
            end_date=date.fromisoformat(end),
            status=status,
            **fields,
        )
        db.session.add(booking)
        db.session.commit()
        return booking.id


def signed_webhook(event: dict, secret: str = WEBHOOK_SECRET, timestamp=None):
    """Serialise `event` and build the Stripe-Signature header Stripe would send."""
    payload = json.dumps(event)
    timestamp = timestamp or int(time.time())
    signature = hmac.new(
        secret.encode("utf-8"),
        f"{timestamp}.{payload}".encode("utf-8"),
        hashlib.sha256,
    ).hexdigest()
    return payload, {"Stripe-Signature": f"t={timestamp},v1={signature}"}


def payment_intent_event(event_type, intent_id="pi_test_123", amount=462000, metadata=None):
    return {
        "id": "evt_test_1",
        "object": "event",
        "type": event_type,
        "created": int(datetime.utcnow().timestamp()),
        "data": {
            "object": {
                "id": intent_id,
                "object": "payment_intent",
                "amount": amount,
                "currency": "gbp",
                "status": "succeeded" if event_type == "payment_intent.succeeded" else "requires_payment_method",
                "metadata": metadata or {},
            }
        },
    }
