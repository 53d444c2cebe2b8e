import math

import stripe
from flask import Blueprint, request, jsonify, current_app

from utils.pricing import format_amount_for_stripe

payments_bp = Blueprint("payments", __name__, url_prefix="/api/payments")

REQUIRED_METADATA = ("propertyId", "startDate", "endDate", "guestCount", "userEmail")
# forwarded only when the client sends them
OPTIONAL_METADATA = ("userId", "bookingId")
# Stripe caps a single charge at eight digits in the smallest unit
MAX_AMOUNT = 999_999.99


def _stripe_configured() -> bool:
    key = current_app.config.get("STRIPE_SECRET_KEY")
    return bool(key) and "mock" not in key


def _parse_amount(value):
    if isinstance(value, bool):
        return None
    try:
        amount = float(value)
    except (TypeError, ValueError):
        return None
    return amount if math.isfinite(amount) else None


def _text(value) -> str:
    return "" if value is None else str(value)


def _metadata(booking_data: dict) -> dict:
    # Stripe metadata values are strings; passed through as sent
    meta = {key: _text(booking_data.get(key)) for key in REQUIRED_METADATA}
    for key in OPTIONAL_METADATA:
        if booking_data.get(key):
            meta[key] = str(booking_data[key])
    return meta


@payments_bp.post("/create-intent")
def create_payment_intent():
    if not _stripe_configured():
        return jsonify(error="Service temporarily unavailable"), 503

    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        data = {}
    amount = _parse_amount(data.get("amount"))
    if amount is None or amount <= 0 or amount > MAX_AMOUNT:
        return jsonify(error="Invalid amount"), 400

    booking_data = data.get("bookingData")
    if not isinstance(booking_data, dict):
        booking_data = {}

    currency = current_app.config.get("STRIPE_CURRENCY", "gbp")
    stripe.api_key = current_app.config["STRIPE_SECRET_KEY"]

    try:
        intent = stripe.PaymentIntent.create(
            amount=format_amount_for_stripe(amount, currency),
            currency=currency,
            metadata=_metadata(booking_data),
            automatic_payment_methods={"enabled": True},
        )
    except stripe.StripeError:
        current_app.logger.exception("Error creating payment intent")
        return jsonify(error="Failed to create payment intent"), 500

    return jsonify(clientSecret=intent["client_secret"], paymentIntentId=intent["id"]), 200
