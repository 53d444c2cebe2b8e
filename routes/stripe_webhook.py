import stripe
from flask import Blueprint, request, jsonify, current_app

from models import db
from models.booking import Booking
from models.payment import Payment
from models.user import User
from utils.audit import log_event
from utils.pricing import format_amount_from_stripe
from utils.validation import parse_date, parse_int

webhook_bp = Blueprint("webhook", __name__, url_prefix="/api/webhooks")


def _meta(metadata, key):
    if not metadata or key not in metadata:
        return None
    return metadata[key] or None


def _resolve_user_id(metadata):
    user_id = _meta(metadata, "userId")
    if user_id:
        return user_id
    email = (_meta(metadata, "userEmail") or "").strip().lower()
    if not email:
        return None
    user = User.query.filter_by(email=email).first()
    return user.id if user else None


def handle_payment_succeeded(intent):
    """
    Confirm the booking paid for by `intent` and record the payment, in one
    transaction. A redelivered event finds the payment row and stops.
    """
    intent_id = intent["id"]
    if Payment.query.filter_by(stripe_payment_intent_id=intent_id).first():
        current_app.logger.info("Payment intent %s already recorded", intent_id)
        return None

    metadata = intent["metadata"]
    currency = intent["currency"]
    amount = format_amount_from_stripe(intent["amount"], currency)

    booking = Booking.query.filter_by(payment_intent_id=intent_id).first()
    if booking:
        booking.status = "confirmed"
    else:
        start_date = parse_date(_meta(metadata, "startDate"))
        end_date = parse_date(_meta(metadata, "endDate"))
        property_id = _meta(metadata, "propertyId")
        if not property_id or not start_date or not end_date:
            raise ValueError(f"Payment intent {intent_id} is missing booking metadata")

        email = _meta(metadata, "userEmail")
        booking = Booking(
            user_id=_resolve_user_id(metadata),
            property_id=property_id,
            start_date=start_date,
            end_date=end_date,
            guest_count=parse_int(_meta(metadata, "guestCount")) or 1,
            pricing={"total": amount, "currency": currency},
            user_details={"email": email} if email else None,
            status="confirmed",
            payment_intent_id=intent_id,
        )
        db.session.add(booking)
        db.session.flush()

    payment = Payment(
        booking_id=booking.id,
        stripe_payment_intent_id=intent_id,
        amount=amount,
        currency=currency,
        status="succeeded",
    )
    db.session.add(payment)
    db.session.flush()

    log_event("PAYMENT_SUCCEEDED", user_id=booking.user_id, entity="payment", entity_id=payment.id,
              metadata={"payment_intent_id": intent_id, "booking_id": booking.id}, commit=False)
    db.session.commit()
    return booking


def handle_payment_failed(intent):
    intent_id = intent["id"]
    updated = (
        Booking.query
        .filter_by(payment_intent_id=intent_id)
        .update({"status": "cancelled"}, synchronize_session=False)
    )
    log_event("PAYMENT_FAILED", entity="payment_intent", entity_id=intent_id,
              metadata={"cancelled_bookings": updated}, commit=False)
    db.session.commit()
    return updated


HANDLERS = {
    "payment_intent.succeeded": handle_payment_succeeded,
    "payment_intent.payment_failed": handle_payment_failed,
}


@webhook_bp.post("/stripe")
def stripe_webhook():
    endpoint_secret = current_app.config.get("STRIPE_WEBHOOK_SECRET")
    sig_header = request.headers.get("Stripe-Signature")
    payload = request.get_data()

    if not endpoint_secret:
        return jsonify(error="Webhook secret not configured"), 500

    if not sig_header:
        current_app.logger.warning("Webhook request without Stripe-Signature header")
        return jsonify(error="Webhook signature verification failed"), 400

    try:
        event = stripe.Webhook.construct_event(payload, sig_header, endpoint_secret)
    except (ValueError, stripe.SignatureVerificationError) as exc:
        current_app.logger.warning("Webhook signature verification failed: %s", exc)
        return jsonify(error="Webhook signature verification failed"), 400

    event_type = event["type"]
    handler = HANDLERS.get(event_type)
    if handler is None:
        current_app.logger.info("Unhandled event type %s", event_type)
        return jsonify(received=True), 200

    # A verified event is always acknowledged; handler failures are only logged.
    try:
        handler(event["data"]["object"])
    except Exception:
        db.session.rollback()
        current_app.logger.exception("Error handling webhook event %s", event["id"])

    return jsonify(received=True), 200
