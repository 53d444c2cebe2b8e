from flask import Blueprint, request, jsonify, current_app
from sqlalchemy.exc import SQLAlchemyError

from models import db
from models.property import Property
from models.booking import Booking, BOOKING_STATUSES
from utils.audit import log_event
from utils.pricing import quote
from utils.validation import parse_date, parse_int

booking_bp = Blueprint("booking", __name__, url_prefix="/api/bookings")

REQUIRED_FIELDS = ("property_id", "start_date", "end_date")


# ---------- GUESTS: request a booking (created pending) ----------
@booking_bp.post("")
def create_booking():
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        data = {}

    if any(not data.get(field) for field in REQUIRED_FIELDS):
        return jsonify(error="Missing required booking information"), 400

    start_date = parse_date(data["start_date"])
    end_date = parse_date(data["end_date"])
    if not start_date or not end_date:
        return jsonify(error="Invalid date format. Use ISO e.g. 2026-07-01"), 400
    if end_date <= start_date:
        return jsonify(error="end_date must be after start_date"), 400

    # Lock the property row so concurrent requests for the same property
    # run the availability check one at a time (no-op on SQLite).
    prop = (
        Property.query
        .filter_by(id=str(data["property_id"]))
        .with_for_update()
        .first()
    )
    if not prop:
        db.session.rollback()
        return jsonify(error="Property not found"), 404

    guest_count = parse_int(data.get("guest_count", 1))
    if guest_count is None or guest_count < 1 or guest_count > prop.max_guests:
        db.session.rollback()
        return jsonify(error=f"guest_count must be between 1 and {prop.max_guests}"), 400

    if Booking.overlapping(prop.id, start_date, end_date).first():
        db.session.rollback()
        log_event(
            "BOOKING_FAIL_UNAVAILABLE",
            user_id=data.get("user_id"),
            entity="property",
            entity_id=prop.id,
            metadata={"start_date": start_date, "end_date": end_date},
        )
        return jsonify(error="Property is not available for selected dates"), 409

    booking = Booking(
        property_id=prop.id,
        user_id=data.get("user_id") or None,
        start_date=start_date,
        end_date=end_date,
        guest_count=guest_count,
        pricing=quote(prop, start_date, end_date),
        user_details=data.get("user_details") or None,
        special_requests=data.get("special_requests") or None,
        payment_intent_id=data.get("payment_intent_id") or None,
        status="pending",
    )
    db.session.add(booking)
    try:
        db.session.commit()
    except SQLAlchemyError:
        db.session.rollback()
        current_app.logger.exception("Error creating booking for property %s", prop.id)
        return jsonify(error="Failed to create booking"), 500

    log_event("BOOKING_CREATE", user_id=booking.user_id, entity="booking", entity_id=booking.id,
              metadata={"property_id": prop.id})
    return jsonify(booking=booking.to_dict()), 201


# ---------- GUESTS: view my bookings ----------
@booking_bp.get("")
def list_user_bookings():
    user_id = request.args.get("userId")
    if not user_id:
        return jsonify(error="User ID is required"), 400

    status = (request.args.get("status") or "").strip().lower()
    if status and status not in BOOKING_STATUSES:
        return jsonify(error=f"status must be one of: {', '.join(BOOKING_STATUSES)}"), 400

    q = Booking.query.filter_by(user_id=user_id)
    if status:
        q = q.filter_by(status=status)

    try:
        rows = q.order_by(Booking.created_at.desc()).all()
    except SQLAlchemyError:
        current_app.logger.exception("Error fetching bookings for user %s", user_id)
        return jsonify(error="Failed to fetch bookings"), 500

    return jsonify(bookings=[
        b.to_dict(include_property=True, include_payments=True) for b in rows
    ]), 200
