from flask import Blueprint, request, jsonify, session

from models import db
from models.property import Property
from utils.booking_flow import BookingFlow, SESSION_KEY, STEPS
from utils.pricing import quote, PricingError
from utils.validation import parse_date, parse_int, validate_user_details

booking_flow_bp = Blueprint("booking_flow", __name__, url_prefix="/api/booking-flow")


def _load() -> BookingFlow:
    return BookingFlow.from_dict(session.get(SESSION_KEY))


def _save(flow: BookingFlow):
    session[SESSION_KEY] = flow.to_dict()


def _state(flow: BookingFlow, status: int = 200):
    return jsonify(
        flow=flow.to_dict(),
        steps=list(STEPS),
        step_index=flow.step_index,
        can_continue=flow.can_continue(),
    ), status


@booking_flow_bp.get("")
def get_flow():
    return _state(_load())


@booking_flow_bp.patch("")
def update_flow():
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        data = {}
    flow = _load()

    if "property_id" in data:
        prop = db.session.get(Property, str(data["property_id"]))
        if not prop:
            return jsonify(error="Property not found"), 404
        flow.select_property(prop)

    if "start_date" in data or "end_date" in data:
        if not flow.property_id:
            return jsonify(error="Select a property first"), 400

        dates = {"start_date": flow.start_date, "end_date": flow.end_date}
        for key in dates:
            if key not in data:
                continue
            # null or "" clears the stored date
            value = data[key]
            parsed = parse_date(value) if value else None
            if value and not parsed:
                return jsonify(error=f"Invalid {key}. Use ISO e.g. 2026-07-01"), 400
            dates[key] = parsed

        start_date, end_date = dates["start_date"], dates["end_date"]
        pricing = None
        if start_date and end_date:
            try:
                pricing = quote(db.session.get(Property, flow.property_id), start_date, end_date)
            except PricingError as exc:
                return jsonify(error=str(exc)), 400
        flow.set_dates(start_date, end_date, pricing)

    if "guest_count" in data:
        count = parse_int(data["guest_count"])
        if count is None:
            return jsonify(error="guest_count must be a number"), 400
        flow.set_guest_count(count)

    if "user_details" in data:
        valid, errors = validate_user_details(data["user_details"])
        if not valid:
            return jsonify(error="Invalid guest details", details=errors), 400
        details = data["user_details"]
        flow.set_user_details({
            "name": str(details["name"]).strip(),
            "email": str(details["email"]).strip(),
            "phone": str(details["phone"]).strip(),
        })

    if "payment_intent_id" in data:
        flow.set_payment_intent_id(data["payment_intent_id"] or None)

    _save(flow)
    return _state(flow)


@booking_flow_bp.post("/next")
def next_step():
    flow = _load()
    if not flow.next():
        return jsonify(error=f"Complete the {flow.current_step} step first", flow=flow.to_dict()), 400
    _save(flow)
    return _state(flow)


@booking_flow_bp.post("/prev")
def prev_step():
    flow = _load()
    flow.prev()
    _save(flow)
    return _state(flow)


@booking_flow_bp.post("/reset")
def reset_flow():
    flow = _load()
    flow.reset()
    session.pop(SESSION_KEY, None)
    return _state(flow)
