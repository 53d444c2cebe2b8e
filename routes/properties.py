from flask import Blueprint, request, jsonify
from sqlalchemy import or_

from models import db
from models.property import Property, PROPERTY_TYPES
from models.booking import Booking
from utils.pricing import quote, PricingError
from utils.validation import parse_date, parse_int

properties_bp = Blueprint("properties", __name__, url_prefix="/api/properties")

SORTS = {
    "rating": Property.rating.desc(),
    "price": Property.nightly_price.asc(),
    "newest": Property.created_at.desc(),
}


def _float_arg(name: str):
    raw = request.args.get(name)
    if raw is None or raw == "":
        return None, False
    try:
        return float(raw), False
    except ValueError:
        return None, True


@properties_bp.get("")
def list_properties():
    location = (request.args.get("location") or "").strip()
    property_types = [t.strip().lower() for t in request.args.getlist("property_type") if t.strip()]
    amenities = [a.strip().lower() for a in request.args.getlist("amenities") if a.strip()]
    sort = (request.args.get("sort") or "rating").strip().lower()

    guests_raw = request.args.get("guests")
    guests = parse_int(guests_raw) if guests_raw else None
    min_price, bad_min = _float_arg("min_price")
    max_price, bad_max = _float_arg("max_price")

    if (guests_raw and guests is None) or bad_min or bad_max:
        return jsonify(error="guests, min_price and max_price must be numbers"), 400
    if sort not in SORTS:
        return jsonify(error=f"sort must be one of: {', '.join(SORTS)}"), 400
    unknown_types = [t for t in property_types if t not in PROPERTY_TYPES]
    if unknown_types:
        return jsonify(error=f"Unknown property_type: {', '.join(unknown_types)}"), 400

    q = Property.query
    if location:
        like = f"%{location}%"
        q = q.filter(or_(
            Property.city.ilike(like),
            Property.county.ilike(like),
            Property.region.ilike(like),
            Property.country.ilike(like),
        ))
    if guests:
        q = q.filter(Property.max_guests >= guests)
    if min_price is not None:
        q = q.filter(Property.nightly_price >= min_price)
    if max_price is not None:
        q = q.filter(Property.nightly_price <= max_price)
    if property_types:
        q = q.filter(Property.property_type.in_(property_types))
    if request.args.get("featured", "").lower() in ("1", "true", "yes"):
        q = q.filter(Property.featured.is_(True))

    rows = q.order_by(SORTS[sort], Property.id.asc()).all()

    # amenities live in a JSON list; match every requested one
    if amenities:
        rows = [
            p for p in rows
            if set(amenities).issubset({a.lower() for a in (p.amenities or [])})
        ]

    return jsonify(properties=[p.to_dict() for p in rows]), 200


@properties_bp.get("/<property_id>")
def get_property(property_id: str):
    prop = db.session.get(Property, property_id)
    if not prop:
        return jsonify(error="Property not found"), 404
    return jsonify(property=prop.to_dict()), 200


@properties_bp.get("/<property_id>/availability")
def property_availability(property_id: str):
    prop = db.session.get(Property, property_id)
    if not prop:
        return jsonify(error="Property not found"), 404

    rows = (
        Booking.query
        .filter_by(property_id=prop.id, status="confirmed")
        .order_by(Booking.start_date.asc())
        .all()
    )
    return jsonify(unavailable=[
        {"start_date": b.start_date.isoformat(), "end_date": b.end_date.isoformat()}
        for b in rows
    ]), 200


@properties_bp.post("/<property_id>/quote")
def quote_property(property_id: str):
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        data = {}

    prop = db.session.get(Property, property_id)
    if not prop:
        return jsonify(error="Property not found"), 404

    start_date = parse_date(data.get("start_date"))
    end_date = parse_date(data.get("end_date"))
    if not start_date or not end_date:
        return jsonify(error="start_date and end_date are required (YYYY-MM-DD)"), 400

    guest_count = parse_int(data.get("guest_count", 1))
    if guest_count is None or guest_count < 1 or guest_count > prop.max_guests:
        return jsonify(error=f"guest_count must be between 1 and {prop.max_guests}"), 400

    try:
        pricing = quote(prop, start_date, end_date)
    except PricingError as exc:
        return jsonify(error=str(exc)), 400

    return jsonify(pricing=pricing), 200
