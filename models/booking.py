from datetime import datetime
from models.db import db, new_id

BOOKING_STATUSES = ("pending", "confirmed", "cancelled", "completed", "refunded")

class Booking(db.Model):
    __tablename__ = "bookings"

    id = db.Column(db.String(36), primary_key=True, default=new_id)

    user_id = db.Column(db.String(36), db.ForeignKey("users.id"), nullable=True, index=True)
    property_id = db.Column(db.String(36), db.ForeignKey("properties.id"), nullable=False, index=True)

    # half-open range: end_date is the departure day
    start_date = db.Column(db.Date, nullable=False)
    end_date = db.Column(db.Date, nullable=False)
    guest_count = db.Column(db.Integer, nullable=False, default=1)

    pricing = db.Column(db.JSON, nullable=True)
    user_details = db.Column(db.JSON, nullable=True)  # {name, email, phone}
    special_requests = db.Column(db.Text, nullable=True)

    status = db.Column(db.String(20), nullable=False, default="pending", index=True)
    payment_intent_id = db.Column(db.String(255), nullable=True, index=True)

    created_at = db.Column(db.DateTime, default=datetime.utcnow, nullable=False)
    updated_at = db.Column(db.DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False)

    property = db.relationship("Property", back_populates="bookings")
    user = db.relationship("User", back_populates="bookings")
    payments = db.relationship("Payment", back_populates="booking", order_by="Payment.created_at")

    @classmethod
    def overlapping(cls, property_id, start_date, end_date, status="confirmed"):
        """Bookings of a property whose stay intersects [start_date, end_date)."""
        return cls.query.filter(
            cls.property_id == property_id,
            cls.status == status,
            cls.start_date < end_date,
            cls.end_date > start_date,
        )

    def to_dict(self, include_property=False, include_payments=False):
        out = {
            "id": self.id,
            "user_id": self.user_id,
            "property_id": self.property_id,
            "start_date": self.start_date.isoformat(),
            "end_date": self.end_date.isoformat(),
            "guest_count": self.guest_count,
            "pricing": self.pricing,
            "user_details": self.user_details,
            "special_requests": self.special_requests,
            "status": self.status,
            "payment_intent_id": self.payment_intent_id,
            "created_at": self.created_at.isoformat() if self.created_at else None,
            "updated_at": self.updated_at.isoformat() if self.updated_at else None,
        }
        if include_property:
            out["property"] = self.property.to_dict() if self.property else None
        if include_payments:
            out["payments"] = [p.to_dict() for p in self.payments]
        return out
