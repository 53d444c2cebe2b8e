from datetime import datetime
from models.db import db, new_id

PAYMENT_STATUSES = ("pending", "processing", "succeeded", "failed", "cancelled", "refunded")

class Payment(db.Model):
    __tablename__ = "payments"

    id = db.Column(db.String(36), primary_key=True, default=new_id)
    booking_id = db.Column(db.String(36), db.ForeignKey("bookings.id"), nullable=False, index=True)

    stripe_payment_intent_id = db.Column(db.String(255), nullable=False, unique=True, index=True)
    amount = db.Column(db.Numeric(10, 2, asdecimal=False), nullable=False)  # major unit, e.g. pounds
    currency = db.Column(db.String(10), nullable=False, default="gbp")

    status = db.Column(db.String(20), nullable=False, default="pending")

    created_at = db.Column(db.DateTime, default=datetime.utcnow, nullable=False)
    updated_at = db.Column(db.DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False)

    booking = db.relationship("Booking", back_populates="payments")

    def to_dict(self):
        return {
            "id": self.id,
            "booking_id": self.booking_id,
            "stripe_payment_intent_id": self.stripe_payment_intent_id,
            "amount": self.amount,
            "currency": self.currency,
            "status": self.status,
            "created_at": self.created_at.isoformat() if self.created_at else None,
        }
