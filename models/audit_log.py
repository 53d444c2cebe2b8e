from datetime import datetime
from models.db import db

class AuditLog(db.Model):
    """Append-only trail of booking and payment events."""
    __tablename__ = "audit_logs"

    id = db.Column(db.Integer, primary_key=True)
    action = db.Column(db.String(80), nullable=False, index=True)  # BOOKING_CREATE, PAYMENT_SUCCEEDED, ...
    entity = db.Column(db.String(40), nullable=True)               # booking, payment, property
    entity_id = db.Column(db.String(255), nullable=True)
    user_id = db.Column(db.String(36), nullable=True)             # guests and Stripe have none

    ip = db.Column(db.String(64), nullable=True)
    user_agent = db.Column(db.String(255), nullable=True)
    details = db.Column(db.JSON, nullable=True)

    created_at = db.Column(db.DateTime, default=datetime.utcnow, nullable=False)
