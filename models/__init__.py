from .db import db
from .user import User
from .property import Property
from .booking import Booking, BOOKING_STATUSES
from .payment import Payment, PAYMENT_STATUSES
from .audit_log import AuditLog
