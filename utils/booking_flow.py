"""
Per-visitor booking flow: dates -> guests -> details -> payment -> confirmation.

The flow lives in the signed Flask session between requests, so it is kept as
a plain object that round-trips through to_dict()/from_dict().
"""
from typing import Optional

from utils.validation import parse_date, validate_user_details

INITIAL_STEP = "property"
STEPS = ("dates", "guests", "details", "payment", "confirmation")

SESSION_KEY = "booking_flow"


class BookingFlow:
    def __init__(
        self,
        current_step: str = INITIAL_STEP,
        property_id: Optional[str] = None,
        max_guests: Optional[int] = None,
        start_date=None,
        end_date=None,
        guest_count: int = 1,
        pricing: Optional[dict] = None,
        user_details: Optional[dict] = None,
        payment_intent_id: Optional[str] = None,
    ):
        self.current_step = current_step if current_step in STEPS else INITIAL_STEP
        self.property_id = property_id
        self.max_guests = max_guests
        self.start_date = parse_date(start_date)
        self.end_date = parse_date(end_date)
        self.guest_count = guest_count
        self.pricing = pricing
        self.user_details = user_details
        self.payment_intent_id = payment_intent_id

    @classmethod
    def from_dict(cls, data: Optional[dict]) -> "BookingFlow":
        return cls(**(data or {}))

    def to_dict(self) -> dict:
        return {
            "current_step": self.current_step,
            "property_id": self.property_id,
            "max_guests": self.max_guests,
            "start_date": self.start_date.isoformat() if self.start_date else None,
            "end_date": self.end_date.isoformat() if self.end_date else None,
            "guest_count": self.guest_count,
            "pricing": self.pricing,
            "user_details": self.user_details,
            "payment_intent_id": self.payment_intent_id,
        }

    @property
    def step_index(self) -> int:
        # the pre-selection step renders as the first real step
        if self.current_step not in STEPS:
            return 0
        return STEPS.index(self.current_step)

    # ---------- inputs ----------
    def select_property(self, prop):
        if prop.id != self.property_id:
            self.start_date = None
            self.end_date = None
            self.pricing = None
            self.guest_count = 1
            self.payment_intent_id = None
        self.property_id = prop.id
        self.max_guests = prop.max_guests
        self.current_step = "dates"

    def set_dates(self, start_date, end_date, pricing: Optional[dict] = None):
        self.start_date = start_date
        self.end_date = end_date
        self.pricing = pricing

    def set_guest_count(self, count: int):
        upper = self.max_guests or count
        self.guest_count = max(1, min(count, upper))

    def set_user_details(self, details: Optional[dict]):
        self.user_details = details

    def set_payment_intent_id(self, payment_intent_id: Optional[str]):
        self.payment_intent_id = payment_intent_id

    # ---------- transitions ----------
    def can_continue(self) -> bool:
        step = self.current_step
        if step == INITIAL_STEP:
            return self.property_id is not None
        if step == "dates":
            return bool(self.start_date and self.end_date and self.end_date > self.start_date)
        if step == "guests":
            return 1 <= self.guest_count <= (self.max_guests or self.guest_count)
        if step == "details":
            valid, _ = validate_user_details(self.user_details)
            return valid
        if step == "payment":
            return bool(self.payment_intent_id)
        return False

    def next(self) -> bool:
        if not self.can_continue():
            return False
        if self.current_step == INITIAL_STEP:
            self.current_step = STEPS[0]
            return True
        self.current_step = STEPS[min(self.step_index + 1, len(STEPS) - 1)]
        return True

    def prev(self) -> bool:
        if self.current_step == INITIAL_STEP:
            return False
        before = self.current_step
        self.current_step = STEPS[max(self.step_index - 1, 0)]
        return self.current_step != before

    def reset(self):
        self.__init__()
