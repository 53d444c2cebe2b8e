import re
from datetime import date, datetime
from typing import List, Optional, Tuple

_EMAIL = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")


def parse_date(value) -> Optional[date]:
    """
    Accepts "2026-07-01" or a full ISO timestamp such as the
    "2026-07-01T00:00:00.000Z" a browser Date serialises to.
    Returns None when the value cannot be parsed.
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str) or not value.strip():
        return None

    text = value.strip()
    try:
        if "T" in text:
            return datetime.fromisoformat(text.replace("Z", "+00:00")).date()
        return date.fromisoformat(text)
    except ValueError:
        return None


def parse_int(value) -> Optional[int]:
    if isinstance(value, bool):
        return None
    try:
        return int(value)
    except (TypeError, ValueError):
        return None


def is_valid_email(email) -> bool:
    return isinstance(email, str) and len(email) <= 255 and bool(_EMAIL.match(email.strip()))


def validate_user_details(details) -> Tuple[bool, List[str]]:
    errors: List[str] = []

    if not isinstance(details, dict):
        return False, ["User details must be an object"]

    name = str(details.get("name") or "").strip()
    email = str(details.get("email") or "").strip()
    phone = str(details.get("phone") or "").strip()

    if len(name) < 2:
        errors.append("Name must be at least 2 characters")
    if not is_valid_email(email):
        errors.append("Please enter a valid email address")
    if len(phone) < 10:
        errors.append("Please enter a valid phone number")

    return (len(errors) == 0), errors
