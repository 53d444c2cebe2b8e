from datetime import date
from decimal import Decimal, ROUND_HALF_UP

from flask import current_app

_DEFAULTS = {
    "TAX_RATE": 0.10,
    "BOOKING_CURRENCY": "GBP",
}

# Stripe charges these in whole units; everything else in 1/100ths
ZERO_DECIMAL_CURRENCIES = {
    "bif", "clp", "djf", "gnf", "jpy", "kmf", "krw", "mga",
    "pyg", "rwf", "ugx", "vnd", "vuv", "xaf", "xof", "xpf",
}


class PricingError(ValueError):
    pass


def _cfg(name: str):
    try:
        return current_app.config.get(name, _DEFAULTS[name])
    except RuntimeError:
        return _DEFAULTS[name]


def _dec(value) -> Decimal:
    return Decimal(str(value or 0))


def _money(value: Decimal) -> float:
    return float(value.quantize(Decimal("0.01"), rounding=ROUND_HALF_UP))


def calculate_nights(start_date: date, end_date: date) -> int:
    return (end_date - start_date).days


def quote(prop, start_date: date, end_date: date) -> dict:
    """
    Price a stay at `prop` for the nights between start_date and end_date.

    Taxes are a flat rate on the nightly subtotal, rounded to whole units;
    the cleaning and service fees are charged once per stay.
    """
    nights = calculate_nights(start_date, end_date)
    if nights < 1:
        raise PricingError("end_date must be after start_date")

    nightly = _dec(prop.nightly_price)
    cleaning_fee = _dec(prop.cleaning_fee)
    service_fee = _dec(prop.service_fee)

    subtotal = nightly * nights
    taxes = (subtotal * _dec(_cfg("TAX_RATE"))).quantize(Decimal("1"), rounding=ROUND_HALF_UP)
    total = subtotal + cleaning_fee + service_fee + taxes

    return {
        "base_price": _money(nightly),
        "nights": nights,
        "subtotal": _money(subtotal),
        "cleaning_fee": _money(cleaning_fee),
        "service_fee": _money(service_fee),
        "taxes": _money(taxes),
        "total": _money(total),
        "currency": _cfg("BOOKING_CURRENCY"),
    }


def format_amount_for_stripe(amount, currency: str) -> int:
    """Major-unit amount -> integer amount in the currency's smallest unit."""
    value = _dec(amount)
    if currency.lower() not in ZERO_DECIMAL_CURRENCIES:
        value = value * 100
    return int(value.quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def format_amount_from_stripe(amount: int, currency: str) -> float:
    if currency.lower() in ZERO_DECIMAL_CURRENCIES:
        return float(amount)
    return amount / 100
