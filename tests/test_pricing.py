from datetime import date
from types import SimpleNamespace

import pytest

from utils.pricing import (
    PricingError,
    calculate_nights,
    format_amount_for_stripe,
    format_amount_from_stripe,
    quote,
)

CABIN = SimpleNamespace(nightly_price=275, cleaning_fee=100, service_fee=27.5)


def test_nights_between_dates():
    assert calculate_nights(date(2026, 7, 1), date(2026, 7, 8)) == 7
    assert calculate_nights(date(2026, 12, 30), date(2027, 1, 2)) == 3


def test_taxes_round_half_up_to_whole_pounds():
    # 275 * 10% = 27.5 -> 28
    pricing = quote(CABIN, date(2026, 7, 1), date(2026, 7, 2))

    assert pricing["taxes"] == 28.0
    assert pricing["total"] == 275 + 100 + 27.5 + 28


def test_quote_requires_at_least_one_night():
    with pytest.raises(PricingError):
        quote(CABIN, date(2026, 7, 2), date(2026, 7, 2))


def test_quote_uses_configured_tax_rate(app):
    app.config["TAX_RATE"] = 0.2
    with app.app_context():
        pricing = quote(CABIN, date(2026, 7, 1), date(2026, 7, 3))

    assert pricing["taxes"] == 110.0


def test_stripe_amount_conversion():
    assert format_amount_for_stripe(3040, "gbp") == 304000
    assert format_amount_for_stripe(732.5, "GBP") == 73250
    assert format_amount_for_stripe(19.999, "gbp") == 2000
    assert format_amount_for_stripe(5000, "jpy") == 5000

    assert format_amount_from_stripe(304000, "gbp") == 3040
    assert format_amount_from_stripe(5000, "jpy") == 5000
