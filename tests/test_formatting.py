"""
Tests for amount and fee formatting.
"""
from decimal import Decimal

import pytest

from region_pricing.engine.formatting import format_amount, format_fee_percent, to_decimal


def test_amount_missing_is_na():
    assert format_amount(None, "EUR") == "N/A"
    assert format_amount("", "EUR") == "N/A"


def test_amount_two_decimals():
    assert format_amount(20.00, "EUR") == "EUR 20.00"
    assert format_amount(Decimal("4.9"), "EUR") == "EUR 4.90"
    assert format_amount("0", "GBP") == "GBP 0.00"


def test_amount_rounds_half_up():
    assert format_amount(Decimal("9.995"), "EUR") == "EUR 10.00"
    assert format_amount(Decimal("1.234"), "EUR") == "EUR 1.23"


@pytest.mark.parametrize("value", [None, 0, Decimal("0"), "0.00", -1])
def test_fee_zero_or_missing_is_free(value):
    assert format_fee_percent(value) == "Free"


def test_fee_percent():
    assert format_fee_percent(1.7) == "1.70%"
    assert format_fee_percent(Decimal("0.005")) == "0.01%"


def test_to_decimal_avoids_float_noise():
    assert to_decimal(1.7) == Decimal("1.7")
    assert to_decimal("  ") is None


@pytest.mark.parametrize("value", ["NaN", "Infinity", "-inf", float("nan"), float("inf"), Decimal("sNaN")])
def test_to_decimal_rejects_non_finite(value):
    with pytest.raises(ValueError):
        to_decimal(value)


def test_format_rejects_non_finite():
    with pytest.raises(ValueError):
        format_fee_percent("NaN")
    with pytest.raises(ValueError):
        format_amount("Infinity", "EUR")
