"""Tests for input parsing helpers."""

from decimal import Decimal

import pytest

from mort_calc.data_models import AdditionalPayment
from mort_calc.utils import decimal_from_str, parse_additional_payment, parse_amount, parse_rate


def test_decimal_from_str_strips_commas():
    assert decimal_from_str(" 1,234.50 ") == Decimal("1234.50")


@pytest.mark.parametrize("value", ["", "abc", "NaN", "Infinity", "1.2.3"])
def test_decimal_from_str_rejects_garbage(value):
    with pytest.raises(ValueError):
        decimal_from_str(value)


@pytest.mark.parametrize(
    "value, expected",
    [
        ("350000", Decimal("350000")),
        ("350k", Decimal("350000")),
        ("1.5M", Decimal("1500000")),
        ("12,500.75", Decimal("12500.75")),
    ],
)
def test_parse_amount(value, expected):
    assert parse_amount(value) == expected


def test_parse_amount_suffix_only():
    with pytest.raises(ValueError):
        parse_amount("k")


def test_parse_rate():
    assert parse_rate("5.5%") == Decimal("0.055")
    assert parse_rate("0.055") == Decimal("0.055")


def test_parse_additional_payment():
    assert parse_additional_payment("12:200") == AdditionalPayment(ordinal=12, amount=Decimal("200"))
    assert parse_additional_payment("24:5k").amount == Decimal("5000")


@pytest.mark.parametrize("value", ["12", "12:200:3", "x:100", "0:100", "3:abc"])
def test_parse_additional_payment_invalid(value):
    with pytest.raises(ValueError):
        parse_additional_payment(value)
