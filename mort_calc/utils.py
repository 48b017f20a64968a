"""Utility functions for the mortgage calculator.

This module turns user input into the ``Decimal`` values and records the data
models expect: plain amounts (with optional ``k``/``m`` suffixes), interest
rates given either as percentages or fractions, and ``ORDINAL:AMOUNT``
additional payment instructions. Every helper raises ``ValueError`` on input
it cannot parse.
"""

from __future__ import annotations

from decimal import Decimal, InvalidOperation, getcontext

from .data_models import AdditionalPayment

getcontext().prec = 28  # increase decimal precision to avoid rounding errors

_SUFFIXES = {"k": Decimal(1_000), "m": Decimal(1_000_000)}


def decimal_from_str(value: str) -> Decimal:
    """Convert a numeric string into a ``Decimal``.

    The function strips any commas and surrounding whitespace. It raises
    ``ValueError`` if conversion fails or the value is not finite.
    """
    try:
        cleaned = value.strip().replace(",", "")
        result = Decimal(cleaned)
    except (InvalidOperation, AttributeError) as exc:
        raise ValueError(f"Invalid numeric value: {value}") from exc
    if not result.is_finite():
        raise ValueError(f"Invalid numeric value: {value}")
    return result


def parse_amount(value: str) -> Decimal:
    """Parse a currency amount with an optional suffix.

    Accepts plain numbers ("350000", "350,000.00") and shorthand with ``k``/``m``
    suffixes (e.g. "350k" meaning 350 000).
    """
    text = value.strip().lower()
    factor = Decimal(1)
    if text and text[-1] in _SUFFIXES:
        factor = _SUFFIXES[text[-1]]
        text = text[:-1]
    return decimal_from_str(text) * factor


def parse_rate(value: str) -> Decimal:
    """Parse an interest rate into a fraction.

    "5.5%" and "0.055" both give ``Decimal("0.055")``. Without a percent sign
    the value is taken as a fraction already.
    """
    text = value.strip()
    if text.endswith("%"):
        return decimal_from_str(text[:-1]) / Decimal(100)
    return decimal_from_str(text)


def parse_additional_payment(value: str) -> AdditionalPayment:
    """Parse an ``ORDINAL:AMOUNT`` string, e.g. ``"12:200"``."""
    parts = value.split(":")
    if len(parts) != 2:
        raise ValueError(
            f"Additional payment must be in ORDINAL:AMOUNT format; got {value}"
        )
    ordinal_str, amount_str = parts
    try:
        ordinal = int(ordinal_str)
    except ValueError as exc:
        raise ValueError(f"Invalid payment ordinal: {ordinal_str}") from exc
    if ordinal < 1:
        raise ValueError(f"Payment ordinals start at 1; got {ordinal}")
    return AdditionalPayment(ordinal=ordinal, amount=parse_amount(amount_str))
