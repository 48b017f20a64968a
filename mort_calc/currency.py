"""Currency rounding and display helpers.

A ``Currency`` pairs a display name with the number of fractional digits
amounts are rounded to. Only the named constants below are meant to be used;
amounts are rounded through them before they are stored on payment records or
shown to a user.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import ROUND_HALF_EVEN, Context, Decimal
from typing import Dict, List, Optional, Union

Number = Union[Decimal, int, float, str]

DEFAULT_PRECISION = 28


def _to_decimal(value: Number) -> Decimal:
    if isinstance(value, Decimal):
        return value
    # go through str so that 1234.567 means Decimal("1234.567")
    return Decimal(str(value))


@dataclass(frozen=True)
class Currency:
    """A currency and its rounding precision.

    Callers are expected to use the named constants ``US_DOLLARS`` and
    ``US_DOLLARS_NO_ROUNDING`` (or :func:`get_currency`) rather than build
    their own instances.

    Attributes
    ----------
    name: str
        Identifier printed in front of formatted amounts, e.g. ``"USD"``.
    decimal_places: Optional[int]
        Number of fractional digits kept by :meth:`round`. ``None`` disables
        rounding entirely.
    """

    name: str
    decimal_places: Optional[int] = None

    def round(self, value: Number) -> Decimal:
        """Round ``value`` to this currency's precision.

        Midpoints go to the even neighbour (``Decimal("2.345")`` becomes
        ``Decimal("2.34")``). The result always carries exactly
        ``decimal_places`` fractional digits, whatever the magnitude of
        ``value``.
        """
        amount = _to_decimal(value)
        if self.decimal_places is None:
            return amount
        exponent = Decimal(1).scaleb(-self.decimal_places)
        # the quantized result needs every integer digit plus decimal_places
        precision = max(DEFAULT_PRECISION, amount.adjusted() + self.decimal_places + 2)
        return amount.quantize(exponent, rounding=ROUND_HALF_EVEN, context=Context(prec=precision))

    def format(self, value: Number) -> str:
        """Return the name followed directly by the rounded amount."""
        return f"{self.name}{self.round(value)}"


US_DOLLARS = Currency("USD", 2)
US_DOLLARS_NO_ROUNDING = Currency("USD", None)

_CURRENCIES: Dict[str, Currency] = {
    "USD": US_DOLLARS,
    "USD-UNROUNDED": US_DOLLARS_NO_ROUNDING,
}


def get_currency(key: str) -> Currency:
    """Look up a named currency constant (``"USD"`` or ``"USD-UNROUNDED"``)."""
    try:
        return _CURRENCIES[key.upper()]
    except KeyError:
        raise KeyError(f"Unknown currency: {key}") from None


def currency_keys() -> List[str]:
    """Return the keys accepted by :func:`get_currency`."""
    return list(_CURRENCIES)
