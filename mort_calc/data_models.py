"""Data models for the mortgage calculator.

This module defines dataclasses for the inputs and outputs of an amortized
loan: the mortgage terms, one-time additional payments, and the per-period
payment breakdowns. The records hold values only; rounding is done by the
caller through a :class:`~mort_calc.currency.Currency` before amounts are
stored here.
"""

from dataclasses import dataclass
from decimal import Decimal

ZERO = Decimal("0")


@dataclass
class Payment:
    """A single payment on an amortized loan.

    Attributes
    ----------
    ordinal: int
        Which payment this is, in order, starting with 1.
    principal: Decimal
        The part of this payment which pays down principal.
    interest: Decimal
        The part of this payment which pays interest.
    additional_payment: Decimal
        Money paid over and above what's required, applied to principal.
    outstanding_principal: Decimal
        Principal remaining on the loan after this payment.
    """

    ordinal: int
    principal: Decimal
    interest: Decimal
    additional_payment: Decimal = ZERO
    outstanding_principal: Decimal = ZERO

    @property
    def total_payment(self) -> Decimal:
        return self.principal + self.interest + self.additional_payment


@dataclass
class AdditionalPayment:
    """A one-time additional payment on an amortization schedule."""

    ordinal: int
    amount: Decimal


@dataclass
class MortgageLoan:
    """The parameters that define a particular set of mortgage terms.

    Every escrow field is a fixed amount per payment: if property tax is
    1200/yr and payments are monthly, ``property_tax`` is 100.

    Attributes
    ----------
    purchase_price: Decimal
        The total sale price of the property.
    down_payment: Decimal
        The part of the purchase price paid up front.
    interest_rate: Decimal
        The loan's interest rate as a fraction; 0.055 is 5.5 %.
    num_payments: int
        Total number of payments before the loan is paid off. Mortgages are
        usually paid monthly, so this is the term in years times 12.
    property_tax: Decimal
        Property tax per payment.
    homeowners_insurance: Decimal
        Homeowners insurance per payment.
    mortgage_insurance: Decimal
        Mortgage insurance (PMI) per payment.
    additional_escrow_payments: Decimal
        Other costs paid out of escrow with each payment (flood insurance,
        HOA dues, ...).
    additional_payment: Decimal
        Extra money paid with each payment to pay down principal faster.
    """

    purchase_price: Decimal
    down_payment: Decimal
    interest_rate: Decimal
    num_payments: int
    property_tax: Decimal = ZERO
    homeowners_insurance: Decimal = ZERO
    mortgage_insurance: Decimal = ZERO
    additional_escrow_payments: Decimal = ZERO
    additional_payment: Decimal = ZERO


@dataclass
class MortgageLoanPayment:
    """A single mortgage payment, escrow items included."""

    ordinal: int
    principal: Decimal
    interest: Decimal
    property_taxes: Decimal = ZERO
    homeowners_insurance: Decimal = ZERO
    mortgage_insurance: Decimal = ZERO
    additional_escrow_payments: Decimal = ZERO  # HOA dues and similar
    additional_payment: Decimal = ZERO

    @property
    def payment_amount(self) -> Decimal:
        """The total payment amount."""
        return (
            self.principal
            + self.interest
            + self.property_taxes
            + self.homeowners_insurance
            + self.mortgage_insurance
            + self.additional_escrow_payments
            + self.additional_payment
        )
