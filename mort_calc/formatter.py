"""Output helpers for the mortgage calculator.

This module renders the data model records as simple text blocks, with every
amount rounded and labelled through a :class:`~mort_calc.currency.Currency`.
It also converts payment records into JSON-serialisable dictionaries. Amounts
are exported as strings so that no precision is lost on the way out.
"""

from __future__ import annotations

from typing import Any, Dict, Iterable

from .currency import Currency
from .data_models import AdditionalPayment, MortgageLoan, MortgageLoanPayment, Payment


def print_payment(payment: Payment, currency: Currency) -> None:
    """Print the breakdown of an amortized loan payment."""
    print(f"Payment #{payment.ordinal}")
    print("-" * 40)
    print(f"Principal          : {currency.format(payment.principal)}")
    print(f"Interest           : {currency.format(payment.interest)}")
    if payment.additional_payment:
        print(f"Additional payment : {currency.format(payment.additional_payment)}")
    print(f"Total payment      : {currency.format(payment.total_payment)}")
    print(f"Outstanding        : {currency.format(payment.outstanding_principal)}")
    print("-" * 40)


def print_mortgage_payment(payment: MortgageLoanPayment, currency: Currency) -> None:
    """Print the breakdown of a mortgage payment, escrow included.

    Escrow lines with a zero amount are skipped.
    """
    print(f"Mortgage payment #{payment.ordinal}")
    print("-" * 40)
    print(f"Principal          : {currency.format(payment.principal)}")
    print(f"Interest           : {currency.format(payment.interest)}")
    optional_rows = [
        ("Property taxes", payment.property_taxes),
        ("Homeowners ins.", payment.homeowners_insurance),
        ("Mortgage ins.", payment.mortgage_insurance),
        ("Other escrow", payment.additional_escrow_payments),
        ("Additional payment", payment.additional_payment),
    ]
    for label, amount in optional_rows:
        if amount:
            print(f"{label:19s}: {currency.format(amount)}")
    print(f"Payment amount     : {currency.format(payment.payment_amount)}")
    print("-" * 40)


def print_mortgage_loan(loan: MortgageLoan, currency: Currency) -> None:
    """Print the terms of a mortgage loan."""
    print("Mortgage terms")
    print("-" * 40)
    print(f"Purchase price     : {currency.format(loan.purchase_price)}")
    print(f"Down payment       : {currency.format(loan.down_payment)}")
    print(f"Interest rate      : {loan.interest_rate * 100:.3f}%")
    print(f"Payments           : {loan.num_payments}")
    print(f"Property tax       : {currency.format(loan.property_tax)}")
    print(f"Homeowners ins.    : {currency.format(loan.homeowners_insurance)}")
    print(f"Mortgage ins.      : {currency.format(loan.mortgage_insurance)}")
    print(f"Other escrow       : {currency.format(loan.additional_escrow_payments)}")
    print(f"Additional payment : {currency.format(loan.additional_payment)}")
    print("-" * 40)


def print_additional_payments(
    additional_payments: Iterable[AdditionalPayment], currency: Currency
) -> None:
    """Print one-time additional payments as a table ordered by ordinal."""
    print("Payment\tAmount")
    for extra in sorted(additional_payments, key=lambda p: p.ordinal):
        print(f"{extra.ordinal}\t{currency.format(extra.amount)}")


def payment_to_dict(payment: Payment, currency: Currency) -> Dict[str, Any]:
    """Convert a payment into a JSON-serialisable dict of rounded amounts."""
    return {
        "ordinal": payment.ordinal,
        "principal": str(currency.round(payment.principal)),
        "interest": str(currency.round(payment.interest)),
        "additional_payment": str(currency.round(payment.additional_payment)),
        "outstanding_principal": str(currency.round(payment.outstanding_principal)),
        "total_payment": str(currency.round(payment.total_payment)),
        "currency": currency.name,
    }


def mortgage_payment_to_dict(payment: MortgageLoanPayment, currency: Currency) -> Dict[str, Any]:
    """Convert a mortgage payment into a JSON-serialisable dict of rounded amounts."""
    return {
        "ordinal": payment.ordinal,
        "principal": str(currency.round(payment.principal)),
        "interest": str(currency.round(payment.interest)),
        "property_taxes": str(currency.round(payment.property_taxes)),
        "homeowners_insurance": str(currency.round(payment.homeowners_insurance)),
        "mortgage_insurance": str(currency.round(payment.mortgage_insurance)),
        "additional_escrow_payments": str(currency.round(payment.additional_escrow_payments)),
        "additional_payment": str(currency.round(payment.additional_payment)),
        "payment_amount": str(currency.round(payment.payment_amount)),
        "currency": currency.name,
    }
