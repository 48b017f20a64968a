"""Tests for the payment and loan records."""

from decimal import Decimal

from mort_calc.currency import US_DOLLARS
from mort_calc.data_models import AdditionalPayment, MortgageLoan, MortgageLoanPayment, Payment


def test_payment_total():
    payment = Payment(
        ordinal=1,
        principal=Decimal("500"),
        interest=Decimal("300"),
        additional_payment=Decimal("50"),
        outstanding_principal=Decimal("199500"),
    )
    assert payment.total_payment == Decimal("850")


def test_payment_total_follows_field_changes():
    payment = Payment(ordinal=3, principal=Decimal("500"), interest=Decimal("300"))
    assert payment.total_payment == Decimal("800")
    payment.additional_payment = Decimal("125.25")
    assert payment.total_payment == Decimal("925.25")


def test_payment_total_is_not_rounded():
    payment = Payment(
        ordinal=1,
        principal=Decimal("0.004"),
        interest=Decimal("0.003"),
    )
    assert payment.total_payment == Decimal("0.007")
    assert US_DOLLARS.round(payment.total_payment) == Decimal("0.01")


def test_mortgage_payment_amount():
    payment = MortgageLoanPayment(
        ordinal=1,
        principal=Decimal("500"),
        interest=Decimal("300"),
        property_taxes=Decimal("100"),
        homeowners_insurance=Decimal("50"),
        mortgage_insurance=Decimal("25"),
        additional_escrow_payments=Decimal("10"),
        additional_payment=Decimal("0"),
    )
    assert payment.payment_amount == Decimal("985")


def test_mortgage_payment_escrow_defaults_to_zero():
    payment = MortgageLoanPayment(ordinal=2, principal=Decimal("410.12"), interest=Decimal("1388.53"))
    assert payment.property_taxes == Decimal("0")
    assert payment.payment_amount == Decimal("1798.65")


def test_additional_payment_fields():
    extra = AdditionalPayment(ordinal=12, amount=Decimal("200"))
    assert extra.ordinal == 12
    assert extra.amount == Decimal("200")


def test_mortgage_loan_fields():
    loan = MortgageLoan(
        purchase_price=Decimal("400000"),
        down_payment=Decimal("80000"),
        interest_rate=Decimal("0.055"),
        num_payments=360,
        property_tax=Decimal("100"),
        homeowners_insurance=Decimal("75"),
    )
    assert loan.purchase_price == Decimal("400000")
    assert loan.down_payment == Decimal("80000")
    assert loan.interest_rate == Decimal("0.055")
    assert loan.num_payments == 360
    assert loan.property_tax == Decimal("100")
    assert loan.homeowners_insurance == Decimal("75")
    assert loan.mortgage_insurance == Decimal("0")
    assert loan.additional_escrow_payments == Decimal("0")
    assert loan.additional_payment == Decimal("0")


def test_mortgage_loan_fields_are_writable():
    loan = MortgageLoan(
        purchase_price=Decimal("300000"),
        down_payment=Decimal("60000"),
        interest_rate=Decimal("0.04"),
        num_payments=180,
    )
    loan.additional_payment = Decimal("250")
    assert loan.additional_payment == Decimal("250")
