"""Command-line interface for the mortgage calculator data model.

This module uses the ``click`` library to expose the currency helpers and the
payment records from the terminal. Users can round or format an amount, build
a payment breakdown and see its total, or describe a set of mortgage terms
together with one-time additional payments. Breakdowns can be printed as text
or as JSON.
"""

from __future__ import annotations

import json
import logging
import os
from decimal import Decimal
from typing import List, Optional, Tuple

import click

from .currency import Currency, currency_keys, get_currency
from .data_models import AdditionalPayment, MortgageLoan, MortgageLoanPayment, Payment
from .formatter import (
    mortgage_payment_to_dict,
    payment_to_dict,
    print_additional_payments,
    print_mortgage_loan,
    print_mortgage_payment,
    print_payment,
)
from .utils import decimal_from_str, parse_additional_payment, parse_amount, parse_rate

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


def configure_logging(verbose: bool) -> None:
    """Set up console logging; ``MORT_CALC_LOG_LEVEL`` applies unless ``verbose``."""
    if verbose:
        level = logging.DEBUG
    else:
        level = os.environ.get("MORT_CALC_LOG_LEVEL", "WARNING").upper()
    logging.basicConfig(format=LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")
    logging.getLogger("mort_calc").setLevel(level)


def _amount(ctx: click.Context, param: click.Parameter, value: Optional[str]) -> Optional[Decimal]:
    """Click callback turning an amount option into a non-negative ``Decimal``."""
    if value is None:
        return None
    try:
        amount = parse_amount(value)
    except ValueError as exc:
        raise click.BadParameter(str(exc))
    if amount < 0:
        raise click.BadParameter(f"Amount cannot be negative: {value}")
    return amount


def _rate(ctx: click.Context, param: click.Parameter, value: str) -> Decimal:
    try:
        rate = parse_rate(value)
    except ValueError as exc:
        raise click.BadParameter(str(exc))
    if rate < 0:
        raise click.BadParameter(f"Interest rate cannot be negative: {value}")
    return rate


def _additional_payments(
    ctx: click.Context, param: click.Parameter, values: Tuple[str, ...]
) -> List[AdditionalPayment]:
    extras: List[AdditionalPayment] = []
    seen = set()
    for item in values:
        try:
            extra = parse_additional_payment(item)
        except ValueError as exc:
            raise click.BadParameter(str(exc))
        if extra.ordinal in seen:
            raise click.BadParameter(f"Duplicate additional payment for payment #{extra.ordinal}")
        seen.add(extra.ordinal)
        extras.append(extra)
    return extras


def _parse_value(value: str) -> Decimal:
    try:
        return decimal_from_str(value)
    except ValueError as exc:
        raise click.BadParameter(str(exc), param_hint="VALUE")


@click.group()
@click.option(
    "--currency",
    "currency_key",
    type=click.Choice(currency_keys(), case_sensitive=False),
    default="USD",
    show_default=True,
    envvar="MORT_CALC_CURRENCY",
    help="Currency used to round and label amounts",
)
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
@click.pass_context
def cli(ctx: click.Context, currency_key: str, verbose: bool) -> None:
    """Mortgage payment records and currency helpers."""
    configure_logging(verbose)
    ctx.obj = get_currency(currency_key)
    logger.debug("Using currency %s (decimal places: %s)", ctx.obj.name, ctx.obj.decimal_places)


@cli.command("round")
@click.argument("value")
@click.pass_obj
def round_value(currency: Currency, value: str) -> None:
    """Round VALUE to the currency's precision."""
    click.echo(str(currency.round(_parse_value(value))))


@cli.command("format")
@click.argument("value")
@click.pass_obj
def format_value(currency: Currency, value: str) -> None:
    """Format VALUE as a currency amount, e.g. USD1234.50."""
    click.echo(currency.format(_parse_value(value)))


@cli.command()
@click.option("--ordinal", "-n", type=click.IntRange(min=1), default=1, show_default=True, help="Payment number, starting with 1")
@click.option("--principal", "-p", required=True, callback=_amount, help="Part of the payment that pays down principal")
@click.option("--interest", "-i", required=True, callback=_amount, help="Part of the payment that pays interest")
@click.option("--additional-payment", "-a", default="0", callback=_amount, help="Extra amount applied to principal")
@click.option("--outstanding-principal", "-o", default="0", callback=_amount, help="Principal remaining after this payment")
@click.option("--json", "as_json", is_flag=True, help="Print the breakdown as JSON")
@click.pass_obj
def payment(
    currency: Currency,
    ordinal: int,
    principal: Decimal,
    interest: Decimal,
    additional_payment: Decimal,
    outstanding_principal: Decimal,
    as_json: bool,
) -> None:
    """Show the breakdown and total of an amortized loan payment."""
    record = Payment(
        ordinal=ordinal,
        principal=principal,
        interest=interest,
        additional_payment=additional_payment,
        outstanding_principal=outstanding_principal,
    )
    logger.debug("Built %r", record)
    if as_json:
        click.echo(json.dumps(payment_to_dict(record, currency), indent=2))
    else:
        print_payment(record, currency)


@cli.command("mortgage-payment")
@click.option("--ordinal", "-n", type=click.IntRange(min=1), default=1, show_default=True, help="Payment number, starting with 1")
@click.option("--principal", "-p", required=True, callback=_amount, help="Part of the payment that pays down principal")
@click.option("--interest", "-i", required=True, callback=_amount, help="Part of the payment that pays interest")
@click.option("--property-taxes", default="0", callback=_amount, help="Part of the payment covering property taxes")
@click.option("--homeowners-insurance", default="0", callback=_amount, help="Part of the payment covering homeowners insurance")
@click.option("--mortgage-insurance", default="0", callback=_amount, help="Part of the payment covering mortgage insurance (PMI)")
@click.option("--additional-escrow-payments", default="0", callback=_amount, help="Other escrow costs such as HOA dues")
@click.option("--additional-payment", "-a", default="0", callback=_amount, help="Extra amount applied to principal")
@click.option("--json", "as_json", is_flag=True, help="Print the breakdown as JSON")
@click.pass_obj
def mortgage_payment(
    currency: Currency,
    ordinal: int,
    principal: Decimal,
    interest: Decimal,
    property_taxes: Decimal,
    homeowners_insurance: Decimal,
    mortgage_insurance: Decimal,
    additional_escrow_payments: Decimal,
    additional_payment: Decimal,
    as_json: bool,
) -> None:
    """Show the breakdown and total of a mortgage payment, escrow included."""
    record = MortgageLoanPayment(
        ordinal=ordinal,
        principal=principal,
        interest=interest,
        property_taxes=property_taxes,
        homeowners_insurance=homeowners_insurance,
        mortgage_insurance=mortgage_insurance,
        additional_escrow_payments=additional_escrow_payments,
        additional_payment=additional_payment,
    )
    logger.debug("Built %r", record)
    if as_json:
        click.echo(json.dumps(mortgage_payment_to_dict(record, currency), indent=2))
    else:
        print_mortgage_payment(record, currency)


@cli.command()
@click.option("--purchase-price", "-P", required=True, callback=_amount, help="Total sale price of the property")
@click.option("--down-payment", "-d", default="0", callback=_amount, help="Amount paid up front")
@click.option("--rate", "-r", required=True, callback=_rate, help="Interest rate, e.g. 5.5% or 0.055")
@click.option("--num-payments", "-t", required=True, type=click.IntRange(min=1), help="Number of payments, e.g. 360")
@click.option("--property-tax", default="0", callback=_amount, help="Property tax per payment")
@click.option("--homeowners-insurance", default="0", callback=_amount, help="Homeowners insurance per payment")
@click.option("--mortgage-insurance", default="0", callback=_amount, help="Mortgage insurance (PMI) per payment")
@click.option("--additional-escrow-payments", default="0", callback=_amount, help="Other escrow costs per payment")
@click.option("--additional-payment", "-a", default="0", callback=_amount, help="Extra principal paid with every payment")
@click.option("--extra", "extras", multiple=True, callback=_additional_payments, help="One-time additional payment in ORDINAL:AMOUNT format")
@click.pass_obj
def loan(
    currency: Currency,
    purchase_price: Decimal,
    down_payment: Decimal,
    rate: Decimal,
    num_payments: int,
    property_tax: Decimal,
    homeowners_insurance: Decimal,
    mortgage_insurance: Decimal,
    additional_escrow_payments: Decimal,
    additional_payment: Decimal,
    extras: List[AdditionalPayment],
) -> None:
    """Describe a set of mortgage terms and one-time additional payments."""
    if down_payment > purchase_price:
        raise click.BadParameter(
            "Down payment cannot exceed the purchase price", param_hint="--down-payment"
        )
    for extra in extras:
        if extra.ordinal > num_payments:
            raise click.BadParameter(
                f"Payment #{extra.ordinal} is past the last payment ({num_payments})",
                param_hint="--extra",
            )
    terms = MortgageLoan(
        purchase_price=purchase_price,
        down_payment=down_payment,
        interest_rate=rate,
        num_payments=num_payments,
        property_tax=property_tax,
        homeowners_insurance=homeowners_insurance,
        mortgage_insurance=mortgage_insurance,
        additional_escrow_payments=additional_escrow_payments,
        additional_payment=additional_payment,
    )
    logger.debug("Built %r with %d additional payment(s)", terms, len(extras))
    print_mortgage_loan(terms, currency)
    if extras:
        print_additional_payments(extras, currency)


if __name__ == "__main__":
    cli()
