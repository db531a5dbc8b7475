"""Add trip command."""

import click
from tripledger.cli.error_handling import handle_domain_error
from tripledger.cli.formatting import format_money, format_raw_amount
from tripledger.domain.entities import DEFAULT_TRIP_AMOUNT, TripRecord, TripType
from tripledger.domain.errors import ValidationError
from tripledger.utils.date_parser import normalize_trip_date


@click.command("add")
@click.option(
    "--date",
    default="",
    help="Trip date (YYYY-MM-DD or relative like 'today', 'yesterday')",
)
@click.option("--company", default="", help="Company")
@click.option("--vehicle", default="", help="Vehicle number")
@click.option("--customer", default="", help="Customer name")
@click.option("--mobile", default="", help="Customer mobile")
@click.option("--location", default="", help="Location")
@click.option(
    "--type",
    "trip_type",
    type=click.Choice([t.value for t in TripType], case_sensitive=False),
    default=TripType.PICKUP.value,
    show_default=True,
    help="Pickup or drop",
)
@click.option(
    "--amount", default=str(DEFAULT_TRIP_AMOUNT), show_default=True, help="Trip amount"
)
@click.pass_context
def add_trip(
    ctx,
    date: str,
    company: str,
    vehicle: str,
    customer: str,
    mobile: str,
    location: str,
    trip_type: str,
    amount: str,
):
    """Add a trip to the ledger.

    Examples:
        tripledger add --date 2024-01-15 --company Acme --vehicle KA01AB1234 --amount 350
        tripledger add --date today --type Drop --customer "R. Kumar"
    """
    ledger = ctx.obj["ledger"]

    record = TripRecord(
        date=normalize_trip_date(date),
        company=company,
        vehicle=vehicle,
        customer=customer,
        mobile=mobile,
        location=location,
        type=TripType.parse(trip_type),
        amount=amount,
    )

    try:
        ledger.add_trip(record)
    except ValidationError as e:
        handle_domain_error(ctx, e)

    totals = ledger.totals()
    click.echo(f"Added trip on {record.date}")
    if record.company or record.vehicle:
        click.echo(f"  Company: {record.company}  Vehicle: {record.vehicle}")
    if record.customer or record.mobile:
        click.echo(f"  Customer: {record.customer}  Mobile: {record.mobile}")
    click.echo(f"  Type: {record.type.value}")
    click.echo(f"  Amount: {format_raw_amount(record.amount)}")
    click.echo(f"All trips: {totals.total_trips}  Total earnings: {format_money(totals.total_earnings)}")


def register_commands(cli):
    """Register add command with main CLI."""
    cli.add_command(add_trip)
