"""Trip viewing command."""

import click
from tripledger.cli.formatting import format_money, format_raw_amount
from tripledger.domain.summary import compute_totals, filter_trips_by_date
from tripledger.utils.date_parser import normalize_trip_date


@click.command("view")
@click.option("--start-date", help="Start date (YYYY-MM-DD)")
@click.option("--end-date", help="End date (YYYY-MM-DD)")
@click.pass_context
def view_trips(ctx, start_date: str | None, end_date: str | None):
    """List trips, most recent first."""
    ledger = ctx.obj["ledger"]

    start = normalize_trip_date(start_date) or None
    end = normalize_trip_date(end_date) or None
    trips = filter_trips_by_date(ledger.trips, start_date=start, end_date=end)

    click.echo(f"\nAll Trips ({len(trips)})")
    if not trips:
        click.echo("No trips found.")
        return

    click.echo("-" * 100)
    click.echo(
        f"{'Date':<12} {'Company':<16} {'Vehicle':<14} {'Customer':<18} "
        f"{'Mobile':<14} {'Type':<7} {'Amount':>12}"
    )
    click.echo("-" * 100)
    for trip in trips:
        click.echo(
            f"{trip.date:<12} {trip.company[:16]:<16} {trip.vehicle[:14]:<14} "
            f"{trip.customer[:18]:<18} {trip.mobile[:14]:<14} {str(trip.type):<7} "
            f"{format_raw_amount(trip.amount):>12}"
        )
        if trip.location:
            click.echo(f"{'':<12} {trip.location}")
    click.echo("-" * 100)

    totals = compute_totals(trips)
    click.echo(f"Total Earnings: {format_money(totals.total_earnings)}")


def register_commands(cli):
    """Register view command with main CLI."""
    cli.add_command(view_trips)
