"""Daily summary command."""

import click
from tripledger.cli.formatting import format_money
from tripledger.domain.summary import (
    compute_daily_summary,
    compute_totals,
    filter_trips_by_date,
)
from tripledger.utils.date_parser import normalize_trip_date


@click.command("summary")
@click.option("--start-date", help="Start date (YYYY-MM-DD or relative like 'yesterday')")
@click.option("--end-date", help="End date (YYYY-MM-DD or relative like 'today')")
@click.pass_context
def daily_summary(ctx, start_date: str | None, end_date: str | None):
    """Show trips and earnings per day, most recent day first."""
    ledger = ctx.obj["ledger"]

    start = normalize_trip_date(start_date) or None
    end = normalize_trip_date(end_date) or None
    trips = filter_trips_by_date(ledger.trips, start_date=start, end_date=end)

    summary = compute_daily_summary(trips)
    if not summary:
        click.echo("No trips yet")
        return

    click.echo(f"\n{'Date':<12} {'Trips':>6} {'Earnings':>14}")
    click.echo("-" * 34)
    for trip_date, info in summary.items():
        click.echo(f"{trip_date:<12} {info.count:>6} {format_money(info.earnings):>14}")
    click.echo("-" * 34)

    totals = compute_totals(trips)
    click.echo(f"{'Total':<12} {totals.total_trips:>6} {format_money(totals.total_earnings):>14}")


def register_commands(cli):
    """Register summary command with main CLI."""
    cli.add_command(daily_summary)
