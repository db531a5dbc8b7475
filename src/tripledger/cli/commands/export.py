"""CSV export command."""

import click
from tripledger.cli.error_handling import handle_domain_error
from tripledger.domain.csv_export import EXPORT_FILENAME, write_export
from tripledger.domain.errors import EmptyExportError


@click.command("export")
@click.option(
    "--output-dir",
    type=click.Path(file_okay=False, exists=True),
    default=".",
    show_default=True,
    help=f"Directory to write {EXPORT_FILENAME} into",
)
@click.pass_context
def export_trips(ctx, output_dir: str):
    """Export all trips to Driving_Trips.csv."""
    ledger = ctx.obj["ledger"]

    try:
        path = write_export(ledger.trips, directory=output_dir)
    except EmptyExportError as e:
        handle_domain_error(ctx, e)

    click.echo(f"Exported {len(ledger)} trips to {path}")


def register_commands(cli):
    """Register export command with main CLI."""
    cli.add_command(export_trips)
