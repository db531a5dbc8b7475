"""Clear all trips command."""

import click


@click.command("clear")
@click.option("--yes", "-y", is_flag=True, help="Skip the confirmation prompt")
@click.pass_context
def clear_trips(ctx, yes: bool):
    """Clear all saved trips."""
    ledger = ctx.obj["ledger"]

    if not yes and not click.confirm("Clear all saved trips?", default=False):
        click.echo("Nothing cleared.")
        return

    removed = len(ledger)
    ledger.clear_all()
    click.echo(f"Cleared {removed} trip{'s' if removed != 1 else ''}.")


def register_commands(cli):
    """Register clear command with main CLI."""
    cli.add_command(clear_trips)
