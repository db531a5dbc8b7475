"""Main CLI entry point."""

import logging

import click
from tripledger.database.factories import DB_PATH_ENVVAR, create_sqlite_store
from tripledger.domain.ledger import TripLedger

# Import and register all commands at module level
from tripledger.cli.commands import (
    add,
    clear,
    export,
    summary,
    view,
)


@click.group()
@click.option(
    "--db-path",
    type=click.Path(),
    help="Path to database file (overrides TRIPLEDGER_DB_PATH environment variable)",
    envvar=DB_PATH_ENVVAR,
)
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
@click.pass_context
def cli(ctx, db_path: str | None, verbose: bool):
    """Tripledger - Driving trip manager.

    Log pickups and drops, see daily earnings, and export trips to CSV.
    """
    ctx.ensure_object(dict)
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    # Open the store only when actually running a command
    # (not when showing help)
    if ctx.invoked_subcommand is not None:
        store = create_sqlite_store(database_path=db_path)
        store.connect()
        store.initialize_schema()
        ctx.call_on_close(store.disconnect)

        ledger = TripLedger(store)
        ledger.load()
        ctx.obj["store"] = store
        ctx.obj["ledger"] = ledger


# Register all commands
add.register_commands(cli)
clear.register_commands(cli)
export.register_commands(cli)
summary.register_commands(cli)
view.register_commands(cli)


def main():
    """Main entry point for CLI."""
    cli()


if __name__ == "__main__":
    main()
