import logging

import click

from fleetalloc.infrastructure.bootstrap import settings
from fleetalloc.infrastructure.cli.ledger_commands import (
    ledger_receive,
    ledger_reverse,
    ledger_show,
)
from fleetalloc.infrastructure.cli.stock_commands import (
    stock_commit,
    stock_release,
    stock_reservations,
    stock_reserve,
    stock_status,
    stock_validate,
)
from fleetalloc.infrastructure.cli.trip_commands import trip_validate


@click.group()
@click.option("-v", "--verbose", is_flag=True, help="Log at INFO level.")
def cli(verbose: bool) -> None:
    """fleetalloc: vehicle, operator and spare-part allocation"""
    level = logging.INFO if verbose else getattr(logging, settings().log_level, logging.WARNING)
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@cli.group()
def trip() -> None:
    """Check trip assignments."""


@cli.group()
def stock() -> None:
    """Validate and reserve spare-part stock."""


@cli.group()
def ledger() -> None:
    """Record and inspect stock movements."""


# Register subcommands
trip.add_command(trip_validate)
stock.add_command(stock_commit)
stock.add_command(stock_release)
stock.add_command(stock_reservations)
stock.add_command(stock_reserve)
stock.add_command(stock_status)
stock.add_command(stock_validate)
ledger.add_command(ledger_receive)
ledger.add_command(ledger_reverse)
ledger.add_command(ledger_show)
