"""CLI commands for trip assignment checks."""

from __future__ import annotations

import click

from fleetalloc.application.validate_trip import ValidateTripHandler
from fleetalloc.infrastructure.bootstrap import trip_assignment_validator
from fleetalloc.infrastructure.cli.output import echo_validation


@click.command("validate")
@click.option("--vehicle", "vehicle_id", required=True, type=int, help="Vehicle ID.")
@click.option("--operator", "operator_id", required=True, type=int, help="Operator ID.")
@click.option("--start", required=True, help="Start date (YYYY-MM-DD).")
@click.option("--end", required=True, help="End date (YYYY-MM-DD).")
@click.option("--exclude-trip", type=int, default=None, help="Trip being edited.")
def trip_validate(
    vehicle_id: int,
    operator_id: int,
    start: str,
    end: str,
    exclude_trip: int | None,
) -> None:
    """Check a vehicle + operator pair for a date range."""
    handler = ValidateTripHandler(trip_assignment_validator())
    result = handler.handle(vehicle_id, operator_id, start, end, exclude_trip)

    echo_validation(result)
    if not result.is_valid:
        raise click.exceptions.Exit(1)
