"""CLI commands for spare-part stock and reservations."""

from __future__ import annotations

import click

from fleetalloc.application.show_stock import ShowStockHandler
from fleetalloc.domain.exceptions import DomainException
from fleetalloc.domain.service.stock_validator import PartLine
from fleetalloc.infrastructure.bootstrap import (
    reservation_manager,
    spare_part_repository,
    stock_validator,
)
from fleetalloc.infrastructure.cli.output import echo_validation


def _parse_lines(raw: str) -> list[PartLine]:
    """Parse '3:2,7:1' (part_id:quantity) into PartLine list."""
    lines: list[PartLine] = []
    for pair in raw.split(","):
        pair = pair.strip()
        if ":" not in pair:
            raise click.BadParameter(
                f"Invalid item format '{pair}'. Expected 'PartId:Quantity'."
            )
        part_str, qty_str = pair.split(":", 1)
        try:
            lines.append(PartLine(part_id=int(part_str), quantity=int(qty_str)))
        except ValueError:
            raise click.BadParameter(f"Invalid item '{pair}'.")
    return lines


@click.command("validate")
@click.option("--part", "part_id", required=True, type=int, help="Spare part ID.")
@click.option("--quantity", required=True, type=int, help="Units to draw.")
def stock_validate(part_id: int, quantity: int) -> None:
    """Check whether a draw fits current availability."""
    result = stock_validator().validate(part_id, quantity)
    echo_validation(result)
    if not result.is_valid:
        raise click.exceptions.Exit(1)


@click.command("status")
@click.option("--part", "part_ids", type=int, multiple=True, help="Spare part ID (repeatable).")
def stock_status(part_ids: tuple[int, ...]) -> None:
    """Show physical, reserved and available stock."""
    handler = ShowStockHandler(spare_part_repository(), stock_validator())

    try:
        lines = handler.handle(list(part_ids) or None)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not lines:
        click.echo("No spare parts found.")
        return

    click.echo(
        f"{'ID':>4}  {'Part':<24} {'Stock':>6} {'Reserved':>9} {'Available':>10} {'Cost':>10}  Alert"
    )
    click.echo("-" * 80)
    for line in lines:
        click.echo(
            f"{line.part_id:>4}  {line.name:<24} {line.physical:>6} {line.reserved:>9} "
            f"{line.available:>10} {line.unit_cost:>10}  {line.alert_level}"
        )


@click.command("reserve")
@click.option("--items", required=True, help="Lines as 'PartId:Qty,PartId:Qty'.")
@click.option("--reservation", "reservation_id", default=None, help="Add to an existing reservation.")
def stock_reserve(items: str, reservation_id: str | None) -> None:
    """Hold stock for a pending job."""
    result = reservation_manager().reserve(_parse_lines(items), reservation_id)

    if result.reservation_id:
        click.echo(f"Reservation {result.reservation_id}")
    click.echo(result.formatted_message())
    if not result.success:
        raise click.exceptions.Exit(1)


@click.command("commit")
@click.option("--reservation", "reservation_id", required=True, help="Reservation ID.")
@click.option("--actor", default=None, help="Who is committing (for the audit trail).")
def stock_commit(reservation_id: str, actor: str | None) -> None:
    """Draw held stock and record it in the ledger."""
    manager = reservation_manager()
    if manager.get(reservation_id) is None:
        raise click.ClickException(f"Reservation {reservation_id} not found")

    if manager.commit(reservation_id, actor_id=actor):
        click.echo(f"Reservation {reservation_id} committed")
    else:
        raise click.ClickException(
            f"Reservation {reservation_id} committed with errors (see log)"
        )


@click.command("release")
@click.option("--reservation", "reservation_id", required=True, help="Reservation ID.")
def stock_release(reservation_id: str) -> None:
    """Discard a reservation without touching stock."""
    reservation_manager().release(reservation_id)
    click.echo(f"Reservation {reservation_id} released")


@click.command("reservations")
def stock_reservations() -> None:
    """List active reservations."""
    reservations = reservation_manager().active_reservations()

    if not reservations:
        click.echo("No active reservations.")
        return

    for reservation in reservations:
        lines = ", ".join(f"#{pid} x{qty}" for pid, qty in reservation.lines.items())
        click.echo(
            f"{reservation.id}  {reservation.created_at.strftime('%Y-%m-%d %H:%M UTC')}  {lines}"
        )
