"""CLI commands for the inventory ledger."""

from __future__ import annotations

from datetime import datetime, timezone

import click

from fleetalloc.application.product_request_status import (
    RECEIVED,
    ProductRequestStatusHandler,
)
from fleetalloc.application.show_audit_trail import ShowAuditTrailHandler
from fleetalloc.domain.exceptions import DomainException
from fleetalloc.infrastructure.bootstrap import inventory_ledger


def _apply(request_id: int, part_id: int, quantity: int, old: str, new: str, actor: str | None) -> None:
    handler = ProductRequestStatusHandler(inventory_ledger())

    try:
        entry = handler.handle(request_id, part_id, quantity, old, new, actor)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if entry is None:
        click.echo("Duplicate update suppressed; stock unchanged.")
    else:
        click.echo(
            f"Part #{entry.part_id}: {entry.previous_stock} -> {entry.new_stock} "
            f"({entry.quantity_change:+d})"
        )


@click.command("receive")
@click.option("--request", "request_id", required=True, type=int, help="Product request ID.")
@click.option("--part", "part_id", required=True, type=int, help="Spare part ID.")
@click.option("--quantity", required=True, type=int, help="Quantity on the request.")
@click.option("--actor", default=None, help="Who made the change.")
def ledger_receive(request_id: int, part_id: int, quantity: int, actor: str | None) -> None:
    """Mark a product request as received (adds stock)."""
    _apply(request_id, part_id, quantity, "pending", RECEIVED, actor)


@click.command("reverse")
@click.option("--request", "request_id", required=True, type=int, help="Product request ID.")
@click.option("--part", "part_id", required=True, type=int, help="Spare part ID.")
@click.option("--quantity", required=True, type=int, help="Quantity on the request.")
@click.option("--actor", default=None, help="Who made the change.")
def ledger_reverse(request_id: int, part_id: int, quantity: int, actor: str | None) -> None:
    """Move a product request back out of received (removes stock)."""
    _apply(request_id, part_id, quantity, RECEIVED, "pending", actor)


def _parse_when(value: str | None) -> datetime | None:
    if value is None:
        return None
    try:
        parsed = datetime.fromisoformat(value)
    except ValueError:
        raise click.BadParameter(f"Invalid date '{value}'. Expected ISO format.")
    return parsed if parsed.tzinfo else parsed.replace(tzinfo=timezone.utc)


@click.command("show")
@click.option("--part", "part_id", required=True, type=int, help="Spare part ID.")
@click.option("--since", default=None, help="Only entries at or after (ISO date/time).")
@click.option("--until", default=None, help="Only entries at or before (ISO date/time).")
def ledger_show(part_id: int, since: str | None, until: str | None) -> None:
    """Show the audit trail for a part."""
    handler = ShowAuditTrailHandler(inventory_ledger())
    entries = handler.handle(part_id, _parse_when(since), _parse_when(until))

    if not entries:
        click.echo("No ledger entries found.")
        return

    click.echo(f"{'When':<22} {'Change':>7} {'Before':>7} {'After':>7}  {'Reference':<28} Actor")
    click.echo("-" * 85)
    for e in entries:
        click.echo(
            f"{e.created_at:<22} {e.change:>7} {e.previous_stock:>7} {e.new_stock:>7}  "
            f"{e.reference:<28} {e.actor}"
        )
