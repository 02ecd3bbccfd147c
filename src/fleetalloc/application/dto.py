"""Data Transfer Objects — plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class StockLineDTO:
    """Output: stock position of one part as displayed to the user."""

    part_id: int
    name: str
    physical: int
    reserved: int
    available: int
    unit_cost: str  # formatted, e.g. "$15.00"
    alert_level: str


@dataclass(frozen=True)
class AuditEntryDTO:
    """Output: one ledger row."""

    part_id: int
    change: str  # signed, e.g. "+5" or "-3"
    previous_stock: int
    new_stock: int
    reference: str
    actor: str
    created_at: str
    notes: str
