"""Inventory audit entries: the append-only stock ledger.

One entry is written for every change of a part's physical stock. Entries
are never modified or deleted once written.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum

from fleetalloc.domain.model.value_objects import Reference, ReferenceKind


class ChangeType(Enum):
    INCREASE = "increase"
    DECREASE = "decrease"


_NOTES = {
    (ReferenceKind.PRODUCT_REQUEST, ChangeType.INCREASE): "Product request #{id} received",
    (ReferenceKind.PRODUCT_REQUEST, ChangeType.DECREASE): "Product request #{id} reversed (status changed from 'received')",
    (ReferenceKind.RESERVATION, ChangeType.DECREASE): "Reservation {id} committed",
    (ReferenceKind.MAINTENANCE_USAGE, ChangeType.DECREASE): "Used in maintenance #{id}",
}


@dataclass(frozen=True)
class InventoryAuditEntry:
    part_id: int
    change_type: ChangeType
    quantity_change: int  # signed: positive for increases, negative for decreases
    previous_stock: int
    new_stock: int
    reference: Reference
    actor_id: str | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    notes: str = ""
    id: int | None = None

    @staticmethod
    def default_notes(reference: Reference, change_type: ChangeType) -> str:
        template = _NOTES.get((reference.kind, change_type))
        if template is None:
            return f"Stock {change_type.value} ({reference})"
        return template.format(id=reference.id)
