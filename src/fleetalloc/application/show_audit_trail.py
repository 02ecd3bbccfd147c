"""Application service: Show Audit Trail use case (query)."""

from __future__ import annotations

from datetime import datetime

from fleetalloc.application.dto import AuditEntryDTO
from fleetalloc.domain.model.audit import InventoryAuditEntry
from fleetalloc.domain.service.inventory_ledger import InventoryAuditLedger


class ShowAuditTrailHandler:

    def __init__(self, ledger: InventoryAuditLedger) -> None:
        self._ledger = ledger

    def handle(
        self,
        part_id: int,
        since: datetime | None = None,
        until: datetime | None = None,
    ) -> list[AuditEntryDTO]:
        return [self._to_dto(e) for e in self._ledger.entries_for_part(part_id, since, until)]

    @staticmethod
    def _to_dto(entry: InventoryAuditEntry) -> AuditEntryDTO:
        return AuditEntryDTO(
            part_id=entry.part_id,
            change=f"{entry.quantity_change:+d}",
            previous_stock=entry.previous_stock,
            new_stock=entry.new_stock,
            reference=str(entry.reference),
            actor=entry.actor_id or "-",
            created_at=entry.created_at.strftime("%Y-%m-%d %H:%M UTC"),
            notes=entry.notes,
        )
