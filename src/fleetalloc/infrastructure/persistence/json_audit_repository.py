"""JSON-file-backed, append-only implementation of AuditRepository."""

from __future__ import annotations

import threading
from dataclasses import replace
from datetime import datetime
from pathlib import Path

from fleetalloc.domain.model.audit import ChangeType, InventoryAuditEntry
from fleetalloc.domain.model.value_objects import Reference, ReferenceKind
from fleetalloc.domain.repository.audit_repository import AuditRepository
from fleetalloc.infrastructure.persistence.json_file import JsonFile


class JsonAuditRepository(AuditRepository):

    def __init__(self, file_path: Path) -> None:
        self._file = JsonFile(file_path)
        self._write_lock = threading.Lock()

    # --- AuditRepository interface --------------------------------------------

    def append(self, entry: InventoryAuditEntry) -> InventoryAuditEntry:
        with self._write_lock:
            records = self._file.load()
            stored = replace(entry, id=max((r["id"] for r in records), default=0) + 1)
            records.append(self._to_raw(stored))
            self._file.persist(records)
        return stored

    def exists_since(
        self,
        part_id: int,
        reference: Reference,
        change_type: ChangeType,
        since: datetime,
    ) -> bool:
        return any(
            e.part_id == part_id
            and e.reference == reference
            and e.change_type == change_type
            and e.created_at >= since
            for e in self._all()
        )

    def list_for_part(
        self,
        part_id: int,
        since: datetime | None = None,
        until: datetime | None = None,
    ) -> list[InventoryAuditEntry]:
        return [
            e for e in self._all()
            if e.part_id == part_id
            and (since is None or e.created_at >= since)
            and (until is None or e.created_at <= until)
        ]

    def list_for_reference(self, reference: Reference) -> list[InventoryAuditEntry]:
        return [e for e in self._all() if e.reference == reference]

    # --- Serialization --------------------------------------------------------

    def _all(self) -> list[InventoryAuditEntry]:
        return [self._to_domain(raw) for raw in self._file.load()]

    @staticmethod
    def _to_raw(entry: InventoryAuditEntry) -> dict:
        return {
            "id": entry.id,
            "part_id": entry.part_id,
            "change_type": entry.change_type.value,
            "quantity_change": entry.quantity_change,
            "previous_stock": entry.previous_stock,
            "new_stock": entry.new_stock,
            "reference_kind": entry.reference.kind.value,
            "reference_id": entry.reference.id,
            "actor_id": entry.actor_id,
            "created_at": entry.created_at.isoformat(),
            "notes": entry.notes,
        }

    @staticmethod
    def _to_domain(raw: dict) -> InventoryAuditEntry:
        return InventoryAuditEntry(
            id=raw["id"],
            part_id=raw["part_id"],
            change_type=ChangeType(raw["change_type"]),
            quantity_change=raw["quantity_change"],
            previous_stock=raw["previous_stock"],
            new_stock=raw["new_stock"],
            reference=Reference(ReferenceKind(raw["reference_kind"]), raw["reference_id"]),
            actor_id=raw.get("actor_id"),
            created_at=datetime.fromisoformat(raw["created_at"]),
            notes=raw.get("notes", ""),
        )
