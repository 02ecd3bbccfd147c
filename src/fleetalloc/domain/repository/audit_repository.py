"""Abstract append-only repository for inventory audit entries."""

from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import datetime

from fleetalloc.domain.model.audit import ChangeType, InventoryAuditEntry
from fleetalloc.domain.model.value_objects import Reference


class AuditRepository(ABC):

    @abstractmethod
    def append(self, entry: InventoryAuditEntry) -> InventoryAuditEntry:
        """Store a new entry and return it with its assigned ID."""

    @abstractmethod
    def exists_since(
        self,
        part_id: int,
        reference: Reference,
        change_type: ChangeType,
        since: datetime,
    ) -> bool:
        """True if an entry for this part, reference and change type was created at or after *since*."""

    @abstractmethod
    def list_for_part(
        self,
        part_id: int,
        since: datetime | None = None,
        until: datetime | None = None,
    ) -> list[InventoryAuditEntry]:
        """Entries for one part, oldest first, optionally bounded in time."""

    @abstractmethod
    def list_for_reference(self, reference: Reference) -> list[InventoryAuditEntry]:
        """Entries caused by one reference, oldest first."""
