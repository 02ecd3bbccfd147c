"""Domain service: Inventory Audit Ledger.

The two operations here are the only sanctioned ways physical stock may
change. Each one locks the part row, applies the change, and appends
exactly one audit entry describing it.

Replaying the same (part, reference, change type) within the de-dup window is
suppressed. The guard is a time-window lookup, not a unique constraint:
two truly simultaneous duplicates can both pass it before either writes.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import datetime, timedelta, timezone

from fleetalloc.domain.exceptions import (
    EntityNotFoundError,
    NegativeStockError,
    ValidationError,
)
from fleetalloc.domain.model.audit import ChangeType, InventoryAuditEntry
from fleetalloc.domain.model.value_objects import Reference
from fleetalloc.domain.repository.audit_repository import AuditRepository
from fleetalloc.domain.repository.spare_part_repository import SparePartRepository

logger = logging.getLogger(__name__)

DEFAULT_DEDUP_WINDOW = timedelta(minutes=5)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class InventoryAuditLedger:

    def __init__(
        self,
        part_repo: SparePartRepository,
        audit_repo: AuditRepository,
        dedup_window: timedelta = DEFAULT_DEDUP_WINDOW,
        clock: Callable[[], datetime] = _utcnow,
    ) -> None:
        self._part_repo = part_repo
        self._audit_repo = audit_repo
        self._dedup_window = dedup_window
        self._clock = clock

    # --- Write path -----------------------------------------------------------

    def record_increase(
        self,
        part_id: int,
        quantity: int,
        reference: Reference,
        actor_id: str | None = None,
    ) -> InventoryAuditEntry | None:
        """Add *quantity* units to a part's stock.

        Returns the audit entry written, or None when the call was a
        suppressed duplicate.
        """
        return self._record(part_id, quantity, reference, ChangeType.INCREASE, actor_id)

    def record_decrease(
        self,
        part_id: int,
        quantity: int,
        reference: Reference,
        actor_id: str | None = None,
    ) -> InventoryAuditEntry | None:
        """Remove *quantity* units from a part's stock.

        Raises NegativeStockError, without mutating anything, when the
        part holds fewer than *quantity* units.
        """
        return self._record(part_id, quantity, reference, ChangeType.DECREASE, actor_id)

    # --- Read surface ---------------------------------------------------------

    def entries_for_part(
        self,
        part_id: int,
        since: datetime | None = None,
        until: datetime | None = None,
    ) -> list[InventoryAuditEntry]:
        return self._audit_repo.list_for_part(part_id, since, until)

    def entries_for_reference(self, reference: Reference) -> list[InventoryAuditEntry]:
        return self._audit_repo.list_for_reference(reference)

    # --- Internal helpers -----------------------------------------------------

    def _record(
        self,
        part_id: int,
        quantity: int,
        reference: Reference,
        change_type: ChangeType,
        actor_id: str | None,
    ) -> InventoryAuditEntry | None:
        if quantity <= 0:
            raise ValidationError("Stock change quantity must be positive")

        now = self._clock()
        if self._audit_repo.exists_since(
            part_id, reference, change_type, now - self._dedup_window
        ):
            logger.warning(
                "Duplicate stock %s prevented for %s on part #%s",
                change_type.value, reference, part_id,
            )
            return None

        with self._part_repo.lock_for_update(part_id) as part:
            if part is None:
                raise EntityNotFoundError(f"Spare part #{part_id} not found")

            previous = part.stock_quantity
            if change_type == ChangeType.INCREASE:
                part.increase(quantity)
                delta = quantity
            else:
                if previous < quantity:
                    logger.warning(
                        "Cannot apply %s to part #%s: would result in negative stock "
                        "(current: %s, requested: %s)",
                        reference, part_id, previous, quantity,
                    )
                    raise NegativeStockError(
                        f"Cannot remove {quantity} units of {part.name}: resulting stock "
                        f"would be negative (current stock: {previous})"
                    )
                part.decrease(quantity)
                delta = -quantity

            self._part_repo.save(part)

            entry = InventoryAuditEntry(
                part_id=part_id,
                change_type=change_type,
                quantity_change=delta,
                previous_stock=previous,
                new_stock=part.stock_quantity,
                reference=reference,
                actor_id=actor_id,
                created_at=now,
                notes=InventoryAuditEntry.default_notes(reference, change_type),
            )
            try:
                stored = self._audit_repo.append(entry)
            except Exception:
                # No audit row means no mutation: put the stock back.
                part.stock_quantity = previous
                self._part_repo.save(part)
                raise

        logger.info(
            "Stock %s for %s: part #%s changed from %s to %s",
            change_type.value, reference, part_id, previous, stored.new_stock,
        )
        return stored
