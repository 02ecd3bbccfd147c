"""Domain service: Spare-part Reservations.

Reservations hold stock for a multi-step workflow (e.g. a maintenance job
being drafted) without touching physical stock. Holds live in an injected
``ReservationStore`` until the caller commits or releases them.

Reserving is check-then-act per line with no cross-line rollback: a call
can hold some lines and fail others. Callers that need all-or-nothing
must inspect the result and ``release`` on partial failure.

The store is not locked between the availability check and the hold, so
two concurrent ``reserve`` calls against the same part can both pass the
check. Running more than one instance needs a locking store first.
"""

from __future__ import annotations

import logging

from fleetalloc.domain.exceptions import DomainException
from fleetalloc.domain.model.reservation import Reservation, generate_reservation_id
from fleetalloc.domain.model.results import FailedItem, ReservationResult, ReservedItem
from fleetalloc.domain.model.value_objects import Reference
from fleetalloc.domain.repository.reservation_store import ReservationStore
from fleetalloc.domain.repository.spare_part_repository import SparePartRepository
from fleetalloc.domain.service.inventory_ledger import InventoryAuditLedger
from fleetalloc.domain.service.stock_validator import PartLine, StockValidator

logger = logging.getLogger(__name__)


class ReservationManager:

    def __init__(
        self,
        part_repo: SparePartRepository,
        store: ReservationStore,
        validator: StockValidator,
        ledger: InventoryAuditLedger,
    ) -> None:
        self._part_repo = part_repo
        self._store = store
        self._validator = validator
        self._ledger = ledger

    def reserve(
        self,
        items: list[PartLine],
        reservation_id: str | None = None,
    ) -> ReservationResult:
        """Hold stock for each line independently.

        Lines that pass their availability check are held immediately and
        stay held even if a later line fails. An id that was already
        committed cannot be reused; every line fails instead.
        """
        if reservation_id and self._ledger.entries_for_reference(Reference.reservation(reservation_id)):
            logger.warning("Reservation %s was already committed; refusing new holds", reservation_id)
            failed = [
                FailedItem(
                    line.part_id,
                    self._part_name(line.part_id),
                    line.quantity,
                    self._validator.available(line.part_id),
                    "Reservation already committed",
                )
                for line in items
                if line.part_id is not None
            ]
            return ReservationResult.from_lines([], failed, reservation_id)

        reservation_id = reservation_id or generate_reservation_id()
        reservation = self._store.get(reservation_id) or Reservation(id=reservation_id)
        had_holds = not reservation.is_empty

        reserved: list[ReservedItem] = []
        failed: list[FailedItem] = []

        for line in items:
            if line.part_id is None:
                continue

            part = self._part_repo.get_by_id(line.part_id)
            if part is None:
                failed.append(FailedItem(line.part_id, "Unknown part", line.quantity, 0, "Part not found"))
                continue

            available = self._validator.available(part.id)
            if line.quantity <= 0:
                failed.append(FailedItem(part.id, part.name, line.quantity, available, "Quantity must be positive"))
                continue
            if available < line.quantity:
                failed.append(FailedItem(part.id, part.name, line.quantity, available, "Insufficient stock"))
                continue

            reservation.hold(part.id, line.quantity)
            # Persist per line so later lines for the same part see this hold.
            self._store.save(reservation)
            reserved.append(ReservedItem(part.id, part.name, line.quantity, part.unit_cost.amount))

        if reserved:
            logger.info("Reservation %s holds %d line(s)", reservation_id, len(reserved))
        if failed:
            logger.info("Reservation %s could not hold %d line(s)", reservation_id, len(failed))

        return ReservationResult.from_lines(reserved, failed, reservation_id, had_holds)

    def release(self, reservation_id: str) -> None:
        """Discard a reservation; its held quantities become available again."""
        self._store.delete(reservation_id)

    def commit(self, reservation_id: str, actor_id: str | None = None) -> bool:
        """Turn every held line into a physical stock decrease.

        Best effort: a failing line is logged and the rest still commit.
        The reservation is released afterwards regardless. Returns True
        only if every line committed cleanly.
        """
        reservation = self._store.get(reservation_id)
        if reservation is None:
            return False

        reference = Reference.reservation(reservation_id)
        success = True
        try:
            for part_id, quantity in reservation.lines.items():
                try:
                    entry = self._ledger.record_decrease(part_id, quantity, reference, actor_id)
                except DomainException as exc:
                    success = False
                    logger.error(
                        "Failed to commit reservation %s for part #%s: %s",
                        reservation_id, part_id, exc,
                    )
                    continue
                if entry is None:
                    success = False
                    logger.error(
                        "Reservation %s for part #%s was already committed; stock not drawn",
                        reservation_id, part_id,
                    )
        finally:
            self._store.delete(reservation_id)

        return success

    # --- Queries and housekeeping ---------------------------------------------

    def get(self, reservation_id: str) -> Reservation | None:
        return self._store.get(reservation_id)

    def active_reservations(self) -> list[Reservation]:
        return self._store.list_active()

    def clear_all(self) -> None:
        for reservation in self._store.list_active():
            self._store.delete(reservation.id)

    def _part_name(self, part_id: int) -> str:
        part = self._part_repo.get_by_id(part_id)
        return part.name if part is not None else "Unknown part"
