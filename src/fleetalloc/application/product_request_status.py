"""Application service: Product Request status change.

When a purchase request for a spare part is marked ``received`` its
quantity is added to stock; when it is moved back out of ``received`` the
addition is reversed. Both go through the inventory ledger, so replays
within the de-dup window are suppressed and a reversal can never make
stock negative.
"""

from __future__ import annotations

import logging

from fleetalloc.domain.exceptions import DomainException, DuplicateOperationError
from fleetalloc.domain.model.audit import InventoryAuditEntry
from fleetalloc.domain.model.value_objects import Reference
from fleetalloc.domain.service.inventory_ledger import InventoryAuditLedger

logger = logging.getLogger(__name__)

RECEIVED = "received"


class ProductRequestStatusHandler:

    def __init__(self, ledger: InventoryAuditLedger, strict: bool = False) -> None:
        self._ledger = ledger
        self._strict = strict

    def handle(
        self,
        request_id: int,
        part_id: int,
        quantity: int,
        old_status: str,
        new_status: str,
        actor_id: str | None = None,
    ) -> InventoryAuditEntry | None:
        """Apply the stock effect of a status transition, if it has one.

        Returns the audit entry written, or None when the transition does
        not touch stock or the change was a suppressed duplicate.
        """
        if old_status == new_status:
            return None

        reference = Reference.product_request(request_id)

        try:
            if new_status == RECEIVED:
                entry = self._ledger.record_increase(part_id, quantity, reference, actor_id)
            elif old_status == RECEIVED:
                entry = self._ledger.record_decrease(part_id, quantity, reference, actor_id)
            else:
                return None
        except DomainException as exc:
            logger.error(
                "Failed to update inventory for product request #%s: %s", request_id, exc
            )
            raise

        if entry is None and self._strict:
            raise DuplicateOperationError(
                f"Inventory update for product request #{request_id} was already applied"
            )
        return entry
