"""Application service: Record Maintenance Usage use case.

Validates a draw against available stock, then removes it from physical
stock through the ledger.
"""

from __future__ import annotations

from fleetalloc.domain.exceptions import (
    EntityNotFoundError,
    InsufficientStockError,
    ValidationError,
)
from fleetalloc.domain.model.audit import InventoryAuditEntry
from fleetalloc.domain.model.value_objects import Reference
from fleetalloc.domain.repository.spare_part_repository import SparePartRepository
from fleetalloc.domain.service.inventory_ledger import InventoryAuditLedger
from fleetalloc.domain.service.stock_validator import StockValidator


class RecordMaintenanceUsageHandler:

    def __init__(
        self,
        part_repo: SparePartRepository,
        validator: StockValidator,
        ledger: InventoryAuditLedger,
    ) -> None:
        self._part_repo = part_repo
        self._validator = validator
        self._ledger = ledger

    def handle(
        self,
        usage_id: int,
        part_id: int,
        quantity: int,
        actor_id: str | None = None,
    ) -> InventoryAuditEntry | None:
        if self._part_repo.get_by_id(part_id) is None:
            raise EntityNotFoundError(f"Spare part #{part_id} not found")
        if quantity <= 0:
            raise ValidationError("Quantity must be greater than 0")

        result = self._validator.validate(part_id, quantity)
        if not result.is_valid:
            raise InsufficientStockError("; ".join(result.errors), result)

        return self._ledger.record_decrease(
            part_id, quantity, Reference.maintenance_usage(usage_id), actor_id
        )
