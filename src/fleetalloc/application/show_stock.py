"""Application service: Show Stock use case (query)."""

from __future__ import annotations

from fleetalloc.application.dto import StockLineDTO
from fleetalloc.domain.exceptions import EntityNotFoundError
from fleetalloc.domain.model.value_objects import Money
from fleetalloc.domain.repository.spare_part_repository import SparePartRepository
from fleetalloc.domain.service.stock_validator import StockValidator


class ShowStockHandler:

    def __init__(self, part_repo: SparePartRepository, validator: StockValidator) -> None:
        self._part_repo = part_repo
        self._validator = validator

    def handle(self, part_ids: list[int] | None = None) -> list[StockLineDTO]:
        if part_ids is None:
            part_ids = [part.id for part in self._part_repo.list_all()]

        lines: list[StockLineDTO] = []
        for part_id in part_ids:
            status = self._validator.stock_status(part_id)
            if not status.exists:
                raise EntityNotFoundError(f"Spare part #{part_id} not found")
            lines.append(
                StockLineDTO(
                    part_id=status.part_id,
                    name=status.name,
                    physical=status.physical_stock,
                    reserved=status.reserved_quantity,
                    available=status.available_stock,
                    unit_cost=str(Money(status.unit_cost)),
                    alert_level=status.alert_level,
                )
            )
        return lines
