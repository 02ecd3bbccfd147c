"""Integration tests for the RecordMaintenanceUsage use case."""

import pytest

from fleetalloc.application.record_maintenance_usage import RecordMaintenanceUsageHandler
from fleetalloc.domain.exceptions import (
    EntityNotFoundError,
    InsufficientStockError,
    ValidationError,
)
from fleetalloc.domain.model.reservation import Reservation
from fleetalloc.domain.model.spare_part import SparePart
from fleetalloc.domain.model.value_objects import Money, ReferenceKind
from fleetalloc.domain.service.inventory_ledger import InventoryAuditLedger
from fleetalloc.domain.service.stock_validator import StockValidator
from tests.fakes import (
    FakeAuditRepository,
    FakeClock,
    FakeReservationStore,
    FakeSparePartRepository,
)


def _setup(stock: int = 10):
    parts = FakeSparePartRepository([
        SparePart(id=1, name="Oil filter", unit_cost=Money.of("9.99"), stock_quantity=stock)
    ])
    store = FakeReservationStore()
    audits = FakeAuditRepository()
    handler = RecordMaintenanceUsageHandler(
        parts,
        StockValidator(parts, store),
        InventoryAuditLedger(parts, audits, clock=FakeClock()),
    )
    return handler, parts, store, audits


class TestRecordMaintenanceUsage:

    def test_usage_draws_stock(self):
        handler, parts, _, audits = _setup(stock=10)

        entry = handler.handle(usage_id=3, part_id=1, quantity=4, actor_id="mech-1")

        assert parts.get_by_id(1).stock_quantity == 6
        assert entry.reference.kind == ReferenceKind.MAINTENANCE_USAGE
        assert entry.notes == "Used in maintenance #3"
        assert len(audits.entries) == 1

    def test_held_stock_cannot_be_used(self):
        handler, parts, store, audits = _setup(stock=10)
        store.save(Reservation(id="RSV-1", lines={1: 8}))

        with pytest.raises(InsufficientStockError) as exc_info:
            handler.handle(usage_id=3, part_id=1, quantity=4)

        assert "Available: 2, requested: 4" in str(exc_info.value)
        assert exc_info.value.result.has_suggestions
        assert parts.get_by_id(1).stock_quantity == 10
        assert audits.entries == []

    def test_unknown_part_is_not_found(self):
        handler, _, _, audits = _setup()

        with pytest.raises(EntityNotFoundError, match="#99"):
            handler.handle(usage_id=3, part_id=99, quantity=1)
        assert audits.entries == []

    def test_non_positive_quantity_is_invalid_input(self):
        handler, parts, _, audits = _setup(stock=10)

        with pytest.raises(ValidationError, match="greater than 0"):
            handler.handle(usage_id=3, part_id=1, quantity=0)
        assert parts.get_by_id(1).stock_quantity == 10
        assert audits.entries == []
