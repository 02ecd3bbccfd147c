"""Integration tests for the ShowStock and ShowAuditTrail queries."""

import pytest

from fleetalloc.application.show_audit_trail import ShowAuditTrailHandler
from fleetalloc.application.show_stock import ShowStockHandler
from fleetalloc.domain.exceptions import EntityNotFoundError
from fleetalloc.domain.model.reservation import Reservation
from fleetalloc.domain.model.spare_part import SparePart
from fleetalloc.domain.model.value_objects import Money, Reference
from fleetalloc.domain.service.inventory_ledger import InventoryAuditLedger
from fleetalloc.domain.service.stock_validator import StockValidator
from tests.fakes import (
    FakeAuditRepository,
    FakeClock,
    FakeReservationStore,
    FakeSparePartRepository,
)


def _parts() -> FakeSparePartRepository:
    return FakeSparePartRepository([
        SparePart(id=1, name="Oil filter", unit_cost=Money.of("9.5"), stock_quantity=20),
        SparePart(id=2, name="Brake pad", unit_cost=Money.of("30"), stock_quantity=0),
    ])


class TestShowStock:

    def test_lists_every_part(self):
        parts = _parts()
        store = FakeReservationStore()
        store.save(Reservation(id="RSV-1", lines={1: 5}))
        handler = ShowStockHandler(parts, StockValidator(parts, store))

        lines = handler.handle()

        assert [(line.part_id, line.physical, line.reserved, line.available) for line in lines] == [
            (1, 20, 5, 15),
            (2, 0, 0, 0),
        ]
        assert lines[0].unit_cost == "$9.50"
        assert lines[1].alert_level == "out_of_stock"

    def test_unknown_part_rejected(self):
        parts = _parts()
        handler = ShowStockHandler(parts, StockValidator(parts, FakeReservationStore()))

        with pytest.raises(EntityNotFoundError, match="#9"):
            handler.handle([9])


class TestShowAuditTrail:

    def test_formats_entries(self):
        parts = _parts()
        ledger = InventoryAuditLedger(parts, FakeAuditRepository(), clock=FakeClock())
        ledger.record_increase(1, 5, Reference.product_request(8), actor_id="u-2")
        ledger.record_decrease(1, 3, Reference.maintenance_usage(4))

        rows = ShowAuditTrailHandler(ledger).handle(1)

        assert [r.change for r in rows] == ["+5", "-3"]
        assert rows[0].reference == "product_request#8"
        assert rows[0].actor == "u-2"
        assert rows[1].actor == "-"
        assert rows[0].created_at == "2024-01-01 12:00 UTC"
