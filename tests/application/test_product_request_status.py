"""Integration tests for the ProductRequestStatus use case."""

import pytest

from fleetalloc.application.product_request_status import ProductRequestStatusHandler
from fleetalloc.domain.exceptions import DuplicateOperationError, NegativeStockError
from fleetalloc.domain.model.spare_part import SparePart
from fleetalloc.domain.model.value_objects import Money
from fleetalloc.domain.service.inventory_ledger import InventoryAuditLedger
from tests.fakes import FakeAuditRepository, FakeClock, FakeSparePartRepository


def _setup(stock: int = 10, strict: bool = False):
    parts = FakeSparePartRepository([
        SparePart(id=1, name="Brake pad", unit_cost=Money.of("30.00"), stock_quantity=stock)
    ])
    audits = FakeAuditRepository()
    clock = FakeClock()
    ledger = InventoryAuditLedger(parts, audits, clock=clock)
    return ProductRequestStatusHandler(ledger, strict=strict), parts, audits, clock


class TestReceived:

    def test_marking_received_adds_stock(self):
        handler, parts, audits, _ = _setup(stock=10)

        entry = handler.handle(42, 1, 5, "approved", "received", actor_id="u-1")

        assert parts.get_by_id(1).stock_quantity == 15
        assert entry.new_stock == 15
        assert len(audits.entries) == 1

    def test_replayed_event_applied_once(self):
        handler, parts, audits, clock = _setup(stock=10)

        handler.handle(42, 1, 5, "approved", "received")
        clock.advance(2)
        again = handler.handle(42, 1, 5, "approved", "received")

        assert again is None
        assert parts.get_by_id(1).stock_quantity == 15
        assert len(audits.entries) == 1

    def test_strict_mode_raises_on_duplicate(self):
        handler, parts, _, _ = _setup(stock=10, strict=True)
        handler.handle(42, 1, 5, "approved", "received")

        with pytest.raises(DuplicateOperationError, match="#42"):
            handler.handle(42, 1, 5, "approved", "received")
        assert parts.get_by_id(1).stock_quantity == 15


class TestReversal:

    def test_leaving_received_removes_stock(self):
        handler, parts, _, _ = _setup(stock=10)
        handler.handle(42, 1, 5, "approved", "received")

        entry = handler.handle(42, 1, 5, "received", "approved")

        assert parts.get_by_id(1).stock_quantity == 10
        assert entry.quantity_change == -5

    def test_reversal_that_would_go_negative_raises(self, caplog):
        handler, parts, audits, _ = _setup(stock=2)

        with caplog.at_level("ERROR"):
            with pytest.raises(NegativeStockError):
                handler.handle(42, 1, 5, "received", "cancelled")

        assert parts.get_by_id(1).stock_quantity == 2
        assert audits.entries == []
        assert "product request #42" in caplog.text


class TestIgnoredTransitions:

    def test_unrelated_transition(self):
        handler, parts, audits, _ = _setup(stock=10)

        assert handler.handle(42, 1, 5, "pending", "approved") is None
        assert parts.get_by_id(1).stock_quantity == 10
        assert audits.entries == []

    def test_unchanged_status(self):
        handler, _, audits, _ = _setup(stock=10)

        assert handler.handle(42, 1, 5, "received", "received") is None
        assert audits.entries == []
