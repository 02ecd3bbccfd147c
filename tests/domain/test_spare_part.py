"""Unit tests for the SparePart aggregate."""

import pytest

from fleetalloc.domain.exceptions import NegativeStockError, ValidationError
from fleetalloc.domain.model.spare_part import SparePart
from fleetalloc.domain.model.value_objects import Money


def _part(stock: int = 10, name: str = "Filtro de aceite para motor") -> SparePart:
    return SparePart(id=1, name=name, unit_cost=Money.of("8.00"), stock_quantity=stock)


class TestSparePartStock:

    def test_increase(self):
        part = _part(10)
        part.increase(5)
        assert part.stock_quantity == 15

    def test_decrease_to_zero(self):
        part = _part(4)
        part.decrease(4)
        assert part.stock_quantity == 0
        assert not part.is_in_stock

    def test_decrease_below_zero_rejected(self):
        part = _part(3)
        with pytest.raises(NegativeStockError, match="negative"):
            part.decrease(4)
        assert part.stock_quantity == 3

    def test_non_positive_change_rejected(self):
        with pytest.raises(ValidationError, match="must be positive"):
            _part().increase(0)
        with pytest.raises(ValidationError, match="must be positive"):
            _part().decrease(-1)


class TestSparePartDescriptors:

    def test_keywords_skip_stop_words(self):
        assert _part().name_keywords() == ["filtro", "aceite"]

    def test_display_name_with_part_number(self):
        part = SparePart(id=1, name="Brake pad", unit_cost=Money.of("1"), part_number="BP-9")
        assert part.display_name == "BP-9 - Brake pad"

    def test_low_stock_threshold(self):
        assert _part(10).has_low_stock()
        assert not _part(11).has_low_stock()
