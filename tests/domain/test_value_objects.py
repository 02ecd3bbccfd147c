"""Unit tests for Value Objects (Money, DateInterval, Reference)."""

from datetime import date
from decimal import Decimal

import pytest

from fleetalloc.domain.exceptions import ValidationError
from fleetalloc.domain.model.value_objects import DateInterval, Money, Reference, ReferenceKind


def _iv(start: str, end: str) -> DateInterval:
    return DateInterval(date.fromisoformat(start), date.fromisoformat(end))


class TestMoney:

    def test_of_coerces_string(self):
        assert Money.of("12.50").amount == Decimal("12.50")

    def test_negative_rejected(self):
        with pytest.raises(ValidationError, match="cannot be negative"):
            Money(Decimal("-1"))

    def test_garbage_rejected(self):
        with pytest.raises(ValidationError, match="Invalid cost"):
            Money.of("twelve")

    def test_str_format(self):
        assert str(Money.of("7")) == "$7.00"


class TestDateIntervalConstruction:

    def test_single_day_interval_allowed(self):
        iv = _iv("2024-01-01", "2024-01-01")
        assert iv.start == iv.end

    def test_end_before_start_rejected(self):
        with pytest.raises(ValidationError, match="before its start"):
            _iv("2024-01-05", "2024-01-01")

    def test_parse_iso_strings(self):
        assert DateInterval.parse("2024-01-01", "2024-01-05") == _iv("2024-01-01", "2024-01-05")

    def test_parse_garbage_rejected(self):
        with pytest.raises(ValidationError, match="Invalid date range"):
            DateInterval.parse("yesterday", "2024-01-05")

    def test_str_uses_day_first_format(self):
        assert str(_iv("2024-01-03", "2024-01-04")) == "03/01/2024 - 04/01/2024"


class TestDateIntervalOverlap:

    def test_identical_intervals_overlap(self):
        a = _iv("2024-01-01", "2024-01-05")
        assert a.overlaps(_iv("2024-01-01", "2024-01-05"))

    def test_touching_endpoints_overlap(self):
        a = _iv("2024-01-01", "2024-01-05")
        b = _iv("2024-01-05", "2024-01-09")
        assert a.overlaps(b)
        assert b.overlaps(a)

    def test_candidate_inside_existing_overlaps(self):
        existing = _iv("2024-01-01", "2024-01-10")
        assert existing.overlaps(_iv("2024-01-03", "2024-01-04"))

    def test_candidate_containing_existing_overlaps(self):
        existing = _iv("2024-01-03", "2024-01-04")
        assert existing.overlaps(_iv("2024-01-01", "2024-01-10"))

    def test_partial_overlap_either_side(self):
        existing = _iv("2024-01-05", "2024-01-10")
        assert existing.overlaps(_iv("2024-01-01", "2024-01-06"))
        assert existing.overlaps(_iv("2024-01-09", "2024-01-15"))

    def test_disjoint_intervals_do_not_overlap(self):
        a = _iv("2024-01-01", "2024-01-05")
        b = _iv("2024-01-06", "2024-01-09")
        assert not a.overlaps(b)
        assert not b.overlaps(a)


class TestReference:

    def test_factories_tag_kind(self):
        assert Reference.product_request(7) == Reference(ReferenceKind.PRODUCT_REQUEST, "7")
        assert Reference.reservation("RSV-1").kind == ReferenceKind.RESERVATION

    def test_str(self):
        assert str(Reference.maintenance_usage(3)) == "maintenance_usage#3"
