"""Value Objects shared across the domain.

Value Objects are immutable and compared by value, not identity.
They encapsulate validation so invalid values can never exist.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal, InvalidOperation
from enum import Enum

from fleetalloc.domain.exceptions import ValidationError

DATE_FORMAT = "%d/%m/%Y"


@dataclass(frozen=True)
class Money:
    """A non-negative cost, e.g. a spare part's unit cost.

    Displayed with two decimals; the stored amount keeps whatever
    precision it was given.
    """

    amount: Decimal

    def __post_init__(self) -> None:
        if not isinstance(self.amount, Decimal):
            raise ValidationError(f"Cost must be a Decimal, got {type(self.amount).__name__}")
        if self.amount.is_nan() or self.amount < 0:
            raise ValidationError(f"Cost cannot be negative, got {self.amount}")

    def __str__(self) -> str:
        return f"${self.amount:.2f}"

    @staticmethod
    def of(amount: str | int | Decimal) -> Money:
        try:
            return Money(Decimal(str(amount).strip() or "0"))
        except InvalidOperation as exc:
            raise ValidationError(f"Invalid cost: {amount!r}") from exc


@dataclass(frozen=True)
class DateInterval:
    """An inclusive ``[start, end]`` date range.

    Two intervals overlap when they share at least one day, so touching
    endpoints count as an overlap.
    """

    start: date
    end: date

    def __post_init__(self) -> None:
        if self.end < self.start:
            raise ValidationError(
                f"Interval end {self.end.isoformat()} is before its start "
                f"{self.start.isoformat()}"
            )

    def overlaps(self, other: DateInterval) -> bool:
        return self.start <= other.end and other.start <= self.end

    def __str__(self) -> str:
        return f"{self.start.strftime(DATE_FORMAT)} - {self.end.strftime(DATE_FORMAT)}"

    @staticmethod
    def parse(start: str, end: str) -> DateInterval:
        """Build an interval from two ISO ``YYYY-MM-DD`` strings."""
        try:
            return DateInterval(date.fromisoformat(start), date.fromisoformat(end))
        except ValueError as exc:
            raise ValidationError(f"Invalid date range: {start!r} to {end!r}") from exc


class ReferenceKind(Enum):
    PRODUCT_REQUEST = "product_request"
    RESERVATION = "reservation"
    MAINTENANCE_USAGE = "maintenance_usage"
    MANUAL_ADJUSTMENT = "manual_adjustment"


@dataclass(frozen=True)
class Reference:
    """What caused a stock change: a kind tag plus the id of the source record."""

    kind: ReferenceKind
    id: str

    def __str__(self) -> str:
        return f"{self.kind.value}#{self.id}"

    @staticmethod
    def product_request(request_id: int | str) -> Reference:
        return Reference(ReferenceKind.PRODUCT_REQUEST, str(request_id))

    @staticmethod
    def reservation(reservation_id: str) -> Reference:
        return Reference(ReferenceKind.RESERVATION, reservation_id)

    @staticmethod
    def maintenance_usage(usage_id: int | str) -> Reference:
        return Reference(ReferenceKind.MAINTENANCE_USAGE, str(usage_id))
