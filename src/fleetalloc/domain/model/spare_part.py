"""SparePart aggregate: physical stock of a maintenance part.

``stock_quantity`` is the single source of truth for what sits on the
shelf. Only the inventory ledger changes it, via ``increase`` and
``decrease``.
"""

from __future__ import annotations

from dataclasses import dataclass

from fleetalloc.domain.exceptions import NegativeStockError, ValidationError
from fleetalloc.domain.model.value_objects import Money

# Words skipped when extracting name keywords for alternative-part lookup.
_STOP_WORDS = frozenset({"de", "para", "con", "sin", "el", "la", "los", "las",
                         "for", "with", "without", "the", "of", "and"})


@dataclass
class SparePart:
    """Aggregate root for spare-part stock.

    Invariants:
    - ``stock_quantity`` is never negative
    """

    id: int
    name: str
    unit_cost: Money
    stock_quantity: int = 0
    brand: str = ""
    part_number: str = ""

    @property
    def display_name(self) -> str:
        if self.part_number:
            return f"{self.part_number} - {self.name}"
        return self.name

    @property
    def is_in_stock(self) -> bool:
        return self.stock_quantity > 0

    def has_low_stock(self, threshold: int = 10) -> bool:
        return self.stock_quantity <= threshold

    def name_keywords(self, limit: int = 2) -> list[str]:
        """First significant lowercase words of the part name."""
        words = [w for w in self.name.lower().split() if w not in _STOP_WORDS]
        return words[:limit]

    def increase(self, quantity: int) -> None:
        if quantity <= 0:
            raise ValidationError("Stock increase quantity must be positive")
        self.stock_quantity += quantity

    def decrease(self, quantity: int) -> None:
        if quantity <= 0:
            raise ValidationError("Stock decrease quantity must be positive")
        if quantity > self.stock_quantity:
            raise NegativeStockError(
                f"Cannot remove {quantity} of {self.name}: resulting stock would be "
                f"negative (current stock: {self.stock_quantity})"
            )
        self.stock_quantity -= quantity
