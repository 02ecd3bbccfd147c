"""Domain service: Stock availability validation.

Available stock is the physical quantity on the shelf minus everything
currently held by active reservations. Validation never mutates anything;
it only tells the caller whether a draw would fit and what to do if not.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from fleetalloc.domain.model.results import ValidationResult
from fleetalloc.domain.model.spare_part import SparePart
from fleetalloc.domain.repository.reservation_store import ReservationStore
from fleetalloc.domain.repository.spare_part_repository import SparePartRepository

# ---------------------------------------------------------------------------
# Constants for business rules
# ---------------------------------------------------------------------------
LOW_STOCK_THRESHOLD = 5
MAX_ALTERNATIVE_PARTS = 3
REORDER_ALERT_LEVEL = 10


@dataclass(frozen=True)
class PartLine:
    """One requested line: a part and how many units of it."""

    part_id: int | None
    quantity: int


@dataclass(frozen=True)
class StockStatus:
    exists: bool
    part_id: int
    name: str = ""
    physical_stock: int = 0
    reserved_quantity: int = 0
    available_stock: int = 0
    unit_cost: Decimal = Decimal("0")
    alert_level: str = "normal"

    @property
    def is_available(self) -> bool:
        return self.available_stock > 0


class StockValidator:

    def __init__(
        self,
        part_repo: SparePartRepository,
        reservations: ReservationStore,
        low_stock_threshold: int = LOW_STOCK_THRESHOLD,
        max_alternatives: int = MAX_ALTERNATIVE_PARTS,
    ) -> None:
        self._part_repo = part_repo
        self._reservations = reservations
        self._low_stock_threshold = low_stock_threshold
        self._max_alternatives = max_alternatives

    # --- Availability ---------------------------------------------------------

    def reserved_quantity(self, part_id: int) -> int:
        return self._reservations.reserved_quantity(part_id)

    def available(self, part_id: int) -> int:
        """Physical stock minus active holds; 0 for an unknown part."""
        part = self._part_repo.get_by_id(part_id)
        if part is None:
            return 0
        return self._available_for(part)

    def _available_for(self, part: SparePart) -> int:
        return max(0, part.stock_quantity - self.reserved_quantity(part.id))

    # --- Validation -----------------------------------------------------------

    def validate(self, part_id: int, quantity: int) -> ValidationResult:
        """Check whether *quantity* units of a part can be drawn right now."""
        part = self._part_repo.get_by_id(part_id)
        if part is None:
            return ValidationResult.failure([f"Spare part #{part_id} does not exist."])

        if quantity <= 0:
            return ValidationResult.failure(["Quantity must be greater than 0."])

        available = self._available_for(part)

        if available >= quantity:
            remaining = available - quantity
            if remaining <= self._low_stock_threshold:
                return ValidationResult.success([
                    f"Low stock after this operation: {part.name} will have "
                    f"{remaining} units remaining."
                ])
            return ValidationResult.success()

        suggestions: list[str] = []
        if available > 0:
            suggestions.append(f"You can reduce the quantity to {available} units or fewer.")

        alternatives = self.find_alternatives(part)
        if alternatives:
            suggestions.append(
                "Alternative parts in stock: "
                + ", ".join(alt.display_name for alt in alternatives)
            )

        suggestions.append("Create a purchase request to restock the inventory.")

        return ValidationResult.failure(
            [
                f"Insufficient stock for {part.name}. "
                f"Available: {available}, requested: {quantity}."
            ],
            suggestions=suggestions,
        )

    def validate_many(self, lines: list[PartLine]) -> ValidationResult:
        """Validate several draws at once and fold them into one result."""
        result = ValidationResult.success()
        for line in lines:
            if line.part_id is None:
                continue
            result = result.merge(self.validate(line.part_id, line.quantity))
        return result

    # --- Alternatives ---------------------------------------------------------

    def find_alternatives(self, part: SparePart) -> list[SparePart]:
        """In-stock parts with the same brand or a shared name keyword."""
        keywords = set(part.name_keywords())
        matches: list[SparePart] = []

        for candidate in self._part_repo.list_all():
            if len(matches) >= self._max_alternatives:
                break
            if candidate.id == part.id:
                continue
            same_brand = bool(part.brand) and candidate.brand.lower() == part.brand.lower()
            shared_keyword = bool(keywords & set(candidate.name.lower().split()))
            if (same_brand or shared_keyword) and self._available_for(candidate) > 0:
                matches.append(candidate)
        return matches

    # --- Status ---------------------------------------------------------------

    def stock_status(self, part_id: int) -> StockStatus:
        part = self._part_repo.get_by_id(part_id)
        if part is None:
            return StockStatus(exists=False, part_id=part_id)

        if not part.is_in_stock:
            alert = "out_of_stock"
        elif part.has_low_stock(REORDER_ALERT_LEVEL):
            alert = "warning"
        else:
            alert = "normal"

        return StockStatus(
            exists=True,
            part_id=part.id,
            name=part.name,
            physical_stock=part.stock_quantity,
            reserved_quantity=self.reserved_quantity(part.id),
            available_stock=self._available_for(part),
            unit_cost=part.unit_cost.amount,
            alert_level=alert,
        )
