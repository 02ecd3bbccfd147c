"""Outcome value types returned by validators and the reservation manager.

Expected domain failures (unknown part, not enough stock, scheduling
conflict) come back as data in these objects instead of being raised, so
callers can collect several failures into one message.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from decimal import Decimal


@dataclass(frozen=True)
class ValidationResult:
    is_valid: bool
    errors: tuple[str, ...] = ()
    warnings: tuple[str, ...] = ()
    suggestions: tuple[str, ...] = ()

    # --- Factories ------------------------------------------------------------

    @staticmethod
    def success(warnings: list[str] | None = None) -> ValidationResult:
        return ValidationResult(True, warnings=tuple(warnings or ()))

    @staticmethod
    def failure(
        errors: list[str],
        warnings: list[str] | None = None,
        suggestions: list[str] | None = None,
    ) -> ValidationResult:
        return ValidationResult(
            False,
            errors=tuple(errors),
            warnings=tuple(warnings or ()),
            suggestions=tuple(suggestions or ()),
        )

    # --- Derivation -----------------------------------------------------------

    def with_error(self, error: str) -> ValidationResult:
        return replace(self, is_valid=False, errors=self.errors + (error,))

    def with_warning(self, warning: str) -> ValidationResult:
        return replace(self, warnings=self.warnings + (warning,))

    def with_suggestion(self, suggestion: str) -> ValidationResult:
        return replace(self, suggestions=self.suggestions + (suggestion,))

    def merge(self, other: ValidationResult) -> ValidationResult:
        """Combine two results; valid only if both are valid."""
        return ValidationResult(
            self.is_valid and other.is_valid,
            errors=self.errors + other.errors,
            warnings=self.warnings + other.warnings,
            suggestions=self.suggestions + other.suggestions,
        )

    # --- Queries --------------------------------------------------------------

    @property
    def has_errors(self) -> bool:
        return bool(self.errors)

    @property
    def has_warnings(self) -> bool:
        return bool(self.warnings)

    @property
    def has_suggestions(self) -> bool:
        return bool(self.suggestions)

    def formatted_message(self) -> str:
        """Errors, then warnings, then suggestions, as blank-line separated blocks."""
        blocks = []
        for prefix, lines in (("✖", self.errors), ("⚠", self.warnings), ("→", self.suggestions)):
            if lines:
                blocks.append("\n".join(f"{prefix} {line}" for line in lines))
        return "\n\n".join(blocks)

    def to_dict(self) -> dict:
        return {
            "is_valid": self.is_valid,
            "errors": list(self.errors),
            "warnings": list(self.warnings),
            "suggestions": list(self.suggestions),
        }


@dataclass(frozen=True)
class ReservedItem:
    part_id: int
    name: str
    quantity: int
    unit_cost: Decimal

    @property
    def total_cost(self) -> Decimal:
        return self.unit_cost * self.quantity


@dataclass(frozen=True)
class FailedItem:
    part_id: int
    name: str
    requested: int
    available: int
    reason: str


@dataclass(frozen=True)
class ReservationResult:
    """Outcome of one ``reserve`` call.

    ``success`` is true only when every line was held. A call that held
    some lines and failed others is a partial success: ``success`` is false
    but ``reservation_id`` still identifies the holds that were made.
    """

    success: bool
    reserved_items: tuple[ReservedItem, ...] = ()
    failed_items: tuple[FailedItem, ...] = ()
    reservation_id: str = ""

    @staticmethod
    def from_lines(
        reserved: list[ReservedItem],
        failed: list[FailedItem],
        reservation_id: str,
        had_holds: bool = False,
    ) -> ReservationResult:
        """Classify a reserve call.

        The id is blanked only when nothing is held under it, neither by
        this call nor by an earlier one (*had_holds*).
        """
        if not failed:
            return ReservationResult(True, tuple(reserved), (), reservation_id)
        if not reserved:
            return ReservationResult(False, (), tuple(failed), reservation_id if had_holds else "")
        return ReservationResult(False, tuple(reserved), tuple(failed), reservation_id)

    @property
    def is_full_success(self) -> bool:
        return self.success and not self.failed_items

    @property
    def is_partial_success(self) -> bool:
        return bool(self.reserved_items) and bool(self.failed_items)

    @property
    def has_failures(self) -> bool:
        return bool(self.failed_items)

    @property
    def total_cost(self) -> Decimal:
        return sum((item.total_cost for item in self.reserved_items), Decimal("0"))

    def formatted_message(self) -> str:
        if self.is_full_success:
            return "All items were reserved successfully."

        blocks = []
        if self.reserved_items:
            blocks.append("Reserved items: " + ", ".join(
                f"{item.name} (x{item.quantity})" for item in self.reserved_items
            ))
        if self.failed_items:
            blocks.append("Unavailable items: " + ", ".join(
                f"{item.name} (requested: {item.requested}, available: {item.available})"
                for item in self.failed_items
            ))
        return "\n\n".join(blocks)

    def to_dict(self) -> dict:
        return {
            "success": self.success,
            "reserved_items": [
                {
                    "part_id": item.part_id,
                    "name": item.name,
                    "quantity": item.quantity,
                    "unit_cost": str(item.unit_cost),
                    "total_cost": str(item.total_cost),
                }
                for item in self.reserved_items
            ],
            "failed_items": [
                {
                    "part_id": item.part_id,
                    "name": item.name,
                    "requested": item.requested,
                    "available": item.available,
                    "reason": item.reason,
                }
                for item in self.failed_items
            ],
            "reservation_id": self.reservation_id,
        }
