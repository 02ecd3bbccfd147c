"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so the CLI layer can catch them uniformly and display user-friendly messages.

Validators report expected failures as data (``ValidationResult``); these
exceptions are raised only where an operation must stop outright.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from fleetalloc.domain.model.results import ValidationResult


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """Input was malformed (non-positive quantity, interval ending before it starts)."""


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""


class _ResultCarryingError(DomainException):

    def __init__(self, message: str, result: ValidationResult | None = None) -> None:
        super().__init__(message)
        self.result = result


class SchedulingConflictError(_ResultCarryingError):
    """A requested interval overlaps a trip that already occupies the resource."""


class InsufficientStockError(_ResultCarryingError):
    """A requested quantity exceeds current availability."""


class NegativeStockError(DomainException):
    """A decrease would drive physical stock below zero."""


class DuplicateOperationError(DomainException):
    """A duplicate-suppression guard fired.

    The ledger itself reports suppressed duplicates by returning ``None``;
    this class exists for callers that prefer to surface it explicitly.
    """
