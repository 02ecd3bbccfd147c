"""Composition root — wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.

Factories are cached so every caller in a process shares one repository
instance per file, and therefore one set of row locks.
"""

from __future__ import annotations

from functools import lru_cache

from fleetalloc.domain.service.alternative_finder import AlternativeResourceFinder
from fleetalloc.domain.service.conflict_detector import IntervalConflictDetector
from fleetalloc.domain.service.inventory_ledger import InventoryAuditLedger
from fleetalloc.domain.service.reservation_manager import ReservationManager
from fleetalloc.domain.service.stock_validator import StockValidator
from fleetalloc.domain.service.trip_assignment_validator import TripAssignmentValidator
from fleetalloc.infrastructure.config import Settings
from fleetalloc.infrastructure.persistence.json_audit_repository import JsonAuditRepository
from fleetalloc.infrastructure.persistence.json_reservation_store import JsonReservationStore
from fleetalloc.infrastructure.persistence.json_resource_repository import (
    JsonResourceRepository,
)
from fleetalloc.infrastructure.persistence.json_spare_part_repository import (
    JsonSparePartRepository,
)
from fleetalloc.infrastructure.persistence.json_trip_repository import JsonTripRepository


@lru_cache(maxsize=None)
def settings() -> Settings:
    return Settings.from_env()


# --- Repositories -------------------------------------------------------------


@lru_cache(maxsize=None)
def resource_repository() -> JsonResourceRepository:
    return JsonResourceRepository(settings().data_dir / "resources.json")


@lru_cache(maxsize=None)
def trip_repository() -> JsonTripRepository:
    return JsonTripRepository(settings().data_dir / "trips.json")


@lru_cache(maxsize=None)
def spare_part_repository() -> JsonSparePartRepository:
    return JsonSparePartRepository(settings().data_dir / "spare_parts.json")


@lru_cache(maxsize=None)
def audit_repository() -> JsonAuditRepository:
    return JsonAuditRepository(settings().data_dir / "inventory_audits.json")


@lru_cache(maxsize=None)
def reservation_store() -> JsonReservationStore:
    return JsonReservationStore(settings().data_dir / "reservations.json")


# --- Services -----------------------------------------------------------------


def trip_assignment_validator() -> TripAssignmentValidator:
    detector = IntervalConflictDetector(trip_repository())
    finder = AlternativeResourceFinder(
        resource_repository(), detector, limit=settings().max_alternatives
    )
    return TripAssignmentValidator(resource_repository(), detector, finder)


def stock_validator() -> StockValidator:
    return StockValidator(
        spare_part_repository(),
        reservation_store(),
        low_stock_threshold=settings().low_stock_threshold,
        max_alternatives=settings().max_alternative_parts,
    )


def inventory_ledger() -> InventoryAuditLedger:
    return InventoryAuditLedger(
        spare_part_repository(),
        audit_repository(),
        dedup_window=settings().dedup_window,
    )


def reservation_manager() -> ReservationManager:
    return ReservationManager(
        spare_part_repository(),
        reservation_store(),
        stock_validator(),
        inventory_ledger(),
    )
