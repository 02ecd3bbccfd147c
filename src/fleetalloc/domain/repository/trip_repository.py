"""Abstract read-only repository for Trip records."""

from __future__ import annotations

from abc import ABC, abstractmethod

from fleetalloc.domain.model.trip import Trip


class TripRepository(ABC):

    @abstractmethod
    def get_by_id(self, trip_id: int) -> Trip | None:
        """Return a trip by its ID, or None if not found."""

    @abstractmethod
    def list_for_vehicle(self, vehicle_id: int) -> list[Trip]:
        """Return every trip assigned to a vehicle, whatever its status."""

    @abstractmethod
    def list_for_operator(self, operator_id: int) -> list[Trip]:
        """Return every trip assigned to an operator, whatever its status."""
