"""Abstract read-only repository for vehicles and roster members.

Fleet and roster records are owned elsewhere; this core never writes them.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from fleetalloc.domain.model.resource import Resource, ResourceKind


class ResourceRepository(ABC):

    @abstractmethod
    def get_vehicle(self, vehicle_id: int) -> Resource | None:
        """Return a vehicle by its ID, or None if not found."""

    @abstractmethod
    def get_person(self, person_id: int) -> Resource | None:
        """Return a roster member (operator or other staff) by ID, or None."""

    @abstractmethod
    def list_by_kind(self, kind: ResourceKind) -> list[Resource]:
        """Return every resource of the given kind, ordered by ID."""
