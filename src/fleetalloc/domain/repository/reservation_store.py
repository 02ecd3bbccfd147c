"""Abstract store for active reservations.

Injected into the reservation manager so holds are not kept in
process-global state.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from fleetalloc.domain.model.reservation import Reservation


class ReservationStore(ABC):

    @abstractmethod
    def get(self, reservation_id: str) -> Reservation | None:
        """Return an active reservation, or None."""

    @abstractmethod
    def list_active(self) -> list[Reservation]:
        """Return every active reservation."""

    @abstractmethod
    def save(self, reservation: Reservation) -> None:
        """Persist a new or updated reservation."""

    @abstractmethod
    def delete(self, reservation_id: str) -> None:
        """Discard a reservation. Unknown IDs are ignored."""

    def reserved_quantity(self, part_id: int) -> int:
        """Total quantity of a part held across all active reservations."""
        return sum(r.held_quantity(part_id) for r in self.list_active())
