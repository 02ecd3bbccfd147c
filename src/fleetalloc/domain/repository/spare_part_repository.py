"""Abstract repository for SparePart aggregate.

Defined in the domain layer so the domain never depends on
infrastructure. Concrete implementations (JSON, SQL, in-memory)
live in the infrastructure layer.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from contextlib import AbstractContextManager

from fleetalloc.domain.model.spare_part import SparePart


class SparePartRepository(ABC):

    @abstractmethod
    def get_by_id(self, part_id: int) -> SparePart | None:
        """Return a part by its ID, or None if not found."""

    @abstractmethod
    def list_all(self) -> list[SparePart]:
        """Return every part, ordered by ID."""

    @abstractmethod
    def lock_for_update(self, part_id: int) -> AbstractContextManager[SparePart | None]:
        """Hold an exclusive lock on one part row for the duration of the block.

        Yields a freshly loaded part (or None when it does not exist).
        Concurrent callers locking the same part are serialized.
        """

    @abstractmethod
    def save(self, part: SparePart) -> None:
        """Persist a new or updated part."""
