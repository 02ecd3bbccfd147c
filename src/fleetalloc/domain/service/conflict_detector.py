"""Domain service: Interval Conflict Detection.

Finds the trips that already occupy a vehicle or operator during a
candidate date interval. Any single conflict is enough to reject an
assignment, so results are not ranked.
"""

from __future__ import annotations

from fleetalloc.domain.model.resource import ResourceKind
from fleetalloc.domain.model.trip import Trip
from fleetalloc.domain.model.value_objects import DateInterval
from fleetalloc.domain.repository.trip_repository import TripRepository


class IntervalConflictDetector:

    def __init__(self, trip_repo: TripRepository) -> None:
        self._trip_repo = trip_repo

    def find_conflicts(
        self,
        resource_id: int,
        kind: ResourceKind,
        interval: DateInterval,
        exclude_trip_id: int | None = None,
    ) -> list[Trip]:
        """Return occupying trips on this resource whose interval overlaps *interval*.

        ``exclude_trip_id`` skips the trip being edited in place so it does
        not conflict with itself.
        """
        if kind == ResourceKind.VEHICLE:
            trips = self._trip_repo.list_for_vehicle(resource_id)
        elif kind == ResourceKind.OPERATOR:
            trips = self._trip_repo.list_for_operator(resource_id)
        else:
            return []

        conflicts = [
            trip
            for trip in trips
            if trip.occupies_resources
            and trip.id != exclude_trip_id
            and trip.interval.overlaps(interval)
        ]
        return sorted(conflicts, key=lambda t: (t.start_date, t.id))

    def has_conflicts(
        self,
        resource_id: int,
        kind: ResourceKind,
        interval: DateInterval,
        exclude_trip_id: int | None = None,
    ) -> bool:
        return bool(self.find_conflicts(resource_id, kind, interval, exclude_trip_id))
