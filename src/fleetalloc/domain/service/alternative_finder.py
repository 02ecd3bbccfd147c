"""Domain service: Alternative Resource lookup.

Scans the vehicle or operator pool for members that are free during an
interval. Used only to fill in suggestions; nothing is reassigned
automatically.

This checks every resource against its trips one by one, which is fine
for a small fleet. A large fleet would want an interval index instead.
"""

from __future__ import annotations

from fleetalloc.domain.model.resource import Resource, ResourceKind, ResourceStatus
from fleetalloc.domain.model.value_objects import DateInterval
from fleetalloc.domain.repository.resource_repository import ResourceRepository
from fleetalloc.domain.service.conflict_detector import IntervalConflictDetector

DEFAULT_LIMIT = 5


class AlternativeResourceFinder:

    def __init__(
        self,
        resource_repo: ResourceRepository,
        detector: IntervalConflictDetector,
        limit: int = DEFAULT_LIMIT,
    ) -> None:
        self._resource_repo = resource_repo
        self._detector = detector
        self._limit = limit

    def find_available(
        self,
        kind: ResourceKind,
        interval: DateInterval,
        exclude_trip_id: int | None = None,
        limit: int | None = None,
    ) -> list[Resource]:
        limit = self._limit if limit is None else limit
        candidates = sorted(self._pool(kind), key=lambda r: r.id)

        available: list[Resource] = []
        for resource in candidates:
            if len(available) >= limit:
                break
            if not self._detector.has_conflicts(resource.id, kind, interval, exclude_trip_id):
                available.append(resource)
        return available

    def _pool(self, kind: ResourceKind) -> list[Resource]:
        resources = self._resource_repo.list_by_kind(kind)
        if kind == ResourceKind.OPERATOR:
            return [r for r in resources if r.is_active]
        return [r for r in resources if r.status != ResourceStatus.OUT_OF_SERVICE]
