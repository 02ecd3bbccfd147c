"""Domain service: Trip Assignment validation.

Combines the vehicle and operator checks for a proposed trip into a single
``ValidationResult``. Nothing is raised for an expected failure; the
caller inspects the result and decides whether to create the trip.
"""

from __future__ import annotations

from fleetalloc.domain.model.resource import Resource, ResourceKind
from fleetalloc.domain.model.results import ValidationResult
from fleetalloc.domain.model.trip import Trip
from fleetalloc.domain.model.value_objects import DATE_FORMAT, DateInterval
from fleetalloc.domain.repository.resource_repository import ResourceRepository
from fleetalloc.domain.service.alternative_finder import AlternativeResourceFinder
from fleetalloc.domain.service.conflict_detector import IntervalConflictDetector

_LABELS = {ResourceKind.VEHICLE: "Vehicle", ResourceKind.OPERATOR: "Operator"}
_PLURALS = {ResourceKind.VEHICLE: "vehicles", ResourceKind.OPERATOR: "operators"}


class TripAssignmentValidator:

    def __init__(
        self,
        resource_repo: ResourceRepository,
        detector: IntervalConflictDetector,
        finder: AlternativeResourceFinder,
    ) -> None:
        self._resource_repo = resource_repo
        self._detector = detector
        self._finder = finder

    def validate(
        self,
        vehicle_id: int,
        operator_id: int,
        interval: DateInterval,
        exclude_trip_id: int | None = None,
    ) -> ValidationResult:
        """Validate a vehicle + operator pair for *interval*.

        Valid only if both resources exist, the operator is an active
        operator, and neither resource has an overlapping occupying trip.
        """
        vehicle_result = self.validate_vehicle(vehicle_id, interval, exclude_trip_id)
        operator_result = self.validate_operator(operator_id, interval, exclude_trip_id)
        return vehicle_result.merge(operator_result)

    def validate_vehicle(
        self,
        vehicle_id: int,
        interval: DateInterval,
        exclude_trip_id: int | None = None,
    ) -> ValidationResult:
        vehicle = self._resource_repo.get_vehicle(vehicle_id)
        if vehicle is None:
            return ValidationResult.failure([f"Vehicle #{vehicle_id} does not exist."])
        return self._check_schedule(vehicle, ResourceKind.VEHICLE, interval, exclude_trip_id)

    def validate_operator(
        self,
        operator_id: int,
        interval: DateInterval,
        exclude_trip_id: int | None = None,
    ) -> ValidationResult:
        operator = self._resource_repo.get_person(operator_id)
        if operator is None:
            return ValidationResult.failure([f"Operator #{operator_id} does not exist."])
        if not operator.is_operator:
            return ValidationResult.failure([f"{operator.name} is not an operator."])
        if not operator.is_active:
            return ValidationResult.failure([
                f"Operator {operator.name} is not active (status: {operator.status.value})."
            ])
        return self._check_schedule(operator, ResourceKind.OPERATOR, interval, exclude_trip_id)

    # --- Internal helpers -----------------------------------------------------

    def _check_schedule(
        self,
        resource: Resource,
        kind: ResourceKind,
        interval: DateInterval,
        exclude_trip_id: int | None,
    ) -> ValidationResult:
        conflicts = self._detector.find_conflicts(resource.id, kind, interval, exclude_trip_id)
        if not conflicts:
            return ValidationResult.success()

        label = _LABELS[kind]
        errors = [
            f"{label} {resource.display_name} is already assigned to "
            f"{trip.route} ({trip.interval})"
            for trip in conflicts
        ]
        warnings = [
            f"Found {len(conflicts)} scheduling conflict(s) between "
            f"{interval.start.strftime(DATE_FORMAT)} and {interval.end.strftime(DATE_FORMAT)}."
        ]
        warnings.extend(self._describe(trip) for trip in conflicts)

        alternatives = self._finder.find_available(kind, interval, exclude_trip_id)
        if alternatives:
            names = ", ".join(r.display_name for r in alternatives)
            suggestion = f"Available {_PLURALS[kind]}: {names}"
        else:
            suggestion = f"No alternative {_PLURALS[kind]} are available for these dates."

        return ValidationResult.failure(errors, warnings, [suggestion])

    @staticmethod
    def _describe(trip: Trip) -> str:
        return f"Conflict: trip #{trip.id} {trip.route} ({trip.interval}) [{trip.status.value}]"
