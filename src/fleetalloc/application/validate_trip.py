"""Application service: Validate Trip Assignment use case.

Parses raw dates from the caller and runs the trip assignment
validator. A malformed interval is reported in the result like any
other validation failure.
"""

from __future__ import annotations

from fleetalloc.domain.exceptions import SchedulingConflictError, ValidationError
from fleetalloc.domain.model.results import ValidationResult
from fleetalloc.domain.model.value_objects import DateInterval
from fleetalloc.domain.service.trip_assignment_validator import TripAssignmentValidator


class ValidateTripHandler:

    def __init__(self, validator: TripAssignmentValidator) -> None:
        self._validator = validator

    def handle(
        self,
        vehicle_id: int,
        operator_id: int,
        start: str,
        end: str,
        exclude_trip_id: int | None = None,
    ) -> ValidationResult:
        try:
            interval = DateInterval.parse(start, end)
        except ValidationError as exc:
            return ValidationResult.failure([str(exc)])
        return self._validator.validate(vehicle_id, operator_id, interval, exclude_trip_id)

    def ensure_valid(
        self,
        vehicle_id: int,
        operator_id: int,
        start: str,
        end: str,
        exclude_trip_id: int | None = None,
    ) -> ValidationResult:
        """Like ``handle`` but raises SchedulingConflictError when rejected."""
        result = self.handle(vehicle_id, operator_id, start, end, exclude_trip_id)
        if not result.is_valid:
            raise SchedulingConflictError("; ".join(result.errors), result)
        return result
