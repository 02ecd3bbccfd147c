"""Trip records as seen by the scheduler.

A trip ties one vehicle and one operator to a date interval. Only trips
that are still planned or running hold on to their resources.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from enum import Enum

from fleetalloc.domain.model.value_objects import DateInterval


class TripStatus(Enum):
    PLANNED = "planned"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


OCCUPYING_STATUSES = frozenset({TripStatus.PLANNED, TripStatus.IN_PROGRESS})


@dataclass(frozen=True)
class Trip:
    id: int
    vehicle_id: int
    operator_id: int
    start_date: date
    end_date: date
    status: TripStatus = TripStatus.PLANNED
    origin: str = ""
    destination: str = ""

    @property
    def interval(self) -> DateInterval:
        return DateInterval(self.start_date, self.end_date)

    @property
    def occupies_resources(self) -> bool:
        return self.status in OCCUPYING_STATUSES

    @property
    def route(self) -> str:
        return f"{self.origin} → {self.destination}"
