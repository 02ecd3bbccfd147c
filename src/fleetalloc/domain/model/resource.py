"""Temporal resources: vehicles and the people who drive them.

These records are owned by external fleet and roster management.
This core only reads their kind and status.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class ResourceKind(Enum):
    VEHICLE = "vehicle"
    OPERATOR = "operator"
    STAFF = "staff"  # roster member who cannot drive trips


class ResourceStatus(Enum):
    ACTIVE = "active"
    INACTIVE = "inactive"
    MAINTENANCE = "maintenance"
    OUT_OF_SERVICE = "out_of_service"


@dataclass(frozen=True)
class Resource:
    id: int
    name: str
    kind: ResourceKind
    status: ResourceStatus = ResourceStatus.ACTIVE
    unit_number: str | None = None

    @property
    def display_name(self) -> str:
        if self.unit_number:
            return f"#{self.unit_number} - {self.name}"
        return self.name

    @property
    def is_active(self) -> bool:
        return self.status == ResourceStatus.ACTIVE

    @property
    def is_operator(self) -> bool:
        return self.kind == ResourceKind.OPERATOR
