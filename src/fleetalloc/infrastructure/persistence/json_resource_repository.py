"""JSON-file-backed implementation of ResourceRepository (read only)."""

from __future__ import annotations

from pathlib import Path

from fleetalloc.domain.model.resource import Resource, ResourceKind, ResourceStatus
from fleetalloc.domain.repository.resource_repository import ResourceRepository
from fleetalloc.infrastructure.persistence.json_file import JsonFile

_PEOPLE = (ResourceKind.OPERATOR, ResourceKind.STAFF)


class JsonResourceRepository(ResourceRepository):

    def __init__(self, file_path: Path) -> None:
        self._file = JsonFile(file_path)

    # --- ResourceRepository interface -----------------------------------------

    def get_vehicle(self, vehicle_id: int) -> Resource | None:
        return self._find(vehicle_id, (ResourceKind.VEHICLE,))

    def get_person(self, person_id: int) -> Resource | None:
        return self._find(person_id, _PEOPLE)

    def list_by_kind(self, kind: ResourceKind) -> list[Resource]:
        resources = [self._to_domain(raw) for raw in self._file.load()]
        return sorted((r for r in resources if r.kind == kind), key=lambda r: r.id)

    # --- Serialization --------------------------------------------------------

    def _find(self, resource_id: int, kinds: tuple[ResourceKind, ...]) -> Resource | None:
        for raw in self._file.load():
            resource = self._to_domain(raw)
            if resource.id == resource_id and resource.kind in kinds:
                return resource
        return None

    @staticmethod
    def _to_domain(raw: dict) -> Resource:
        return Resource(
            id=raw["id"],
            name=raw["name"],
            kind=ResourceKind(raw["kind"]),
            status=ResourceStatus(raw.get("status", "active")),
            unit_number=raw.get("unit_number"),
        )
