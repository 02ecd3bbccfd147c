"""JSON-file-backed implementation of TripRepository (read only)."""

from __future__ import annotations

from datetime import date
from pathlib import Path

from fleetalloc.domain.model.trip import Trip, TripStatus
from fleetalloc.domain.repository.trip_repository import TripRepository
from fleetalloc.infrastructure.persistence.json_file import JsonFile


class JsonTripRepository(TripRepository):

    def __init__(self, file_path: Path) -> None:
        self._file = JsonFile(file_path)

    # --- TripRepository interface ---------------------------------------------

    def get_by_id(self, trip_id: int) -> Trip | None:
        for raw in self._file.load():
            if raw["id"] == trip_id:
                return self._to_domain(raw)
        return None

    def list_for_vehicle(self, vehicle_id: int) -> list[Trip]:
        return [self._to_domain(raw) for raw in self._file.load() if raw["vehicle_id"] == vehicle_id]

    def list_for_operator(self, operator_id: int) -> list[Trip]:
        return [self._to_domain(raw) for raw in self._file.load() if raw["operator_id"] == operator_id]

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_domain(raw: dict) -> Trip:
        return Trip(
            id=raw["id"],
            vehicle_id=raw["vehicle_id"],
            operator_id=raw["operator_id"],
            start_date=date.fromisoformat(raw["start_date"]),
            end_date=date.fromisoformat(raw["end_date"]),
            status=TripStatus(raw.get("status", "planned")),
            origin=raw.get("origin", ""),
            destination=raw.get("destination", ""),
        )
