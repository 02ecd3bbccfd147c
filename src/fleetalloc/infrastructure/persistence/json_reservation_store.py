"""JSON-file-backed implementation of ReservationStore.

Keeping holds on disk means they survive a restart of the CLI between
``reserve`` and ``commit``.
"""

from __future__ import annotations

from datetime import datetime
from pathlib import Path

from fleetalloc.domain.model.reservation import Reservation
from fleetalloc.domain.repository.reservation_store import ReservationStore
from fleetalloc.infrastructure.persistence.json_file import JsonFile


class JsonReservationStore(ReservationStore):

    def __init__(self, file_path: Path) -> None:
        self._file = JsonFile(file_path)

    # --- ReservationStore interface -------------------------------------------

    def get(self, reservation_id: str) -> Reservation | None:
        for raw in self._file.load():
            if raw["id"] == reservation_id:
                return self._to_domain(raw)
        return None

    def list_active(self) -> list[Reservation]:
        return [self._to_domain(raw) for raw in self._file.load()]

    def save(self, reservation: Reservation) -> None:
        records = [r for r in self._file.load() if r["id"] != reservation.id]
        records.append(self._to_raw(reservation))
        self._file.persist(records)

    def delete(self, reservation_id: str) -> None:
        records = self._file.load()
        remaining = [r for r in records if r["id"] != reservation_id]
        if len(remaining) != len(records):
            self._file.persist(remaining)

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(reservation: Reservation) -> dict:
        return {
            "id": reservation.id,
            # JSON object keys are strings
            "lines": {str(part_id): qty for part_id, qty in reservation.lines.items()},
            "created_at": reservation.created_at.isoformat(),
        }

    @staticmethod
    def _to_domain(raw: dict) -> Reservation:
        return Reservation(
            id=raw["id"],
            lines={int(part_id): qty for part_id, qty in raw.get("lines", {}).items()},
            created_at=datetime.fromisoformat(raw["created_at"]),
        )
