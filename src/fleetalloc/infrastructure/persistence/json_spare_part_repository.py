"""JSON-file-backed implementation of SparePartRepository.

Row locks are in-process ``threading.Lock`` objects, one per part. They
serialize concurrent writers sharing this repository instance; they do
not protect the file against other processes.
"""

from __future__ import annotations

import threading
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path

from fleetalloc.domain.model.spare_part import SparePart
from fleetalloc.domain.model.value_objects import Money
from fleetalloc.domain.repository.spare_part_repository import SparePartRepository
from fleetalloc.infrastructure.persistence.json_file import JsonFile


class JsonSparePartRepository(SparePartRepository):

    def __init__(self, file_path: Path) -> None:
        self._file = JsonFile(file_path)
        self._registry_lock = threading.Lock()
        self._row_locks: dict[int, threading.Lock] = {}
        self._write_lock = threading.Lock()

    # --- SparePartRepository interface ----------------------------------------

    def get_by_id(self, part_id: int) -> SparePart | None:
        for raw in self._file.load():
            if raw["id"] == part_id:
                return self._to_domain(raw)
        return None

    def list_all(self) -> list[SparePart]:
        return sorted((self._to_domain(raw) for raw in self._file.load()), key=lambda p: p.id)

    @contextmanager
    def lock_for_update(self, part_id: int) -> Iterator[SparePart | None]:
        with self._registry_lock:
            lock = self._row_locks.setdefault(part_id, threading.Lock())
        with lock:
            yield self.get_by_id(part_id)

    def save(self, part: SparePart) -> None:
        with self._write_lock:
            records = self._file.load()
            for i, raw in enumerate(records):
                if raw["id"] == part.id:
                    records[i] = self._to_raw(part)
                    break
            else:
                records.append(self._to_raw(part))
            self._file.persist(records)

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(part: SparePart) -> dict:
        return {
            "id": part.id,
            "name": part.name,
            "part_number": part.part_number,
            "brand": part.brand,
            "unit_cost": str(part.unit_cost.amount),
            "stock_quantity": part.stock_quantity,
        }

    @staticmethod
    def _to_domain(raw: dict) -> SparePart:
        return SparePart(
            id=raw["id"],
            name=raw["name"],
            part_number=raw.get("part_number", ""),
            brand=raw.get("brand", ""),
            unit_cost=Money.of(raw.get("unit_cost", "0")),
            stock_quantity=raw.get("stock_quantity", 0),
        )
