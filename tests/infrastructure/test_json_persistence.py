"""Tests for the JSON-file-backed repositories."""

import json
from datetime import datetime, timedelta, timezone

from fleetalloc.domain.model.audit import ChangeType, InventoryAuditEntry
from fleetalloc.domain.model.reservation import Reservation
from fleetalloc.domain.model.resource import ResourceKind, ResourceStatus
from fleetalloc.domain.model.value_objects import Reference
from fleetalloc.infrastructure.persistence.json_audit_repository import JsonAuditRepository
from fleetalloc.infrastructure.persistence.json_reservation_store import JsonReservationStore
from fleetalloc.infrastructure.persistence.json_resource_repository import JsonResourceRepository
from fleetalloc.infrastructure.persistence.json_spare_part_repository import JsonSparePartRepository
from fleetalloc.infrastructure.persistence.json_trip_repository import JsonTripRepository


def _write(path, records):
    path.write_text(json.dumps(records), encoding="utf-8")
    return path


class TestJsonResourceRepository:

    def test_vehicles_and_people_are_separate(self, tmp_path):
        path = _write(tmp_path / "resources.json", [
            {"id": 1, "name": "Kenworth", "kind": "vehicle", "unit_number": "101"},
            {"id": 1, "name": "Ana", "kind": "operator"},
            {"id": 2, "name": "Marta", "kind": "operator", "status": "inactive"},
        ])
        repo = JsonResourceRepository(path)

        assert repo.get_vehicle(1).display_name == "#101 - Kenworth"
        assert repo.get_person(1).name == "Ana"
        assert repo.get_vehicle(2) is None
        assert repo.get_person(2).status == ResourceStatus.INACTIVE
        assert [r.id for r in repo.list_by_kind(ResourceKind.OPERATOR)] == [1, 2]


class TestJsonTripRepository:

    def test_filters_by_assignment(self, tmp_path):
        path = _write(tmp_path / "trips.json", [
            {"id": 1, "vehicle_id": 1, "operator_id": 10, "start_date": "2024-01-01",
             "end_date": "2024-01-05", "status": "planned"},
            {"id": 2, "vehicle_id": 2, "operator_id": 10, "start_date": "2024-02-01",
             "end_date": "2024-02-02", "status": "completed"},
        ])
        repo = JsonTripRepository(path)

        assert [t.id for t in repo.list_for_vehicle(1)] == [1]
        assert [t.id for t in repo.list_for_operator(10)] == [1, 2]
        assert repo.get_by_id(3) is None


class TestJsonSparePartRepository:

    def test_locked_update_persists(self, tmp_path):
        path = _write(tmp_path / "parts.json", [
            {"id": 1, "name": "Oil filter", "unit_cost": "9.99", "stock_quantity": 10},
        ])
        repo = JsonSparePartRepository(path)

        with repo.lock_for_update(1) as part:
            part.increase(5)
            repo.save(part)

        assert JsonSparePartRepository(path).get_by_id(1).stock_quantity == 15

    def test_lock_on_missing_part_yields_none(self, tmp_path):
        repo = JsonSparePartRepository(tmp_path / "parts.json")

        with repo.lock_for_update(1) as part:
            assert part is None


class TestJsonAuditRepository:

    def test_append_assigns_ids_and_window_query(self, tmp_path):
        repo = JsonAuditRepository(tmp_path / "audits.json")
        now = datetime(2024, 1, 1, 12, 0, tzinfo=timezone.utc)
        ref = Reference.product_request(3)

        first = repo.append(InventoryAuditEntry(1, ChangeType.INCREASE, 5, 10, 15, ref, created_at=now))
        second = repo.append(InventoryAuditEntry(1, ChangeType.DECREASE, -5, 15, 10, ref, created_at=now))

        assert (first.id, second.id) == (1, 2)
        assert repo.exists_since(1, ref, ChangeType.INCREASE, now - timedelta(minutes=5))
        assert not repo.exists_since(2, ref, ChangeType.INCREASE, now - timedelta(minutes=5))
        assert not repo.exists_since(1, ref, ChangeType.INCREASE, now + timedelta(seconds=1))
        assert [e.change_type for e in repo.list_for_reference(ref)] == [
            ChangeType.INCREASE,
            ChangeType.DECREASE,
        ]


class TestJsonReservationStore:

    def test_reservations_survive_a_new_instance(self, tmp_path):
        path = tmp_path / "reservations.json"
        JsonReservationStore(path).save(Reservation(id="RSV-1", lines={3: 2, 4: 1}))

        store = JsonReservationStore(path)

        assert store.get("RSV-1").lines == {3: 2, 4: 1}
        assert store.reserved_quantity(3) == 2
        store.delete("RSV-1")
        assert store.list_active() == []
