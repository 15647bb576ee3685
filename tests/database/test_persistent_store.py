from __future__ import annotations

import json
from datetime import datetime, timezone

import pytest

from hr_portal.accounts.model import Account
from hr_portal.core.constants import SEED_ADMIN_EMAIL, STORAGE_KEY
from hr_portal.core.enums import RequestStatus, Role
from hr_portal.core.exceptions import StoreError
from hr_portal.database.connection import SnapshotConnection
from hr_portal.database.persistent_store import PersistentStore
from hr_portal.database.snapshot import Database
from hr_portal.database.snapshot_base import snapshot_write
from hr_portal.database.storage import FileKeyValueStore, InMemoryKeyValueStore
from hr_portal.departments.model import Department
from hr_portal.employees.model import Employee
from hr_portal.requests.model import RequestItem, SupplyRequest


def _assert_seeded(db: Database):
    assert len(db.accounts) == 1
    admin = db.accounts[0]
    assert admin.email == SEED_ADMIN_EMAIL
    assert admin.role == Role.ADMIN
    assert admin.verified is True
    assert [d.name for d in db.departments] == ["Engineering", "HR"]
    assert db.employees == []
    assert db.requests == []


def test_load_seeds_and_persists_when_slot_is_empty():
    slots = InMemoryKeyValueStore()
    db = PersistentStore(slots).load()

    _assert_seeded(db)
    assert slots.get(STORAGE_KEY) is not None


@pytest.mark.parametrize(
    "raw",
    [
        "{not json",
        "[]",
        json.dumps({"accounts": []}),
        json.dumps({"accounts": [{"id": "x"}], "departments": [], "employees": [], "requests": []}),
        "[" * 100000 + "]" * 100000,
    ],
)
def test_load_seeds_when_snapshot_is_malformed(raw):
    slots = InMemoryKeyValueStore()
    slots.set(STORAGE_KEY, raw)

    db = PersistentStore(slots).load()

    _assert_seeded(db)
    assert json.loads(slots.get(STORAGE_KEY))["accounts"][0]["email"] == SEED_ADMIN_EMAIL


def _populated_database() -> Database:
    accounts = [
        Account(f"a{i}", f"F{i}", f"L{i}", f"user{i}@x.com", f"hash{i}", Role.USER if i else Role.ADMIN, bool(i % 2))
        for i in range(3)
    ]
    departments = [Department("d1", "Engineering", "Software team"), Department("d2", "Ops")]
    employees = [
        Employee("e1", "EMP-001", "user1@x.com", "Developer", "d1", "2024-01-15"),
        Employee("e2", "EMP-002", "user2@x.com", "Analyst", "gone", ""),
    ]
    requests = [
        SupplyRequest(
            request_id=f"r{i}",
            request_type="Equipment",
            items=(RequestItem("Laptop", 1), RequestItem("Mouse", i + 2)),
            status=RequestStatus.PENDING,
            created_at=datetime(2025, 3, i + 1, 9, 30, tzinfo=timezone.utc),
            employee_email="user1@x.com",
        )
        for i in range(4)
    ]
    return Database(accounts=accounts, departments=departments, employees=employees, requests=requests)


def test_save_then_load_round_trips_every_collection():
    slots = InMemoryKeyValueStore()
    original = _populated_database()

    assert PersistentStore(slots).save(original) is None
    first = PersistentStore(slots).load()
    assert PersistentStore(slots).save(first) is None
    second = PersistentStore(slots).load()

    assert first == original
    assert second == original


def test_load_accepts_javascript_style_timestamps():
    slots = InMemoryKeyValueStore()
    data = _populated_database().to_dict()
    data["requests"][0]["date"] = "2025-03-01T09:30:00.000Z"
    slots.set(STORAGE_KEY, json.dumps(data))

    db = PersistentStore(slots).load()

    assert db.requests[0].created_at == datetime(2025, 3, 1, 9, 30, tzinfo=timezone.utc)


def test_save_failure_is_returned_not_raised():
    slots = InMemoryKeyValueStore(quota_bytes=10)

    error = PersistentStore(slots).save(_populated_database())

    assert isinstance(error, StoreError)
    assert slots.get(STORAGE_KEY) is None


def test_file_store_roundtrip_and_remove(tmp_path):
    store = FileKeyValueStore(tmp_path / "profile")
    assert store.get("auth_token") is None

    store.set("auth_token", "a@x.com")
    assert FileKeyValueStore(tmp_path / "profile").get("auth_token") == "a@x.com"

    store.remove("auth_token")
    store.remove("auth_token")
    assert store.get("auth_token") is None


def test_file_store_rejects_path_like_keys(tmp_path):
    store = FileKeyValueStore(tmp_path)
    with pytest.raises(ValueError):
        store.set("../escape", "x")


def test_snapshot_write_saves_once_and_rolls_back_on_error():
    slots = InMemoryKeyValueStore()
    store = PersistentStore(slots)
    store.save(_populated_database())
    conn = SnapshotConnection(store)

    with snapshot_write(conn) as db:
        db.departments.append(Department("d3", "Legal"))
    assert [d.name for d in PersistentStore(slots).load().departments][-1] == "Legal"

    with pytest.raises(RuntimeError):
        with snapshot_write(conn) as db:
            db.departments.clear()
            raise RuntimeError("boom")

    assert len(conn.database.departments) == 3
    assert len(PersistentStore(slots).load().departments) == 3


def test_connection_records_failed_commit_until_taken():
    slots = InMemoryKeyValueStore()
    conn = SnapshotConnection(PersistentStore(slots))
    conn.database

    slots._quota_bytes = 1
    with snapshot_write(conn) as db:
        db.departments.append(Department("d9", "Temp"))

    # in-memory state keeps the change even though the write failed
    assert conn.database.departments[-1].name == "Temp"
    assert isinstance(conn.take_error(), StoreError)
    assert conn.take_error() is None


def test_load_seeds_when_slot_file_is_not_utf8(tmp_path):
    (tmp_path / f"{STORAGE_KEY}.slot").write_bytes(b'{"accounts": [\xff\xfe]}')
    slots = FileKeyValueStore(tmp_path)

    db = PersistentStore(slots).load()

    _assert_seeded(db)
    assert json.loads(slots.get(STORAGE_KEY))["accounts"][0]["email"] == SEED_ADMIN_EMAIL


def test_load_rejects_request_without_items():
    slots = InMemoryKeyValueStore()
    data = _populated_database().to_dict()
    data["requests"][0]["items"] = []
    slots.set(STORAGE_KEY, json.dumps(data))

    db = PersistentStore(slots).load()

    _assert_seeded(db)


def test_failed_seed_write_is_recorded_on_connection():
    conn = SnapshotConnection(PersistentStore(InMemoryKeyValueStore(quota_bytes=1)))

    _assert_seeded(conn.database)
    assert isinstance(conn.take_error(), StoreError)
    assert conn.take_error() is None
