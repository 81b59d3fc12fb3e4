"""Owner-scoped record store behaviour, run against both engines."""

import threading
import warnings

import pytest

from conftest import crop_draft, item_draft, task_draft
from extensions import db
from models import RecordId
from storage import MemoryStore, UsernameTakenError


def test_user_lookup(store, alice) -> None:
    assert store.get_user(alice.id) == alice
    assert store.get_user_by_username("alice") == alice
    assert store.get_user_by_username("nobody") is None
    assert store.get_user(9999) is None


def test_duplicate_username_is_refused(store, alice) -> None:
    with pytest.raises(UsernameTakenError):
        store.create_user("alice", "other")
    assert store.get_user_by_username("alice").id == alice.id


def test_created_crop_has_id_and_owner(store, alice) -> None:
    crop = store.create_crop(alice.id, crop_draft())

    assert crop.user_id == alice.id
    assert crop.name == "Corn"
    assert crop.quantity == 50
    assert crop.status == "Growing"
    assert store.list_crops(alice.id) == [crop]


def test_owner_cannot_be_spoofed_through_draft(store, alice, bob) -> None:
    crop = store.create_crop(alice.id, crop_draft(user_id=bob.id, id=1))
    assert crop.user_id == alice.id
    assert store.list_crops(bob.id) == []


def test_lists_are_isolated_between_owners(store, alice, bob) -> None:
    store.create_crop(alice.id, crop_draft())
    store.create_inventory_item(alice.id, item_draft())
    store.create_task(alice.id, task_draft())
    bob_crop = store.create_crop(bob.id, crop_draft(name="Wheat"))

    assert store.list_crops(bob.id) == [bob_crop]
    assert store.list_inventory(bob.id) == []
    assert store.list_tasks(bob.id) == []
    assert [c.name for c in store.list_crops(alice.id)] == ["Corn"]


def test_empty_lists_for_new_owner(store, alice) -> None:
    assert store.list_crops(alice.id) == []
    assert store.list_inventory(alice.id) == []
    assert store.list_tasks(alice.id) == []


def test_ids_are_unique_across_kinds(store, alice, bob) -> None:
    ids = [alice.id, bob.id]
    ids.append(store.create_crop(alice.id, crop_draft()).id)
    ids.append(store.create_inventory_item(alice.id, item_draft()).id)
    ids.append(store.create_task(alice.id, task_draft()).id)
    ids.append(store.create_crop(bob.id, crop_draft()).id)

    assert len(set(ids)) == len(ids)
    assert ids == sorted(ids)


def test_lists_keep_insertion_order(store, alice) -> None:
    names = ["Corn", "Wheat", "Barley"]
    for name in names:
        store.create_crop(alice.id, crop_draft(name=name))
    assert [c.name for c in store.list_crops(alice.id)] == names


def test_complete_task(store, alice) -> None:
    task = store.create_task(alice.id, task_draft())
    assert task.completed is False

    done = store.complete_task(alice.id, task.id)

    assert done.id == task.id
    assert done.completed is True
    assert store.list_tasks(alice.id)[0].completed is True


def test_complete_task_is_idempotent(store, alice) -> None:
    task = store.create_task(alice.id, task_draft())
    first = store.complete_task(alice.id, task.id)
    second = store.complete_task(alice.id, task.id)
    assert first.completed is True
    assert second.completed is True
    assert second.id == first.id


def test_complete_foreign_task_looks_missing(store, alice, bob) -> None:
    task = store.create_task(alice.id, task_draft())

    assert store.complete_task(bob.id, task.id) is None
    assert store.list_tasks(alice.id)[0].completed is False


def test_complete_unknown_or_non_task_id(store, alice) -> None:
    crop = store.create_crop(alice.id, crop_draft())
    assert store.complete_task(alice.id, 4242) is None
    # ids are shared across kinds; a crop id is not a task
    assert store.complete_task(alice.id, crop.id) is None


def test_memory_store_concurrent_creates_get_distinct_ids() -> None:
    store = MemoryStore()
    owner = store.create_user("alice", "x")
    created = []

    def worker():
        for _ in range(50):
            created.append(store.create_task(owner.id, task_draft()).id)

    threads = [threading.Thread(target=worker) for _ in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert len(created) == 400
    assert len(set(created)) == 400
    assert len(store.list_tasks(owner.id)) == 400


def test_id_allocation_stamps_aware_time_without_warnings(app, store, alice) -> None:
    if app.config["STORE_BACKEND"] != "sql":
        pytest.skip("id sequence table only exists in the sql engine")

    with warnings.catch_warnings(record=True) as caught:
        warnings.simplefilter("always")
        crop = store.create_crop(alice.id, crop_draft())

    assert not [w for w in caught if "utcnow" in str(w.message)]
    assert db.session.get(RecordId, crop.id).created_at is not None
