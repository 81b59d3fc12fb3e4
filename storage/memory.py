"""Volatile in-process record store. Everything is lost on restart."""

import itertools
import logging
import threading
from dataclasses import replace
from typing import Callable, Generic, TypeVar

from .base import Draft, RecordStore, UsernameTakenError
from .records import Crop, InventoryItem, Task, User

logger = logging.getLogger(__name__)

R = TypeVar("R")


class OwnedCollection(Generic[R]):
    """Records of one kind keyed by id, each carrying a ``user_id`` owner."""

    def __init__(self, factory: Callable[..., R]) -> None:
        self._factory = factory
        self._rows: dict[int, R] = {}

    def insert(self, record_id: int, owner_id: int, draft: Draft) -> R:
        record = self._factory(**{**draft, "id": record_id, "user_id": owner_id})
        self._rows[record_id] = record
        return record

    def get_owned(self, owner_id: int, record_id: int) -> R | None:
        record = self._rows.get(record_id)
        if record is None or record.user_id != owner_id:
            return None
        return record

    def put(self, record: R) -> None:
        self._rows[record.id] = record

    def for_owner(self, owner_id: int) -> list[R]:
        return [r for r in self._rows.values() if r.user_id == owner_id]


class MemoryStore(RecordStore):
    """Dictionaries plus one shared id counter, all behind a single lock."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._ids = itertools.count(1)
        self._users: dict[int, User] = {}
        self.crops: OwnedCollection[Crop] = OwnedCollection(Crop)
        self.inventory: OwnedCollection[InventoryItem] = OwnedCollection(InventoryItem)
        self.tasks: OwnedCollection[Task] = OwnedCollection(Task)

    # ---------- users ----------
    def create_user(self, username: str, password: str) -> User:
        with self._lock:
            if self._find_user(username) is not None:
                raise UsernameTakenError(username)
            user = User(id=next(self._ids), username=username, password=password)
            self._users[user.id] = user
        logger.info("Created user %s (id=%s)", username, user.id)
        return user

    def get_user(self, user_id: int) -> User | None:
        with self._lock:
            return self._users.get(user_id)

    def get_user_by_username(self, username: str) -> User | None:
        with self._lock:
            return self._find_user(username)

    def _find_user(self, username: str) -> User | None:
        return next((u for u in self._users.values() if u.username == username), None)

    # ---------- owned records ----------
    def _insert(self, collection: OwnedCollection[R], owner_id: int, draft: Draft) -> R:
        with self._lock:
            record = collection.insert(next(self._ids), owner_id, draft)
        logger.debug("Created %s id=%s for user %s", type(record).__name__, record.id, owner_id)
        return record

    def _list(self, collection: OwnedCollection[R], owner_id: int) -> list[R]:
        with self._lock:
            return collection.for_owner(owner_id)

    def create_crop(self, owner_id: int, draft: Draft) -> Crop:
        return self._insert(self.crops, owner_id, draft)

    def list_crops(self, owner_id: int) -> list[Crop]:
        return self._list(self.crops, owner_id)

    def create_inventory_item(self, owner_id: int, draft: Draft) -> InventoryItem:
        return self._insert(self.inventory, owner_id, draft)

    def list_inventory(self, owner_id: int) -> list[InventoryItem]:
        return self._list(self.inventory, owner_id)

    def create_task(self, owner_id: int, draft: Draft) -> Task:
        return self._insert(self.tasks, owner_id, draft)

    def list_tasks(self, owner_id: int) -> list[Task]:
        return self._list(self.tasks, owner_id)

    def complete_task(self, owner_id: int, task_id: int) -> Task | None:
        with self._lock:
            task = self.tasks.get_owned(owner_id, task_id)
            if task is None:
                return None
            # stored records are replaced, never mutated in place
            task = replace(task, completed=True)
            self.tasks.put(task)
        logger.info("Task %s completed by user %s", task_id, owner_id)
        return task
