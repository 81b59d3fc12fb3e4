"""Record store over Flask-SQLAlchemy. Needs an application context."""

import logging
from dataclasses import fields
from typing import Generic, TypeVar

from sqlalchemy.exc import IntegrityError

from extensions import db
from models import CropRow, InventoryRow, RecordId, TaskRow, UserRow

from .base import Draft, RecordStore, UsernameTakenError
from .records import Crop, InventoryItem, Task, User

logger = logging.getLogger(__name__)

R = TypeVar("R")


def _next_id(kind: str) -> int:
    marker = RecordId(kind=kind)
    db.session.add(marker)
    db.session.flush()
    return marker.id


def _to_record(row, record_cls: type[R]) -> R:
    return record_cls(**{f.name: getattr(row, f.name) for f in fields(record_cls)})


class OwnedTable(Generic[R]):
    """One table of owned rows, converted to ``record_cls`` on the way out."""

    def __init__(self, model, record_cls: type[R]) -> None:
        self.model = model
        self.record_cls = record_cls

    def insert(self, owner_id: int, draft: Draft) -> R:
        values = {**draft, "id": _next_id(self.model.__tablename__), "user_id": owner_id}
        row = self.model(**values)
        db.session.add(row)
        db.session.commit()
        logger.debug("Created %s id=%s for user %s", self.record_cls.__name__, row.id, owner_id)
        return _to_record(row, self.record_cls)

    def get_owned_row(self, owner_id: int, record_id: int):
        return self.model.query.filter_by(id=record_id, user_id=owner_id).one_or_none()

    def for_owner(self, owner_id: int) -> list[R]:
        rows = self.model.query.filter_by(user_id=owner_id).order_by(self.model.id).all()
        return [_to_record(r, self.record_cls) for r in rows]


class SqlStore(RecordStore):
    def __init__(self) -> None:
        self.crops: OwnedTable[Crop] = OwnedTable(CropRow, Crop)
        self.inventory: OwnedTable[InventoryItem] = OwnedTable(InventoryRow, InventoryItem)
        self.tasks: OwnedTable[Task] = OwnedTable(TaskRow, Task)

    # ---------- users ----------
    def create_user(self, username: str, password: str) -> User:
        if UserRow.query.filter_by(username=username).first() is not None:
            raise UsernameTakenError(username)
        row = UserRow(id=_next_id("users"), username=username, password=password)
        db.session.add(row)
        try:
            db.session.commit()
        except IntegrityError as exc:
            # lost a race with a concurrent registration
            db.session.rollback()
            raise UsernameTakenError(username) from exc
        logger.info("Created user %s (id=%s)", username, row.id)
        return _to_record(row, User)

    def get_user(self, user_id: int) -> User | None:
        row = db.session.get(UserRow, user_id)
        return _to_record(row, User) if row is not None else None

    def get_user_by_username(self, username: str) -> User | None:
        row = UserRow.query.filter_by(username=username).first()
        return _to_record(row, User) if row is not None else None

    # ---------- owned records ----------
    def create_crop(self, owner_id: int, draft: Draft) -> Crop:
        return self.crops.insert(owner_id, draft)

    def list_crops(self, owner_id: int) -> list[Crop]:
        return self.crops.for_owner(owner_id)

    def create_inventory_item(self, owner_id: int, draft: Draft) -> InventoryItem:
        return self.inventory.insert(owner_id, draft)

    def list_inventory(self, owner_id: int) -> list[InventoryItem]:
        return self.inventory.for_owner(owner_id)

    def create_task(self, owner_id: int, draft: Draft) -> Task:
        return self.tasks.insert(owner_id, draft)

    def list_tasks(self, owner_id: int) -> list[Task]:
        return self.tasks.for_owner(owner_id)

    def complete_task(self, owner_id: int, task_id: int) -> Task | None:
        row = self.tasks.get_owned_row(owner_id, task_id)
        if row is None:
            return None
        row.completed = True
        db.session.commit()
        logger.info("Task %s completed by user %s", task_id, owner_id)
        return _to_record(row, Task)
