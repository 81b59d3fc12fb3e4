"""Record store interface shared by the memory and SQL engines.

Every crop, inventory item and task belongs to exactly one user. Reads and
the task mutation are always scoped to an owner id; a record owned by someone
else behaves exactly like a record that does not exist.
"""

from abc import ABC, abstractmethod
from typing import Any, Mapping

from .records import Crop, InventoryItem, Task, User

Draft = Mapping[str, Any]


class FarmError(Exception):
    """Base class for record store errors."""


class UsernameTakenError(FarmError):
    """Raised when a user is created with a username that already exists."""

    def __init__(self, username: str) -> None:
        super().__init__(f"Username already exists: {username}")
        self.username = username


class RecordStore(ABC):
    """Owner-scoped CRUD over users, crops, inventory items and tasks.

    Identifiers come from one counter shared by all record kinds, so an id is
    never reused, not even across kinds.
    """

    # ---- users ----
    @abstractmethod
    def create_user(self, username: str, password: str) -> User:
        """Store a new user; raises ``UsernameTakenError`` on a duplicate."""

    @abstractmethod
    def get_user(self, user_id: int) -> User | None:
        ...

    @abstractmethod
    def get_user_by_username(self, username: str) -> User | None:
        ...

    # ---- crops ----
    @abstractmethod
    def create_crop(self, owner_id: int, draft: Draft) -> Crop:
        ...

    @abstractmethod
    def list_crops(self, owner_id: int) -> list[Crop]:
        ...

    # ---- inventory ----
    @abstractmethod
    def create_inventory_item(self, owner_id: int, draft: Draft) -> InventoryItem:
        ...

    @abstractmethod
    def list_inventory(self, owner_id: int) -> list[InventoryItem]:
        ...

    # ---- tasks ----
    @abstractmethod
    def create_task(self, owner_id: int, draft: Draft) -> Task:
        ...

    @abstractmethod
    def list_tasks(self, owner_id: int) -> list[Task]:
        ...

    @abstractmethod
    def complete_task(self, owner_id: int, task_id: int) -> Task | None:
        """Mark the owner's task completed.

        Returns ``None`` when the task is missing or belongs to another user.
        Completing an already completed task returns it unchanged.
        """
