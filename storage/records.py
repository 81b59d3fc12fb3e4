"""Plain record types returned by every store engine."""

from dataclasses import dataclass
from datetime import date

from flask_login import UserMixin

# Values the UI offers. The API stores whatever text it receives.
CROP_STATUSES = ["Growing", "Ready", "Harvested", "Problem"]
INVENTORY_CATEGORIES = ["Seeds", "Fertilizer", "Tools", "Equipment", "Other"]
TASK_PRIORITIES = ["Low", "Medium", "High", "Urgent"]


@dataclass
class User(UserMixin):
    """An account. ``password`` is whatever credential the caller stored."""

    id: int
    username: str
    password: str

    def __repr__(self) -> str:  # pragma: no cover - debug helper
        return f"<User {self.username}>"


@dataclass
class Crop:
    id: int
    user_id: int
    name: str
    quantity: int
    planted_date: date
    expected_harvest_date: date
    status: str


@dataclass
class InventoryItem:
    id: int
    user_id: int
    name: str
    category: str
    quantity: int
    unit: str


@dataclass
class Task:
    id: int
    user_id: int
    title: str
    description: str
    due_date: date
    priority: str
    completed: bool = False
