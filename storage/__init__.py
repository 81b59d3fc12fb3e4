"""Record store package: interface, record types and the two engines."""

from .base import FarmError, RecordStore, UsernameTakenError
from .memory import MemoryStore
from .records import Crop, InventoryItem, Task, User

BACKENDS = ("memory", "sql")


def build_store(backend: str) -> RecordStore:
    """Create the store engine named by the ``STORE_BACKEND`` setting."""
    if backend == "memory":
        return MemoryStore()
    if backend == "sql":
        from .sql import SqlStore

        return SqlStore()
    raise ValueError(f"Unknown STORE_BACKEND {backend!r}, expected one of {BACKENDS}")


__all__ = [
    "BACKENDS",
    "Crop",
    "FarmError",
    "InventoryItem",
    "MemoryStore",
    "RecordStore",
    "Task",
    "User",
    "UsernameTakenError",
    "build_store",
]
