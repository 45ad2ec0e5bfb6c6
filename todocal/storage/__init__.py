"""Storage layer for calendar items."""

from todocal.config import TodoCalConfig
from todocal.exceptions import UnsupportedBackendError
from todocal.storage.base import ItemStore, new_item_id
from todocal.storage.json_store import JSONItemStore
from todocal.storage.memory_store import MemoryItemStore


def create_store(config: TodoCalConfig) -> ItemStore:
    """Create the item store selected by config.storage_backend."""
    backend = config.storage_backend.lower()
    if backend == "json":
        return JSONItemStore(config.store_path)
    elif backend == "memory":
        return MemoryItemStore()
    else:
        raise UnsupportedBackendError(
            f"Unsupported storage backend: {config.storage_backend}"
        )


__all__ = [
    "ItemStore",
    "JSONItemStore",
    "MemoryItemStore",
    "create_store",
    "new_item_id",
]
