"""In-process item store."""

import logging

from todocal.exceptions import ItemNotFoundError
from todocal.models.item import Item, ItemPatch
from todocal.storage.base import new_item_id

logger = logging.getLogger(__name__)


class MemoryItemStore:
    """Item store kept in a list; nothing survives the process."""

    def __init__(self, items: list[Item] | None = None):
        self._items: list[Item] = [i.model_copy() for i in (items or [])]

    def load_all(self) -> list[Item]:
        return [i.model_copy() for i in self._items]

    def insert(self, item: Item) -> Item:
        stored = item.model_copy(update={"id": new_item_id()})
        self._items.append(stored)
        logger.debug(f"Inserted item {stored.id}")
        return stored.model_copy()

    def update(self, item_id: str, patch: ItemPatch) -> Item:
        index = self._index(item_id)
        updated = patch.apply(self._items[index])
        self._items[index] = updated
        logger.debug(f"Updated item {item_id}: {sorted(patch.changes())}")
        return updated.model_copy()

    def delete(self, item_id: str) -> None:
        del self._items[self._index(item_id)]
        logger.debug(f"Deleted item {item_id}")

    def _index(self, item_id: str) -> int:
        for index, item in enumerate(self._items):
            if item.id == item_id:
                return index
        raise ItemNotFoundError(f"Item '{item_id}' not found")
