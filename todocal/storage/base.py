"""Storage contract shared by all item backends."""

import uuid
from typing import Protocol

from todocal.models.item import Item, ItemPatch


def new_item_id() -> str:
    """Generate a fresh opaque item id."""
    return uuid.uuid4().hex


class ItemStore(Protocol):
    """Protocol for item stores.

    The store owns durability only. Callers hold their own snapshot from
    load_all() and refresh it after each mutation; writes overwrite
    whatever is stored (last write wins).
    """

    def load_all(self) -> list[Item]:
        """Return every stored item in insertion order."""
        ...

    def insert(self, item: Item) -> Item:
        """Store a new item under a freshly generated id and return it."""
        ...

    def update(self, item_id: str, patch: ItemPatch) -> Item:
        """Apply patch to the item with item_id and return the result.

        Raises:
            ItemNotFoundError: If no item has item_id.
        """
        ...

    def delete(self, item_id: str) -> None:
        """Remove the item with item_id.

        Raises:
            ItemNotFoundError: If no item has item_id.
        """
        ...
