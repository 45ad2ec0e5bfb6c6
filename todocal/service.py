"""Task list operations mediating between the calendar view and storage."""

import logging
from datetime import date

from pydantic import ValidationError as PydanticValidationError

from todocal.exceptions import ItemNotFoundError, ValidationError
from todocal.grid import MonthGrid
from todocal.models.item import Category, Item, ItemPatch
from todocal.ranges import ItemQuery
from todocal.storage.base import ItemStore

logger = logging.getLogger(__name__)


class TodoService:
    """Add, toggle, edit and delete items, and read them back per day.

    Every read goes through store.load_all(), so results always reflect the
    latest write.
    """

    def __init__(self, store: ItemStore):
        """
        Initialize service.

        Args:
            store: ItemStore implementation (dependency injection)
        """
        self.store = store

    def add(
        self,
        text: str,
        start_date: date | None = None,
        end_date: date | None = None,
        start_time: str | None = None,
        end_time: str | None = None,
        category: Category | str | None = None,
        owner: str | None = None,
    ) -> Item:
        """Create an item. Blank text is rejected."""
        if not text or not text.strip():
            logger.warning("Rejected item with empty text")
            raise ValidationError("Item text must not be empty")

        try:
            item = Item(
                text=text,
                start_date=start_date,
                end_date=end_date,
                start_time=start_time,
                end_time=end_time,
                category=category,
                owner=owner,
            )
        except PydanticValidationError as e:
            raise ValidationError(str(e)) from e

        stored = self.store.insert(item)
        logger.info(f"Added item {stored.id}: {stored.text}")
        return stored

    def get(self, item_id: str) -> Item:
        for item in self.store.load_all():
            if item.id == item_id:
                return item
        raise ItemNotFoundError(f"Item '{item_id}' not found")

    def toggle(self, item_id: str) -> Item:
        """Flip the done flag of an item."""
        item = self.get(item_id)
        updated = self.store.update(item_id, ItemPatch(done=not item.done))
        logger.info(f"Item {item_id} marked {'done' if updated.done else 'not done'}")
        return updated

    def update(self, item_id: str, **fields) -> Item:
        """Apply field changes to an item.

        Fields passed explicitly as None are cleared.
        """
        try:
            patch = ItemPatch(**fields)
        except PydanticValidationError as e:
            raise ValidationError(str(e)) from e
        if "text" in patch.changes() and patch.text is None:
            raise ValidationError("Item text must not be empty")

        try:
            updated = self.store.update(item_id, patch)
        except PydanticValidationError as e:
            raise ValidationError(str(e)) from e
        logger.info(f"Updated item {item_id}")
        return updated

    def delete(self, item_id: str) -> None:
        self.store.delete(item_id)
        logger.info(f"Deleted item {item_id}")

    def all(self) -> list[Item]:
        return self.store.load_all()

    def items_for_day(self, target: date) -> list[Item]:
        """Items visible on target, in insertion order."""
        return ItemQuery(self.store.load_all()).on_date(target)

    def undated(self) -> list[Item]:
        return ItemQuery(self.store.load_all()).undated()

    def month_items(self, grid: MonthGrid) -> dict[date, list[Item]]:
        """Items for every day shown in grid."""
        return ItemQuery(self.store.load_all()).in_month(grid)
