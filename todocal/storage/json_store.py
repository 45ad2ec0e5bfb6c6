"""JSON file item store (local key-value storage)."""

import json
import logging
from pathlib import Path

from pydantic import ValidationError as PydanticValidationError

from todocal.exceptions import ItemNotFoundError, StorageError
from todocal.models.item import Item, ItemPatch
from todocal.storage.base import new_item_id

logger = logging.getLogger(__name__)


class JSONItemStore:
    """Item store backed by a single JSON document.

    Every mutation rewrites the whole file. Two layouts are read:

    - Flat (written by this store): {"items": [{...}, ...]}
    - Legacy date-keyed: {"2024-03-01": [{"id", "text", "done"}, ...], ...}
      Items take their start_date from the key.
    """

    def __init__(self, path: Path):
        """Initialize store.

        Args:
            path: JSON file to read and write. Created on first write.
        """
        self.path = path

    def load_all(self) -> list[Item]:
        if not self.path.exists():
            return []

        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as e:
            raise StorageError(f"Could not read item store {self.path}: {e}") from e

        try:
            if isinstance(data, dict) and "items" in data:
                records = self._records(data["items"], "items")
                return [Item.model_validate(record) for record in records]
            if isinstance(data, dict):
                return self._load_legacy(data)
        except PydanticValidationError as e:
            raise StorageError(f"Invalid item in {self.path}: {e}") from e

        raise StorageError(f"Unrecognized item store layout in {self.path}")

    def insert(self, item: Item) -> Item:
        items = self.load_all()
        stored = item.model_copy(update={"id": new_item_id()})
        items.append(stored)
        self._save(items)
        logger.debug(f"Inserted item {stored.id} into {self.path}")
        return stored

    def update(self, item_id: str, patch: ItemPatch) -> Item:
        items = self.load_all()
        index = self._index(items, item_id)
        items[index] = patch.apply(items[index])
        self._save(items)
        logger.debug(f"Updated item {item_id}: {sorted(patch.changes())}")
        return items[index]

    def delete(self, item_id: str) -> None:
        items = self.load_all()
        del items[self._index(items, item_id)]
        self._save(items)
        logger.debug(f"Deleted item {item_id} from {self.path}")

    def _load_legacy(self, data: dict) -> list[Item]:
        """Flatten the date-keyed layout, oldest date first."""
        items = []
        for key in sorted(data):
            for record in self._records(data[key] or [], key):
                record = dict(record)
                record.setdefault("start_date", key)
                items.append(Item.model_validate(record))
        if items:
            logger.info(f"Loaded {len(items)} items from legacy layout in {self.path}")
        return items

    def _records(self, value, where: str) -> list[dict]:
        """Check that value is a list of item objects."""
        if not isinstance(value, list) or not all(isinstance(r, dict) for r in value):
            raise StorageError(
                f"Expected a list of items under '{where}' in {self.path}"
            )
        return value

    def _save(self, items: list[Item]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        payload = {"items": [item.to_record() for item in items]}
        try:
            self.path.write_text(
                json.dumps(payload, indent=2, ensure_ascii=False), encoding="utf-8"
            )
        except OSError as e:
            raise StorageError(f"Could not write item store {self.path}: {e}") from e

    @staticmethod
    def _index(items: list[Item], item_id: str) -> int:
        for index, item in enumerate(items):
            if item.id == item_id:
                return index
        raise ItemNotFoundError(f"Item '{item_id}' not found")
