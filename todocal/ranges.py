"""Date-range membership and per-day item filtering."""

from collections.abc import Iterable
from datetime import date, datetime, time

from todocal.grid import MonthGrid
from todocal.models.item import Category, Item


def _iso_day(value: date | str) -> str:
    """yyyy-MM-dd key for a date, datetime or ISO date string.

    Raises:
        ValueError: If a string is not a yyyy-MM-dd date.
    """
    if isinstance(value, datetime):
        value = value.date()
    if isinstance(value, str):
        value = date.fromisoformat(value)
    return value.isoformat()


def is_date_in_range(
    target: date | str,
    start_date: date | str,
    end_date: date | str | None = None,
) -> bool:
    """Check whether target falls on an item's day or inclusive date range.

    Comparison is on whole days via the yyyy-MM-dd form. An end date before
    the start date matches nothing.
    """
    target_key = _iso_day(target)
    start_key = _iso_day(start_date)
    if end_date is None:
        return target_key == start_key
    return start_key <= target_key <= _iso_day(end_date)


def partition_items_for_day(items: Iterable[Item], target: date) -> list[Item]:
    """Items visible on target, in their original order.

    Undated items are never visible on a day.
    """
    return [
        item
        for item in items
        if item.start_date is not None
        and is_date_in_range(target, item.start_date, item.end_date)
    ]


def split_undated(items: Iterable[Item]) -> tuple[list[Item], list[Item]]:
    """Split items into (dated, undated), keeping order within each."""
    dated: list[Item] = []
    undated: list[Item] = []
    for item in items:
        (undated if item.start_date is None else dated).append(item)
    return dated, undated


class ItemQuery:
    """Filter and select items for display.

    Filters keep the order items were given in, so results line up with
    the order they were added.
    """

    def __init__(self, items: Iterable[Item]):
        """Initialize with an item snapshot.

        Args:
            items: Items to query.
        """
        self.items = list(items)

    def on_date(self, target: date) -> list[Item]:
        """Items visible on target, including ranged items spanning it."""
        return partition_items_for_day(self.items, target)

    def agenda(self, target: date) -> list[Item]:
        """Items visible on target, untimed first, then by start time."""
        return sorted(
            self.on_date(target),
            key=lambda i: (
                i.start_time is not None,
                time.fromisoformat(i.start_time) if i.start_time else time.min,
            ),
        )

    def undated(self) -> list[Item]:
        """Floating items with no start date."""
        return split_undated(self.items)[1]

    def dated(self) -> list[Item]:
        return split_undated(self.items)[0]

    def in_month(self, grid: MonthGrid) -> dict[date, list[Item]]:
        """Items for every cell of the grid, keyed by date.

        Every grid date is present, with an empty list when nothing is on it.
        """
        dated = self.dated()
        return {d: partition_items_for_day(dated, d) for d in grid.dates()}

    def by_category(self, category: Category | str) -> list[Item]:
        category = Category(category.lower()) if isinstance(category, str) else category
        return [i for i in self.items if i.category == category]

    def by_owner(self, owner: str) -> list[Item]:
        """Items owned by owner (case-insensitive)."""
        owner_lower = owner.lower()
        return [i for i in self.items if i.owner and i.owner.lower() == owner_lower]

    def pending(self) -> list[Item]:
        return [i for i in self.items if not i.done]

    def completed(self) -> list[Item]:
        return [i for i in self.items if i.done]
