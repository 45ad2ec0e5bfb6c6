"""Month-grid calendar with a per-day task list."""

from todocal.grid import (
    MonthGrid,
    build_month_grid,
    end_of_month,
    end_of_week,
    is_same_month,
    month_navigate,
    start_of_month,
    start_of_week,
    weekday_labels,
)
from todocal.models import CalendarCell, Category, Item, ItemPatch
from todocal.ranges import ItemQuery, is_date_in_range, partition_items_for_day
from todocal.service import TodoService
from todocal.view import CalendarView

__all__ = [
    "CalendarCell",
    "CalendarView",
    "Category",
    "Item",
    "ItemPatch",
    "ItemQuery",
    "MonthGrid",
    "TodoService",
    "build_month_grid",
    "end_of_month",
    "end_of_week",
    "is_date_in_range",
    "is_same_month",
    "month_navigate",
    "partition_items_for_day",
    "start_of_month",
    "start_of_week",
    "weekday_labels",
]
