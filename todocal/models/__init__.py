"""Pydantic models for todocal."""

from todocal.models.cell import CalendarCell
from todocal.models.item import Category, Item, ItemPatch

__all__ = [
    "CalendarCell",
    "Category",
    "Item",
    "ItemPatch",
]
