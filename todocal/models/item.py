"""Item model (task / event) with Pydantic v2 validation."""

import re
from datetime import date, time
from enum import Enum
from typing import Optional

from pydantic import BaseModel, computed_field, field_validator

_HHMM_COLON = re.compile(r"^(\d{1,2}):(\d{2})$")


class Category(str, Enum):
    """Display category for grouping and coloring items."""

    WORK = "work"
    PERSONAL = "personal"
    STUDY = "study"
    HEALTH = "health"
    OTHER = "other"


def normalize_text(v):
    """Strip item text and reject blank content."""
    if not isinstance(v, str):
        raise ValueError("text must be a string")
    stripped = v.strip()
    if not stripped:
        raise ValueError("text must not be empty")
    return stripped


def normalize_time(v):
    """Convert a time value to an HH:MM display string."""
    if v is None or v == "":
        return None
    if isinstance(v, time):
        return v.strftime("%H:%M")
    if isinstance(v, str):
        v = v.strip()
        # Handle HHMM format (e.g., "0930" -> "09:30")
        if len(v) == 4 and v.isdigit():
            hour, minute = int(v[:2]), int(v[2:])
        else:
            match = _HHMM_COLON.match(v)
            if not match:
                raise ValueError(f"Invalid time format: {v}")
            hour, minute = int(match.group(1)), int(match.group(2))
        if 0 <= hour <= 23 and 0 <= minute <= 59:
            return f"{hour:02d}:{minute:02d}"
    raise ValueError(f"Invalid time format: {v}")


def normalize_category(v):
    """Accept category names case-insensitively."""
    if isinstance(v, str):
        v = v.strip().lower()
        return v or None
    return v


class Item(BaseModel):
    """A task or event shown on the calendar.

    Items without a start date are floating (undated) and never appear on a
    calendar day. When end_date is set the item covers every day from
    start_date to end_date inclusive. The range is stored as given: an end
    date before the start date is kept and simply matches no day.
    """

    id: str = ""
    text: str
    done: bool = False
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    start_time: Optional[str] = None
    end_time: Optional[str] = None
    category: Optional[Category] = None
    owner: Optional[str] = None

    @field_validator("text", mode="before")
    @classmethod
    def validate_text(cls, v):
        """Strip text; blank text is rejected."""
        return normalize_text(v)

    @field_validator("start_time", "end_time", mode="before")
    @classmethod
    def validate_time(cls, v):
        """Normalize times to HH:MM."""
        return normalize_time(v)

    @field_validator("category", mode="before")
    @classmethod
    def validate_category(cls, v):
        return normalize_category(v)

    @computed_field
    @property
    def is_undated(self) -> bool:
        """True if the item has no start date."""
        return self.start_date is None

    @computed_field
    @property
    def is_ranged(self) -> bool:
        """True if the item spans more than its start day."""
        return self.end_date is not None and self.end_date != self.start_date

    def to_record(self) -> dict:
        """Serialize for storage (ISO dates, no computed or empty fields)."""
        return self.model_dump(
            mode="json",
            exclude_none=True,
            exclude={"is_undated", "is_ranged"},
        )


class ItemPatch(BaseModel):
    """Partial update for an item. Only fields that were set are applied."""

    text: Optional[str] = None
    done: Optional[bool] = None
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    start_time: Optional[str] = None
    end_time: Optional[str] = None
    category: Optional[Category] = None
    owner: Optional[str] = None

    @field_validator("text", mode="before")
    @classmethod
    def validate_text(cls, v):
        if v is None:
            return None
        return normalize_text(v)

    @field_validator("start_time", "end_time", mode="before")
    @classmethod
    def validate_time(cls, v):
        return normalize_time(v)

    @field_validator("category", mode="before")
    @classmethod
    def validate_category(cls, v):
        return normalize_category(v)

    def changes(self) -> dict:
        """Fields explicitly set on this patch."""
        return self.model_dump(exclude_unset=True)

    def apply(self, item: Item) -> Item:
        """Return a copy of item with this patch applied."""
        data = item.model_dump(exclude={"is_undated", "is_ranged"})
        data.update(self.changes())
        return Item.model_validate(data)
