"""Calendar cell value object."""

from dataclasses import dataclass
from datetime import date


@dataclass(frozen=True)
class CalendarCell:
    """One day square in the month view.

    Recomputed on every render; two cells are equal when all flags match.
    """

    date: date
    in_current_month: bool
    is_today: bool = False
    is_selected: bool = False

    @property
    def key(self) -> str:
        """ISO yyyy-MM-dd key for this cell."""
        return self.date.isoformat()
