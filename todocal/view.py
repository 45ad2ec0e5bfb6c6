"""Calendar view state: the visible month and the selected day."""

from datetime import date

from todocal.grid import SUNDAY, MonthGrid, build_month_grid, month_navigate


class CalendarView:
    """Holds what the user is looking at.

    The grid itself is rebuilt from this state on every render.
    """

    def __init__(
        self,
        today: date,
        selected_date: date | None = None,
        current_month: date | None = None,
        week_starts_on: int = SUNDAY,
    ):
        self.today = today
        self.selected_date = selected_date or today
        self.current_month = current_month or self.selected_date
        self.week_starts_on = week_starts_on

    def select(self, d: date) -> None:
        """Select a day; the view follows it into its month."""
        self.selected_date = d
        self.current_month = d

    def next_month(self) -> None:
        self.current_month = month_navigate(self.current_month, 1)

    def prev_month(self) -> None:
        self.current_month = month_navigate(self.current_month, -1)

    def go_to_today(self) -> None:
        self.select(self.today)

    def grid(self) -> MonthGrid:
        return build_month_grid(
            self.current_month,
            self.week_starts_on,
            today=self.today,
            selected=self.selected_date,
        )
