"""Month grid computation for the calendar view.

Weekdays are numbered the way the calendar view labels its columns:
0 = Sunday through 6 = Saturday. The grid always covers whole weeks, so a
month is padded with trailing days of the previous month and leading days
of the next one.
"""

import calendar
from datetime import date, timedelta
from typing import Iterator

from todocal.models.cell import CalendarCell

SUNDAY = 0
MONDAY = 1
DAYS_PER_WEEK = 7


def _check_week_start(week_starts_on: int) -> None:
    if not 0 <= week_starts_on <= 6:
        raise ValueError(f"week_starts_on must be 0-6, got {week_starts_on}")


def start_of_month(d: date) -> date:
    """First day of the month containing d."""
    return d.replace(day=1)


def end_of_month(d: date) -> date:
    """Last day of the month containing d."""
    return d.replace(day=calendar.monthrange(d.year, d.month)[1])


def _day_of_week(d: date) -> int:
    # date.weekday() counts from Monday; shift so Sunday is 0
    return (d.weekday() + 1) % DAYS_PER_WEEK


def start_of_week(d: date, week_starts_on: int = SUNDAY) -> date:
    """First day of the week containing d, never earlier than date.min."""
    _check_week_start(week_starts_on)
    offset = (_day_of_week(d) - week_starts_on) % DAYS_PER_WEEK
    if (d - date.min).days < offset:
        return date.min
    return d - timedelta(days=offset)


def end_of_week(d: date, week_starts_on: int = SUNDAY) -> date:
    """Last day of the week containing d, never later than date.max."""
    _check_week_start(week_starts_on)
    offset = (week_starts_on + DAYS_PER_WEEK - 1 - _day_of_week(d)) % DAYS_PER_WEEK
    if (date.max - d).days < offset:
        return date.max
    return d + timedelta(days=offset)


def is_same_month(a: date, b: date) -> bool:
    return (a.year, a.month) == (b.year, b.month)


def month_navigate(current_month: date, delta: int) -> date:
    """Move by delta whole months, clamping the day to the target month.

    2024-01-31 + 1 month is 2024-02-29, not a date in March.
    """
    index = current_month.year * 12 + (current_month.month - 1) + delta
    year, month = divmod(index, 12)
    month += 1
    day = min(current_month.day, calendar.monthrange(year, month)[1])
    return date(year, month, day)


def weekday_labels(week_starts_on: int = SUNDAY) -> list[str]:
    """Column headers for the grid, starting at week_starts_on."""
    _check_week_start(week_starts_on)
    # calendar.day_abbr is indexed from Monday
    return [
        calendar.day_abbr[(week_starts_on + offset + 6) % DAYS_PER_WEEK]
        for offset in range(DAYS_PER_WEEK)
    ]


class MonthGrid:
    """The calendar cells for one month, in whole weeks.

    Iterating yields CalendarCell objects from the first day of the week
    holding the 1st to the last day of the week holding the month's last
    day. Cells are produced lazily and the grid can be iterated any number
    of times with the same result.

    January of year 1 and December of year 9999 may be cut off at date.min and
    date.max, so their first or last row is shorter than seven days.

    "Today" and the selected date are passed in explicitly; nothing here
    reads the clock.
    """

    def __init__(
        self,
        reference_date: date,
        week_starts_on: int = SUNDAY,
        today: date | None = None,
        selected: date | None = None,
    ):
        _check_week_start(week_starts_on)
        self.month = start_of_month(reference_date)
        self.week_starts_on = week_starts_on
        self.today = today
        self.selected = selected
        self.start = start_of_week(self.month, week_starts_on)
        self.end = end_of_week(end_of_month(self.month), week_starts_on)

    def __iter__(self) -> Iterator[CalendarCell]:
        for offset in range(len(self)):
            yield self.cell(self.start + timedelta(days=offset))

    def __len__(self) -> int:
        return (self.end - self.start).days + 1

    def __contains__(self, d: object) -> bool:
        return isinstance(d, date) and self.start <= d <= self.end

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, MonthGrid):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    def __repr__(self) -> str:
        return (
            f"MonthGrid({self.month:%Y-%m}, week_starts_on={self.week_starts_on}, "
            f"{self.start.isoformat()}..{self.end.isoformat()})"
        )

    def _key(self) -> tuple:
        return (self.month, self.week_starts_on, self.today, self.selected)

    def cell(self, d: date) -> CalendarCell:
        """Build the cell for d relative to this grid's month."""
        return CalendarCell(
            date=d,
            in_current_month=is_same_month(d, self.month),
            is_today=self.today is not None and d == self.today,
            is_selected=self.selected is not None and d == self.selected,
        )

    @property
    def month_end(self) -> date:
        return end_of_month(self.month)

    @property
    def row_count(self) -> int:
        return len(self.weeks())

    def dates(self) -> list[date]:
        return [c.date for c in self]

    def weeks(self) -> list[list[CalendarCell]]:
        """Cells grouped into week rows (seven per row except at date.min/max)."""
        weeks: list[list[CalendarCell]] = []
        for cell in self:
            if not weeks or _day_of_week(cell.date) == self.week_starts_on:
                weeks.append([])
            weeks[-1].append(cell)
        return weeks

    def labels(self) -> list[str]:
        return weekday_labels(self.week_starts_on)


def build_month_grid(
    reference_date: date,
    week_starts_on: int = SUNDAY,
    today: date | None = None,
    selected: date | None = None,
) -> MonthGrid:
    """Build the grid for the month containing reference_date."""
    return MonthGrid(reference_date, week_starts_on, today=today, selected=selected)
