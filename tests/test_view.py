"""Tests for calendar view state."""

from datetime import date

from todocal.view import CalendarView


def test_defaults_to_today():
    view = CalendarView(today=date(2024, 3, 14))
    assert view.selected_date == date(2024, 3, 14)
    assert view.current_month == date(2024, 3, 14)


def test_select_follows_month():
    """Clicking a padding day switches to that day's month."""
    view = CalendarView(today=date(2024, 3, 14))
    view.select(date(2024, 4, 2))
    assert view.selected_date == date(2024, 4, 2)
    assert view.grid().month == date(2024, 4, 1)


def test_navigation_keeps_selection():
    view = CalendarView(today=date(2024, 1, 31))
    view.next_month()
    assert view.current_month == date(2024, 2, 29)
    assert view.selected_date == date(2024, 1, 31)
    view.prev_month()
    view.prev_month()
    assert view.current_month == date(2023, 12, 29)
    view.go_to_today()
    assert view.current_month == date(2024, 1, 31)


def test_grid_flags():
    view = CalendarView(today=date(2024, 3, 14), week_starts_on=1)
    view.select(date(2024, 3, 20))
    grid = view.grid()
    assert grid.week_starts_on == 1
    assert [c.date for c in grid if c.is_today] == [date(2024, 3, 14)]
    assert [c.date for c in grid if c.is_selected] == [date(2024, 3, 20)]
