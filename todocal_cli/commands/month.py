"""Display the month grid."""

from datetime import date

import typer
from typing_extensions import Annotated

from todocal.grid import month_navigate
from todocal.view import CalendarView
from todocal_cli.context import get_context
from todocal_cli.display import GridRenderer
from todocal_cli.utils import handle_errors, parse_date, parse_month


def month(
    target_month: Annotated[
        str | None,
        typer.Option("--month", "-m", help="Month to show (YYYY-MM)"),
    ] = None,
    select: Annotated[
        str | None,
        typer.Option("--select", "-s", help="Highlight a day (YYYY-MM-DD)"),
    ] = None,
    offset: Annotated[
        int,
        typer.Option("--offset", "-o", help="Months forward (or back, if negative)"),
    ] = 0,
    week_start: Annotated[
        int | None,
        typer.Option(
            "--week-start", "-w", min=0, max=6, help="First weekday (0=Sun .. 6=Sat)"
        ),
    ] = None,
) -> None:
    """Show the month grid with per-day item counts.

    Examples:
        todocal month                      # Current month
        todocal month --month 2024-02      # February 2024
        todocal month --offset 1           # Next month
        todocal month --select 2024-03-14  # March 2024, the 14th highlighted
    """
    ctx = get_context()
    week_starts_on = ctx.config.week_starts_on if week_start is None else week_start

    view = CalendarView(today=date.today(), week_starts_on=week_starts_on)
    if select:
        view.select(parse_date(select))
    if target_month:
        view.current_month = parse_month(target_month)
    if offset:
        view.current_month = month_navigate(view.current_month, offset)

    grid = view.grid()
    with handle_errors():
        items_by_day = ctx.service.month_items(grid)

    GridRenderer().render(grid, items_by_day)
