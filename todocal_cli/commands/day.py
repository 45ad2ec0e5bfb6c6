"""Display the task list for one day."""

from datetime import date

import typer
from typing_extensions import Annotated

from todocal.ranges import ItemQuery
from todocal_cli.context import get_context
from todocal_cli.display import ItemRenderer
from todocal_cli.utils import handle_errors, parse_date


def day(
    target_date: Annotated[
        str | None,
        typer.Argument(help="Day to show (YYYY-MM-DD, default: today)"),
    ] = None,
    by_time: Annotated[
        bool,
        typer.Option("--by-time", "-t", help="Order by start time instead of added order"),
    ] = False,
) -> None:
    """Show items on a day, including multi-day items spanning it."""
    ctx = get_context()
    today = date.today()
    target = parse_date(target_date) if target_date else today

    with handle_errors():
        items = ctx.service.all()

    query = ItemQuery(items)
    visible = query.agenda(target) if by_time else query.on_date(target)
    ItemRenderer().render_day(visible, target, today)
