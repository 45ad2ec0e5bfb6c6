"""Add an item."""

import typer
from typing_extensions import Annotated

from todocal.models.item import Category
from todocal_cli.context import get_context
from todocal_cli.display import ItemRenderer
from todocal_cli.utils import handle_errors, parse_date, warn_if_inverted


def add(
    text: Annotated[str, typer.Argument(help="What to do")],
    start_date: Annotated[
        str | None,
        typer.Option("--date", "-d", help="Day of the item (YYYY-MM-DD); omit for undated"),
    ] = None,
    end_date: Annotated[
        str | None,
        typer.Option("--end", "-e", help="Last day of a multi-day item (YYYY-MM-DD)"),
    ] = None,
    start_time: Annotated[
        str | None,
        typer.Option("--from", help="Start time (HH:MM)"),
    ] = None,
    end_time: Annotated[
        str | None,
        typer.Option("--to", help="End time (HH:MM)"),
    ] = None,
    category: Annotated[
        Category | None,
        typer.Option("--category", "-c", case_sensitive=False, help="Category"),
    ] = None,
    owner: Annotated[
        str | None,
        typer.Option("--owner", "-u", help="Who the item belongs to"),
    ] = None,
) -> None:
    """Add an item to a day, a range of days, or the undated list."""
    ctx = get_context()
    if end_date and not start_date:
        raise typer.BadParameter("--end requires --date")

    with handle_errors():
        item = ctx.service.add(
            text,
            start_date=parse_date(start_date) if start_date else None,
            end_date=parse_date(end_date) if end_date else None,
            start_time=start_time,
            end_time=end_time,
            category=category,
            owner=owner,
        )
    warn_if_inverted(item)
    ItemRenderer().render_item_saved(item, "Added")
