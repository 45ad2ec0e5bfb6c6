"""Edit an item."""

import typer
from typing_extensions import Annotated

from todocal.models.item import Category
from todocal_cli.context import get_context
from todocal_cli.display import ItemRenderer
from todocal_cli.utils import (
    handle_errors,
    parse_date,
    resolve_item_id,
    warn_if_inverted,
)


def edit(
    item_id: Annotated[str, typer.Argument(help="Item id (or unique prefix)")],
    text: Annotated[str | None, typer.Option("--text", help="New text")] = None,
    start_date: Annotated[
        str | None, typer.Option("--date", "-d", help="New day (YYYY-MM-DD)")
    ] = None,
    end_date: Annotated[
        str | None, typer.Option("--end", "-e", help="New last day (YYYY-MM-DD)")
    ] = None,
    start_time: Annotated[str | None, typer.Option("--from", help="Start time (HH:MM)")] = None,
    end_time: Annotated[str | None, typer.Option("--to", help="End time (HH:MM)")] = None,
    category: Annotated[
        Category | None,
        typer.Option("--category", "-c", case_sensitive=False, help="Category"),
    ] = None,
    owner: Annotated[str | None, typer.Option("--owner", "-u", help="Owner")] = None,
    undate: Annotated[
        bool, typer.Option("--undate", help="Remove the dates (move to undated)")
    ] = False,
    clear_times: Annotated[
        bool, typer.Option("--clear-times", help="Remove start and end times")
    ] = False,
) -> None:
    """Change an item's text, dates, times, category or owner."""
    ctx = get_context()

    fields: dict = {}
    if text is not None:
        fields["text"] = text
    if undate:
        fields["start_date"] = None
        fields["end_date"] = None
    else:
        if start_date:
            fields["start_date"] = parse_date(start_date)
        if end_date:
            fields["end_date"] = parse_date(end_date)
    if clear_times:
        fields["start_time"] = None
        fields["end_time"] = None
    else:
        if start_time:
            fields["start_time"] = start_time
        if end_time:
            fields["end_time"] = end_time
    if category is not None:
        fields["category"] = category
    if owner is not None:
        fields["owner"] = owner

    if not fields:
        raise typer.BadParameter("Nothing to change")

    with handle_errors():
        item = ctx.service.update(resolve_item_id(ctx.service, item_id), **fields)
    warn_if_inverted(item)
    ItemRenderer().render_item_saved(item, "Updated")
