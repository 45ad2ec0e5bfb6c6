"""Toggle an item's done flag."""

import typer
from typing_extensions import Annotated

from todocal_cli.context import get_context
from todocal_cli.display import ItemRenderer
from todocal_cli.utils import handle_errors, resolve_item_id


def done(
    item_id: Annotated[str, typer.Argument(help="Item id (or unique prefix)")],
) -> None:
    """Mark an item done, or not done if it already is."""
    ctx = get_context()
    with handle_errors():
        item = ctx.service.toggle(resolve_item_id(ctx.service, item_id))
    ItemRenderer().render_item_saved(item, "Done" if item.done else "Reopened")
