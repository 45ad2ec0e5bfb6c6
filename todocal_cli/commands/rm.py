"""Delete an item."""

import typer
from typing_extensions import Annotated

from todocal_cli.context import get_context
from todocal_cli.display import ItemRenderer
from todocal_cli.utils import handle_errors, resolve_item_id


def rm(
    item_id: Annotated[str, typer.Argument(help="Item id (or unique prefix)")],
) -> None:
    """Delete an item."""
    ctx = get_context()
    with handle_errors():
        item = ctx.service.get(resolve_item_id(ctx.service, item_id))
        ctx.service.delete(item.id)
    ItemRenderer().render_item_saved(item, "Deleted")
