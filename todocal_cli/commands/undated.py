"""Display floating items that have no date."""

from todocal_cli.context import get_context
from todocal_cli.display import ItemRenderer
from todocal_cli.utils import handle_errors


def undated() -> None:
    """Show items without a date."""
    ctx = get_context()
    with handle_errors():
        items = ctx.service.undated()
    ItemRenderer().render_list(items, title="Undated")
