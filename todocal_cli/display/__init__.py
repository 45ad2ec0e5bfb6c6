"""Display module for rendering calendar output.

- GridRenderer: month grid table
- ItemRenderer: day and list views of items
- console: Shared Rich console instance
"""

from todocal_cli.display.console import console
from todocal_cli.display.formatters import (
    format_date_span,
    format_day_heading,
    format_time_range,
    item_color,
    owner_color,
)
from todocal_cli.display.grid_renderer import GridRenderer
from todocal_cli.display.item_renderer import ItemRenderer

__all__ = [
    "console",
    "GridRenderer",
    "ItemRenderer",
    "format_date_span",
    "format_day_heading",
    "format_time_range",
    "item_color",
    "owner_color",
]
