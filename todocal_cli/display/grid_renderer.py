"""Rich month grid renderer."""

from datetime import date

from rich.console import Console
from rich.table import Table
from rich.text import Text

from todocal.grid import MonthGrid
from todocal.models.cell import CalendarCell
from todocal.models.item import Item
from todocal_cli.display.console import console as shared_console


class GridRenderer:
    """Render a MonthGrid as a seven-column table.

    - Days outside the month: dim
    - Today: bold underline
    - Selected day: reverse blue
    - Days with items: item count after the day number
    """

    def __init__(self, console: Console | None = None):
        self.console = console or shared_console

    def render(
        self,
        grid: MonthGrid,
        items_by_day: dict[date, list[Item]] | None = None,
    ) -> None:
        items_by_day = items_by_day or {}

        table = Table(
            title=grid.month.strftime("%B %Y"),
            show_header=True,
            header_style="bold",
            show_lines=False,
            padding=(0, 1),
        )
        for label in grid.labels():
            table.add_column(label, justify="right", width=5)

        for index, week in enumerate(grid.weeks()):
            row = [self._cell_text(c, items_by_day.get(c.date, [])) for c in week]
            # Rows clipped at date.min or date.max keep their weekday columns
            padding = [Text("")] * (7 - len(row))
            table.add_row(*(padding + row if index == 0 else row + padding))

        self.console.print(table)

    def _cell_text(self, cell: CalendarCell, items: list[Item]) -> Text:
        text = Text(str(cell.date.day), style=self._cell_style(cell))
        pending = [i for i in items if not i.done]
        if items:
            marker_style = "yellow" if pending else "dim green"
            text.append(f"•{len(items)}", style=marker_style)
        return text

    @staticmethod
    def _cell_style(cell: CalendarCell) -> str:
        if cell.is_selected:
            return "reverse blue"
        if not cell.in_current_month:
            return "dim"
        if cell.is_today:
            return "bold underline"
        return ""
