"""Rich-based item renderer for terminal display."""

from datetime import date

from rich.console import Console
from rich.markup import escape
from rich.text import Text

from todocal.models.item import Item
from todocal_cli.display.console import console as shared_console
from todocal_cli.display.formatters import (
    format_date_span,
    format_day_heading,
    format_time_range,
    item_color,
    short_id,
)


class ItemRenderer:
    """Render task lists using Rich.

    Done items are struck through and dimmed; ranged items show their span.
    """

    def __init__(self, console: Console | None = None):
        """Initialize the renderer.

        Args:
            console: Rich Console instance (uses shared console if not provided).
        """
        self.console = console or shared_console

    def render_day(self, items: list[Item], day: date, today: date) -> None:
        """Render the task list for one day."""
        self._print_header(format_day_heading(day, today))
        if not items:
            self.render_empty("No items on this day")
            return
        for item in items:
            self._render_item(item, show_dates=item.is_ranged)
        self._print_footer(len(items))

    def render_list(self, items: list[Item], title: str) -> None:
        """Render items as a flat list with their dates."""
        self._print_header(title)
        if not items:
            self.render_empty()
            return
        for item in items:
            self._render_item(item, show_dates=True)
        self._print_footer(len(items))

    def render_item_saved(self, item: Item, action: str) -> None:
        """One-line confirmation after a change."""
        self.console.print(
            f"[green]✓[/green] {action} [bold]{short_id(item.id)}[/bold] {escape(item.text)}"
        )

    def render_empty(self, message: str | None = None) -> None:
        msg = message or "No items found"
        self.console.print(f"\n[dim]{msg}[/dim]\n")

    # ─────────────────────────────────────────────────────────────────────────
    # Private helpers
    # ─────────────────────────────────────────────────────────────────────────

    def _print_header(self, title: str) -> None:
        self.console.print()
        self.console.print("━" * 40)
        self.console.print(f"[bold]  {title}[/bold]")
        self.console.print("━" * 40)

    def _print_footer(self, count: int) -> None:
        self.console.print()
        self.console.print("─" * 40)
        item_word = "item" if count == 1 else "items"
        self.console.print(f"[dim]{count} {item_word}[/dim]")
        self.console.print()

    def _render_item(self, item: Item, show_dates: bool) -> None:
        line = Text()
        line.append(f"  {short_id(item.id)}  ", style="dim")
        line.append("[x] " if item.done else "[ ] ", style="green" if item.done else "")

        time_str = format_time_range(item)
        if time_str:
            line.append(f"{time_str:<12}", style="blue")

        title_style = "dim strike" if item.done else (item_color(item) or "")
        line.append(item.text, style=title_style)

        tags = [t for t in (item.category.value if item.category else None, item.owner) if t]
        if tags:
            line.append(f" ({', '.join(tags)})", style="italic dim")
        if show_dates:
            line.append(f"  {format_date_span(item)}", style="cyan")

        self.console.print(line)
