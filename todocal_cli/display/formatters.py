"""Pure formatting functions for display output."""

from datetime import date

from todocal.models.item import Category, Item

CATEGORY_COLORS = {
    Category.WORK: "blue",
    Category.PERSONAL: "green",
    Category.STUDY: "magenta",
    Category.HEALTH: "red",
    Category.OTHER: "white",
}

OWNER_PALETTE = ["cyan", "yellow", "bright_magenta", "bright_green", "bright_blue"]


def owner_color(owner: str) -> str:
    """Stable color for a user name (same name, same color across runs)."""
    return OWNER_PALETTE[sum(map(ord, owner.lower())) % len(OWNER_PALETTE)]


def item_color(item: Item) -> str | None:
    """Color for an item: owner first, then category."""
    if item.owner:
        return owner_color(item.owner)
    if item.category:
        return CATEGORY_COLORS[item.category]
    return None


def format_time_range(item: Item) -> str:
    """Format an item's time range.

    Returns:
        "09:00–10:30", "09:00", "–17:00" or "" when no times are set.
    """
    if item.start_time and item.end_time:
        return f"{item.start_time}–{item.end_time}"
    if item.start_time:
        return item.start_time
    if item.end_time:
        return f"–{item.end_time}"
    return ""


def format_date_span(item: Item) -> str:
    """Format an item's dates ("2024-03-01", "2024-03-01 → 03-03", "undated")."""
    if item.start_date is None:
        return "undated"
    if not item.is_ranged or item.end_date is None:
        return item.start_date.isoformat()
    if item.end_date.year == item.start_date.year:
        return f"{item.start_date.isoformat()} → {item.end_date:%m-%d}"
    return f"{item.start_date.isoformat()} → {item.end_date.isoformat()}"


def format_day_heading(d: date, today: date) -> str:
    """Format a day heading with a relative label.

    Returns:
        Formatted string like "TODAY (Thu Jan 16)" or "Mon Jan 19, 2026".
    """
    delta = (d - today).days
    if delta == 0:
        return f"TODAY ({d.strftime('%a %b %d')})"
    elif delta == 1:
        return f"Tomorrow ({d.strftime('%a %b %d')})"
    elif delta == -1:
        return f"Yesterday ({d.strftime('%a %b %d')})"
    return d.strftime("%a %b %d, %Y")


def short_id(item_id: str, length: int = 8) -> str:
    return item_id[:length]
