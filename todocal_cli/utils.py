"""CLI helpers for argument parsing and error reporting."""

import logging
from contextlib import contextmanager
from datetime import date, datetime
from typing import Generator

import typer

from todocal.exceptions import ItemNotFoundError, TodoCalError, ValidationError
from todocal.models.item import Item
from todocal.service import TodoService

logger = logging.getLogger(__name__)


def parse_date(date_str: str) -> date:
    """Parse a date string in YYYY-MM-DD format.

    Raises:
        typer.BadParameter: If the date format is invalid.
    """
    try:
        return datetime.strptime(date_str, "%Y-%m-%d").date()
    except ValueError:
        raise typer.BadParameter(f"Invalid date format: {date_str}. Use YYYY-MM-DD.")


def parse_month(month_str: str) -> date:
    """Parse a YYYY-MM string into the first day of that month.

    Raises:
        typer.BadParameter: If the month format is invalid.
    """
    try:
        return datetime.strptime(month_str, "%Y-%m").date()
    except ValueError:
        raise typer.BadParameter(f"Invalid month format: {month_str}. Use YYYY-MM.")


def resolve_item_id(service: TodoService, prefix: str) -> str:
    """Expand an id prefix (as shown in listings) to a full item id.

    Raises:
        ItemNotFoundError: If nothing matches.
        ValidationError: If more than one item matches.
    """
    matches = [item.id for item in service.all() if item.id.startswith(prefix)]
    if not matches:
        raise ItemNotFoundError(f"Item '{prefix}' not found")
    if len(matches) > 1 and prefix not in matches:
        raise ValidationError(f"Item id '{prefix}' is ambiguous ({len(matches)} matches)")
    return prefix if prefix in matches else matches[0]


@contextmanager
def handle_errors() -> Generator[None, None, None]:
    """Log application errors and exit with status 1."""
    try:
        yield
    except TodoCalError as e:
        logger.error(str(e))
        raise typer.Exit(1)


def warn_if_inverted(item: Item) -> None:
    """Warn when an item's range can never match a day."""
    if item.start_date and item.end_date and item.end_date < item.start_date:
        logger.warning(
            f"End date {item.end_date} is before start date {item.start_date}; "
            "item will not show on any day"
        )
