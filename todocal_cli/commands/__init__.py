"""CLI commands package."""

from todocal_cli.commands.add import add
from todocal_cli.commands.day import day
from todocal_cli.commands.done import done
from todocal_cli.commands.edit import edit
from todocal_cli.commands.month import month
from todocal_cli.commands.rm import rm
from todocal_cli.commands.undated import undated

__all__ = [
    "add",
    "day",
    "done",
    "edit",
    "month",
    "rm",
    "undated",
]
