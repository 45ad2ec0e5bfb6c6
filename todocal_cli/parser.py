"""Typer application and command routing."""

import typer
from typing_extensions import Annotated

from todocal_cli import setup_logging
from todocal_cli.commands import add, day, done, edit, month, rm, undated
from todocal_cli.context import CLIContext, set_context

app = typer.Typer(
    help="Month calendar with a per-day task list.",
    no_args_is_help=True,
    add_completion=False,
)


@app.callback()
def callback(
    verbose: Annotated[
        bool, typer.Option("--verbose", "-v", help="Show info messages")
    ] = False,
    quiet: Annotated[
        bool, typer.Option("--quiet", "-q", help="Only show errors")
    ] = False,
) -> None:
    """Month calendar with a per-day task list."""
    ctx = CLIContext(verbose=verbose, quiet=quiet)
    set_context(ctx)
    setup_logging(verbose=verbose, quiet=quiet, config=ctx.config)


app.command("month")(month)
app.command("day")(day)
app.command("undated")(undated)
app.command("add")(add)
app.command("done")(done)
app.command("edit")(edit)
app.command("rm")(rm)
