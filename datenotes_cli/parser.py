"""CLI argument parsing and command routing."""

import logging
from pathlib import Path

import typer
from typing_extensions import Annotated

from datenotes_cli import setup_logging
from datenotes_cli.commands import (
    config_command,
    day_command,
    month_command,
    root_command,
    today_command,
    tree_command,
    week_command,
    year_command,
)
from datenotes_cli.context import CLIContext, set_context

logger = logging.getLogger(__name__)

app = typer.Typer(
    help="Find or create calendar date notes in a note store.",
    no_args_is_help=True,
)


@app.callback()
def callback(
    verbose: Annotated[
        bool, typer.Option("--verbose", "-v", help="Show info messages")
    ] = False,
    quiet: Annotated[
        bool, typer.Option("--quiet", "-q", help="Only show errors")
    ] = False,
    store: Annotated[
        Path | None,
        typer.Option("--store", help="Note store file (default: DATENOTES_STORE)"),
    ] = None,
) -> None:
    """Set up logging and the shared command context."""
    ctx = CLIContext(verbose=verbose, quiet=quiet, store_path=store)
    set_context(ctx)
    setup_logging(verbose=verbose, quiet=quiet, config=ctx.config)


app.command("root")(root_command)
app.command("year")(year_command)
app.command("month")(month_command)
app.command("week")(week_command)
app.command("day")(day_command)
app.command("today")(today_command)
app.command("tree")(tree_command)
app.command("config")(config_command)
