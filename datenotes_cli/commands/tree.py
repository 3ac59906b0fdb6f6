"""Display the calendar container hierarchy."""

import typer
from typing_extensions import Annotated

from datenotes_cli.context import get_context
from datenotes_cli.display import NoteRenderer
from datenotes_cli.utils import run_or_exit


def tree_command(
    depth: Annotated[
        int | None,
        typer.Option("--depth", "-d", help="Maximum depth to display", min=1),
    ] = None,
) -> None:
    """Display the calendar root and every container below it.

    Example:
        datenotes tree --depth 2
    """
    ctx = get_context()
    root_note = run_or_exit(ctx.service.get_root_calendar_note)
    NoteRenderer(ctx.store).render_tree(root_note, max_depth=depth)
