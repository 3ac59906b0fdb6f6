"""Show the effective configuration of the calendar root."""

from datenotes_cli.context import get_context
from datenotes_cli.display import NoteRenderer
from datenotes_cli.utils import run_or_exit


def config_command() -> None:
    """Show calendar type, start of the week, title patterns and templates.

    The values are read from the labels and relations of the calendar root
    note, with defaults for anything not set.
    """
    ctx = get_context()
    service = ctx.service
    root_note = run_or_exit(service.get_root_calendar_note)
    calendar_config = run_or_exit(lambda: service.get_calendar_config(root_note))
    NoteRenderer(ctx.store).render_config(root_note, calendar_config)
