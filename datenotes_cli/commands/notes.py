"""Resolve calendar notes for a date, creating missing containers."""

import logging

import typer
from typing_extensions import Annotated

from datenotes.models.calendar_config import WeekNoteOptions
from datenotes_cli.context import get_context
from datenotes_cli.display import NoteRenderer
from datenotes_cli.utils import run_or_exit

logger = logging.getLogger(__name__)

DateArgument = Annotated[str, typer.Argument(help="Date (YYYY-MM-DD)")]


def _show(note) -> None:
    ctx = get_context()
    NoteRenderer(ctx.store).render_note(note)


def root_command() -> None:
    """Show the calendar root note, creating it if missing."""
    service = get_context().service
    _show(run_or_exit(service.get_root_calendar_note))


def year_command(date: DateArgument) -> None:
    """Show the year note for a date."""
    service = get_context().service
    _show(run_or_exit(lambda: service.get_year_note(date)))


def month_command(date: DateArgument) -> None:
    """Show the month note for a date.

    Weekly calendars have no month notes; the day note for the first of
    the month is shown instead.
    """
    service = get_context().service
    _show(run_or_exit(lambda: service.get_month_note(date)))


def week_command(
    date: DateArgument,
    start_of_the_week: Annotated[
        str | None,
        typer.Option(
            "--start-of-week",
            "-s",
            help="Week numbering: 'monday' (ISO) or 'sunday'. Defaults to the calendar's #startOfTheWeek.",
        ),
    ] = None,
) -> None:
    """Show the week note for a date."""
    service = get_context().service
    options = WeekNoteOptions(start_of_the_week=start_of_the_week)
    _show(run_or_exit(lambda: service.get_week_note(date, options)))


def day_command(date: DateArgument) -> None:
    """Show the day note for a date."""
    service = get_context().service
    _show(run_or_exit(lambda: service.get_day_note(date)))


def today_command() -> None:
    """Show today's day note."""
    service = get_context().service
    _show(run_or_exit(service.get_today_note))
