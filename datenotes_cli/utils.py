"""CLI helpers shared by commands."""

import logging
from typing import Callable, TypeVar

import typer

from datenotes.exceptions import DateNoteError

logger = logging.getLogger(__name__)

T = TypeVar("T")


def run_or_exit(operation: Callable[[], T]) -> T:
    """Run a date note operation, exiting with status 1 on domain errors."""
    try:
        return operation()
    except DateNoteError as e:
        logger.error(f"Date note error: {e}")
        raise typer.Exit(1)
