"""Display module for rendering notes in the terminal."""

from datenotes_cli.display.console import console
from datenotes_cli.display.note_renderer import NoteRenderer, format_attributes

__all__ = [
    "console",
    "NoteRenderer",
    "format_attributes",
]
