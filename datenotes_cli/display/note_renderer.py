"""Render notes, calendar trees and calendar configuration."""

from rich.table import Table
from rich.tree import Tree

from datenotes.models.calendar_config import CalendarConfig
from datenotes.models.note import AttributeType, Note
from datenotes.storage.note_store import NoteStore
from datenotes_cli.display.console import console


def format_attributes(note: Note) -> str:
    """Format owned attributes the way they are written in queries."""
    parts = []
    for attribute in note.attributes:
        sigil = "#" if attribute.type == AttributeType.LABEL else "~"
        if attribute.value:
            parts.append(f"{sigil}{attribute.name}={attribute.value}")
        else:
            parts.append(f"{sigil}{attribute.name}")
    return " ".join(parts)


class NoteRenderer:
    """Render notes using Rich tables and trees."""

    def __init__(self, store: NoteStore):
        self.store = store

    def render_note(self, note: Note) -> None:
        """Render a single note with its attributes and parents."""
        table = Table(show_header=False, box=None, padding=(0, 2))
        table.add_column("Label", style="dim", width=12)
        table.add_column("Value")

        table.add_row("ID", f"[cyan]{note.note_id}[/cyan]")
        table.add_row("Title", f"[bold]{note.title}[/bold]")
        table.add_row("Attributes", format_attributes(note) or "-")

        parents = self.store.get_parent_notes(note)
        table.add_row(
            "Parents",
            ", ".join(f"{p.title} ({p.note_id})" for p in parents) or "-",
        )
        if note.is_protected:
            table.add_row("Protected", "yes")

        console.print(table)

    def render_tree(self, root_note: Note, max_depth: int | None = None) -> None:
        """Render the container hierarchy below root_note.

        Cloned notes appear once under each of their parents.
        """
        tree = Tree(f"[bold]{root_note.title}[/bold] [dim]{root_note.note_id}[/dim]")
        self._add_children(tree, root_note, 1, max_depth)
        console.print(tree)

    def _add_children(
        self, branch: Tree, note: Note, depth: int, max_depth: int | None
    ) -> None:
        if max_depth is not None and depth > max_depth:
            return
        children = sorted(self.store.get_child_notes(note), key=lambda n: n.title)
        for child in children:
            label = f"{child.title} [dim]{format_attributes(child)}[/dim]"
            if len(child.parent_ids) > 1:
                label += " [yellow](cloned)[/yellow]"
            child_branch = branch.add(label)
            self._add_children(child_branch, child, depth + 1, max_depth)

    def render_config(self, root_note: Note, config: CalendarConfig) -> None:
        """Render the effective configuration of a calendar root."""
        console.print(f"\n[bold cyan]Calendar {root_note.title}[/bold cyan]")

        table = Table(show_header=False, box=None, padding=(0, 2))
        table.add_column("Setting", style="dim", width=18)
        table.add_column("Value")

        table.add_row("Root", root_note.note_id)
        table.add_row("Calendar type", config.calendar_type.value)
        table.add_row("Start of week", config.start_of_the_week)
        for granularity in config.hierarchy:
            table.add_row(
                f"{granularity.value.title()} pattern", config.pattern_for(granularity)
            )
            template_id = config.template_for(granularity)
            if template_id:
                table.add_row(f"{granularity.value.title()} template", template_id)

        console.print(table)
