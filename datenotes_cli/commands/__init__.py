"""CLI commands package."""

from datenotes_cli.commands.config import config_command
from datenotes_cli.commands.notes import (
    day_command,
    month_command,
    root_command,
    today_command,
    week_command,
    year_command,
)
from datenotes_cli.commands.tree import tree_command

__all__ = [
    "config_command",
    "day_command",
    "month_command",
    "root_command",
    "today_command",
    "tree_command",
    "week_command",
    "year_command",
]
