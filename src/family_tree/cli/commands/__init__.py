"""
CLI command modules for family_tree.

Each command module defines Typer-compatible command functions.
"""

from family_tree.cli.commands.export import export_command
from family_tree.cli.commands.queries import (
    childless_command,
    grandparent_command,
    most_grandkids_command,
    only_children_command,
)
from family_tree.cli.commands.report import report_command
from family_tree.cli.commands.show import show_command
from family_tree.cli.commands.stats import stats_command

__all__ = [
    "childless_command",
    "export_command",
    "grandparent_command",
    "most_grandkids_command",
    "only_children_command",
    "report_command",
    "show_command",
    "stats_command",
]
