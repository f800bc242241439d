from __future__ import annotations

from pathlib import Path

import typer
from rich.table import Table

from family_tree.cli.utils import console, load_family_tree
from family_tree.core.exceptions import NoGrandchildrenError


def stats_command(
    tree_file: Path = typer.Argument(..., exists=True, readable=True),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable rich logging",
    ),
):
    """
    Show summary statistics for a family tree.
    """
    tree = load_family_tree(tree_file, verbose=verbose)

    try:
        most = tree.most_grand_kids()
    except NoGrandchildrenError:
        most = "-"

    table = Table(title="Family Tree Statistics")
    table.add_column("Measure", style="bold")
    table.add_column("Value", justify="right")

    table.add_row("Root", tree.root.name)
    table.add_row("Members", str(len(tree)))
    table.add_row("Generations", str(tree.generations()))
    table.add_row("Without kids", str(len(tree.get_people_without_kids())))
    table.add_row("Only children", str(len(tree.get_only_children())))
    table.add_row("Most grandkids", most)

    console.print(table)
