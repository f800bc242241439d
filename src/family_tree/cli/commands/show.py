from __future__ import annotations

from pathlib import Path

import typer

from family_tree.cli.utils import echo_plain, load_family_tree


def show_command(
    tree_file: Path = typer.Argument(..., exists=True, readable=True),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable rich logging",
    ),
):
    """
    Print the family tree as a diagram.
    """
    tree = load_family_tree(tree_file, verbose=verbose)
    echo_plain(tree.render())
