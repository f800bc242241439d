from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer

from family_tree.cli.utils import echo_plain, err_console, fail, load_family_tree
from family_tree.exporter import export_tree_json, tree_to_json


def export_command(
    tree_file: Path = typer.Argument(..., exists=True, readable=True),
    out: Optional[Path] = typer.Option(
        None,
        "--out",
        "-o",
        help="Write output to file instead of stdout",
    ),
    pretty: bool = typer.Option(
        False,
        "--pretty",
        help="Pretty-print JSON",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable rich logging",
    ),
):
    """
    Export the family tree as nested JSON (stdout by default).
    """
    tree = load_family_tree(tree_file, verbose=verbose)
    indent = 2 if pretty else None

    if out:
        try:
            export_tree_json(tree, out, indent=indent)
        except OSError as exc:
            fail(exc)
    else:
        echo_plain(tree_to_json(tree, indent=indent))

    if verbose:
        err_console.log("Export complete")
