from __future__ import annotations

from pathlib import Path

import typer

from family_tree.cli.utils import echo_plain, fail, load_family_tree
from family_tree.config import get_config
from family_tree.core.exceptions import FamilyTreeError, NoGrandchildrenError


def report_command(
    tree_file: Path = typer.Argument(..., exists=True, readable=True),
    member: str = typer.Option(
        "Kevin",
        "--member",
        "-m",
        help="Member whose grandparent is reported",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable rich logging",
    ),
):
    """
    Print every query in one report, followed by the tree diagram.
    """
    tree = load_family_tree(tree_file, verbose=verbose)

    try:
        grandparent = tree.get_grandparent(member)
    except FamilyTreeError as exc:
        fail(exc)

    try:
        most = f"{tree.most_grand_kids()} has the most grandkids"
    except NoGrandchildrenError:
        most = "Nobody has grandkids"

    label = grandparent if grandparent is not None else get_config().no_grandparent_label
    echo_plain(f"The grandparent of {member} is {label}")
    echo_plain("The people who have no siblings are: " + " ".join(tree.get_only_children()))
    echo_plain("The people who don't have kids are: " + " ".join(tree.get_people_without_kids()))
    echo_plain(most)
    echo_plain(tree.render())
