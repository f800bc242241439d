from __future__ import annotations

from pathlib import Path

import typer

from family_tree.cli.utils import echo_plain, fail, load_family_tree
from family_tree.config import get_config
from family_tree.core.exceptions import FamilyTreeError


def grandparent_command(
    tree_file: Path = typer.Argument(..., exists=True, readable=True),
    name: str = typer.Argument(..., help="Member whose grandparent to look up"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable rich logging"),
):
    """
    Print the grandparent of a member.
    """
    tree = load_family_tree(tree_file, verbose=verbose)
    try:
        grandparent = tree.get_grandparent(name)
    except FamilyTreeError as exc:
        fail(exc)

    echo_plain(grandparent if grandparent is not None else get_config().no_grandparent_label)


def only_children_command(
    tree_file: Path = typer.Argument(..., exists=True, readable=True),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable rich logging"),
):
    """
    List members with no siblings (the root always counts).
    """
    tree = load_family_tree(tree_file, verbose=verbose)
    for name in tree.get_only_children():
        echo_plain(name)


def childless_command(
    tree_file: Path = typer.Argument(..., exists=True, readable=True),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable rich logging"),
):
    """
    List members without children.
    """
    tree = load_family_tree(tree_file, verbose=verbose)
    for name in tree.get_people_without_kids():
        echo_plain(name)


def most_grandkids_command(
    tree_file: Path = typer.Argument(..., exists=True, readable=True),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable rich logging"),
):
    """
    Print the member with the most grandchildren.
    """
    tree = load_family_tree(tree_file, verbose=verbose)
    try:
        echo_plain(tree.most_grand_kids())
    except FamilyTreeError as exc:
        fail(exc)
