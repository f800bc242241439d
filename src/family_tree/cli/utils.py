from __future__ import annotations

import time
from pathlib import Path
from typing import NoReturn

import typer
from rich.console import Console
from rich.markup import escape

from family_tree.core.exceptions import FamilyTreeError
from family_tree.loader import load_tree
from family_tree.logging import get_logger
from family_tree.tree import FamilyTree

console = Console()
err_console = Console(stderr=True)
log = get_logger("cli")


def fail(exc: Exception) -> NoReturn:
    """Report a library or file error and exit with status 1."""
    log.error(str(exc))
    err_console.print(f"[bold red]Error:[/bold red] {escape(str(exc))}")
    raise typer.Exit(code=1)


def load_family_tree(path: Path, *, verbose: bool = False) -> FamilyTree:
    """
    Load a tree file for a command, turning load errors into a clean exit.
    """
    t0 = time.perf_counter()

    try:
        tree = load_tree(path)
    except FamilyTreeError as exc:
        fail(exc)

    elapsed = time.perf_counter() - t0

    if verbose:
        err_console.log(f"Loaded {len(tree)} members in {elapsed:.3f}s")

    return tree


def echo_plain(text: str) -> None:
    """Print data output verbatim (no markup, no highlighting)."""
    console.print(text, markup=False, highlight=False, emoji=False, soft_wrap=True)
