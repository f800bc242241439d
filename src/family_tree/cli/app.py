from __future__ import annotations

import typer

from family_tree.cli.commands import (
    childless_command,
    export_command,
    grandparent_command,
    most_grandkids_command,
    only_children_command,
    report_command,
    show_command,
    stats_command,
)

app = typer.Typer(
    name="family-tree",
    help="Family tree viewer and query tool",
    add_completion=False,
)

app.command("show")(show_command)
app.command("grandparent")(grandparent_command)
app.command("only-children")(only_children_command)
app.command("childless")(childless_command)
app.command("most-grandkids")(most_grandkids_command)
app.command("stats")(stats_command)
app.command("export")(export_command)
app.command("report")(report_command)


def main():
    app()


if __name__ == "__main__":
    main()
