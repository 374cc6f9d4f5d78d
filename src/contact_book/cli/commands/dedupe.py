from __future__ import annotations

from pathlib import Path

import typer
from rich.table import Table
from rich.text import Text

from contact_book.cli.actions import merge_duplicates
from contact_book.cli.utils import console, info, open_book, write_back
from contact_book.resolution.grouping import describe_groups
from contact_book.resolution.merge import propose_merge


def dedupe_command(
    contacts: Path = typer.Argument(..., exists=True, readable=True, help="Contacts file"),
    list_only: bool = typer.Option(
        False,
        "--list",
        "-l",
        help="Only list duplicate groups and proposed merges; change nothing",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable debug logging",
    ),
):
    """
    Find duplicate contacts and merge them group by group.
    """
    book = open_book(contacts, verbose=verbose)

    if list_only:
        groups = describe_groups(book.contacts)
        if not groups:
            info("No duplicate contacts found.")
            return

        table = Table(title="Duplicate groups")
        table.add_column("Group", justify="right", style="bold")
        table.add_column("Key")
        table.add_column("Positions")
        table.add_column("Proposed merge")
        for number, (key, group) in enumerate(groups, start=1):
            table.add_row(
                str(number),
                key,
                ", ".join(str(p + 1) for p in group),
                Text(str(propose_merge(book.contacts, group))),
            )
        console.print(table)
        return

    if merge_duplicates(book):
        write_back(book)
