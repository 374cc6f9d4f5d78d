from __future__ import annotations

from pathlib import Path

import typer

from contact_book.cli.utils import console, contacts_table, open_book, warn


def search_command(
    contacts: Path = typer.Argument(..., exists=True, readable=True, help="Contacts file"),
    query: str = typer.Argument(..., help="1-based position, or text to look for"),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable debug logging",
    ),
):
    """
    Find contacts by position, name, phone or email.
    """
    book = open_book(contacts, verbose=verbose)
    matches = book.search(query)

    if not matches:
        warn("No contacts match that search.")
        raise typer.Exit(code=1)

    console.print(contacts_table(book, matches, title=f"Matches for '{query}'"))
