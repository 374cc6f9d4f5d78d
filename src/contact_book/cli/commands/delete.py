from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer

from contact_book.cli.actions import delete_contact
from contact_book.cli.utils import open_book, write_back


def delete_command(
    contacts: Path = typer.Argument(..., exists=True, readable=True, help="Contacts file"),
    query: Optional[str] = typer.Argument(
        None,
        help="Position or text to search for (prompted if omitted)",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable debug logging",
    ),
):
    """
    Search for a contact and delete it after confirmation.
    """
    book = open_book(contacts, verbose=verbose)
    if delete_contact(book, query):
        write_back(book)
