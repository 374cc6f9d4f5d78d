from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer

from contact_book.cli.actions import SORT_FIELDS, show_contacts
from contact_book.cli.utils import open_book


def show_command(
    contacts: Path = typer.Argument(..., exists=True, readable=True, help="Contacts file"),
    sort: Optional[str] = typer.Option(
        None,
        "--sort",
        "-s",
        help=f"Sort by one of: {', '.join(SORT_FIELDS)}",
    ),
    page: int = typer.Option(1, "--page", "-p", min=1, help="Page to show"),
    page_size: Optional[int] = typer.Option(
        None,
        "--page-size",
        min=1,
        help="Contacts per page (default from config)",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable debug logging",
    ),
):
    """
    List contacts with their positions, one page at a time.
    """
    if sort is not None and sort not in SORT_FIELDS:
        raise typer.BadParameter(f"choose one of: {', '.join(SORT_FIELDS)}", param_hint="--sort")

    book = open_book(contacts, verbose=verbose)
    show_contacts(book, sort=sort, page=page, page_size=page_size)
