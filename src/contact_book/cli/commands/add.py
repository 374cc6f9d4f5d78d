from __future__ import annotations

from pathlib import Path

import typer

from contact_book.cli.actions import add_contact, name_problem
from contact_book.cli.utils import open_book, write_back
from contact_book.models import Contact


def add_command(
    contacts: Path = typer.Argument(..., help="Contacts file (created if missing)"),
    given: str = typer.Option("", "--given", "-g", help="Given name"),
    family: str = typer.Option("", "--family", "-f", help="Family name"),
    phone: str = typer.Option("", "--phone", help="Phone number"),
    email: str = typer.Option("", "--email", help="Email address"),
    yes: bool = typer.Option(False, "--yes", "-y", help="Do not ask for confirmation"),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable debug logging",
    ),
):
    """
    Add one contact. Without --given/--family the fields are prompted for.
    """
    given, family = given.strip(), family.strip()
    contact = None
    if given or family:
        for label, hint, value in (("Given name", "--given", given), ("Family name", "--family", family)):
            problem = name_problem(label, value)
            if problem is not None:
                raise typer.BadParameter(problem, param_hint=hint)
        contact = Contact(given, family, phone.strip(), email.strip())

    book = open_book(contacts, verbose=verbose, create=True)

    if not add_contact(book, contact, assume_yes=yes):
        raise typer.Exit(code=1)

    write_back(book)
