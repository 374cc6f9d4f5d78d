from __future__ import annotations

from pathlib import Path
from typing import Callable, Dict, Optional, Tuple

import typer

from contact_book.cli import actions
from contact_book.cli.utils import console, info, report_error, warn
from contact_book.core.exceptions import ContactBookError
from contact_book.logging import get_logger, set_debug
from contact_book.registry.contact_book import ContactBook

log = get_logger("cli.shell")

MENU: Tuple[Tuple[str, str], ...] = (
    ("1", "Load contacts from file"),
    ("2", "Show all contacts"),
    ("3", "Add a contact"),
    ("4", "Edit a contact"),
    ("5", "Delete a contact"),
    ("6", "Merge duplicate contacts"),
    ("7", "Save contacts to file"),
    ("8", "Exit"),
)


def _show_menu() -> None:
    console.rule("Main menu")
    for key, label in MENU:
        console.print(f"{key}. {label}")


def _show_sorted(book: ContactBook) -> None:
    info("Sort by: 1 given name, 2 family name, 3 phone, 4 email, Enter for none")
    answer = typer.prompt("Sort", default="", show_default=False).strip()
    sort = {"1": "given", "2": "family", "3": "phone", "4": "email"}.get(answer)
    actions.show_contacts(book, sort=sort, interactive=True)


def run_shell(book: ContactBook) -> None:
    """Menu loop; returns only after a confirmed exit."""
    handlers: Dict[str, Callable[[ContactBook], object]] = {
        "1": actions.load_contacts,
        "2": _show_sorted,
        "3": actions.add_contact,
        "4": actions.edit_contact,
        "5": actions.delete_contact,
        "6": actions.merge_duplicates,
        "7": actions.save_contacts,
    }

    while True:
        _show_menu()
        choice = typer.prompt("Choose an option", default="", show_default=False).strip()

        if choice == "8":
            if actions.confirm_exit(book):
                return
            info("Back to the main menu.")
            continue

        handler = handlers.get(choice)
        if handler is None:
            warn("Invalid option. Try again.")
            continue

        log.debug("Menu option %s", choice)
        try:
            handler(book)
        except ContactBookError as exc:
            report_error(exc)


def shell_command(
    contacts: Optional[Path] = typer.Argument(
        None,
        help="Contacts file to load first (prompted if omitted)",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable debug logging",
    ),
):
    """
    Interactive contact book menu.
    """
    if verbose:
        set_debug(True)

    console.rule("Contact book")
    book = ContactBook()
    actions.load_contacts(book, str(contacts) if contacts is not None else None)
    run_shell(book)
