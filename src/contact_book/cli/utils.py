from __future__ import annotations

import time
from pathlib import Path
from typing import Iterable, Optional, Sequence

import typer
from rich.console import Console
from rich.table import Table
from rich.text import Text

from contact_book.core.exceptions import ContactBookError
from contact_book.logging import get_logger, set_debug
from contact_book.registry.contact_book import ContactBook

console = Console()
log = get_logger("cli")


def load_book(path: Path, *, verbose: bool = False) -> ContactBook:
    """
    Load a contacts file into a fresh ContactBook.
    """
    if verbose:
        set_debug(True)

    t0 = time.perf_counter()
    book = ContactBook()
    book.load(path)
    elapsed = time.perf_counter() - t0

    if verbose:
        console.log(f"Loaded {len(book)} contacts in {elapsed:.3f}s")

    return book


def contacts_table(
    book: ContactBook,
    positions: Iterable[int],
    *,
    title: str = "Contacts",
    numbered: bool = False,
) -> Table:
    """
    Build a table of contacts.

    The first column holds the 1-based book position, or the 1-based row
    number when `numbered` is set (used for pick lists).
    """
    table = Table(title=title)
    table.add_column("#" if numbered else "ID", justify="right", style="bold")
    table.add_column("Given name")
    table.add_column("Family name")
    table.add_column("Phone")
    table.add_column("Email")

    for row, position in enumerate(positions, start=1):
        contact = book.contacts[position]
        label = row if numbered else position + 1
        table.add_row(str(label), *(Text(value) for value in contact.as_tuple()))
    return table


def pick_one(book: ContactBook, positions: Sequence[int], action: str) -> Optional[int]:
    """
    Show the matches and ask which one to act on.

    Returns the chosen book position, or None when the operator cancels
    (0) or types something invalid.
    """
    console.print(f"\nFound {len(positions)} match(es):")
    console.print(contacts_table(book, positions, title="Matches", numbered=True))

    answer = typer.prompt(f"Number of the contact to {action} (0 to cancel)", default="0")
    try:
        choice = int(answer)
    except ValueError:
        warn("Invalid selection.")
        return None

    if choice == 0:
        info("Operation cancelled.")
        return None
    if not 1 <= choice <= len(positions):
        warn("Invalid selection.")
        return None
    return positions[choice - 1]


def info(message: str) -> None:
    console.print(message)


def success(message: str) -> None:
    console.print(f"[green]{message}[/green]")


def warn(message: str) -> None:
    console.print(f"[yellow]{message}[/yellow]")


def report_error(exc: ContactBookError) -> None:
    log.debug("Command failed: %s", exc)
    console.print(f"[red]Error:[/red] {exc}")


def open_book(path: Path, *, verbose: bool = False, create: bool = False) -> ContactBook:
    """
    load_book() for commands: a missing file either starts an empty book
    (`create`) or ends the command with exit code 1.
    """
    if create and not path.exists():
        if verbose:
            set_debug(True)
        info(f"'{path}' does not exist yet; starting an empty contact list.")
        return ContactBook(path=path)

    try:
        return load_book(path, verbose=verbose)
    except ContactBookError as exc:
        report_error(exc)
        raise typer.Exit(code=1) from exc


def write_back(book: ContactBook) -> None:
    """Save a changed book to the file it came from."""
    if not book.dirty:
        return
    try:
        count = book.save()
    except ContactBookError as exc:
        report_error(exc)
        raise typer.Exit(code=1) from exc
    success(f"Saved {count} contacts to '{book.path}'.")
