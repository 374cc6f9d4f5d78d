"""
Interactive operations shared by the one-shot commands and the menu shell.

Every function works on an in-memory ContactBook, prompts through typer and
prints through the shared rich console. They return True when the book was
changed, so callers know whether a save is due.
"""

from __future__ import annotations

from pathlib import Path
from typing import Dict, Optional

import typer
from rich.text import Text

from contact_book.cli.utils import console, contacts_table, info, pick_one, success, warn
from contact_book.config import get_config
from contact_book.core.exceptions import StorageError, ValidationError
from contact_book.loader.file_locator import resolve_input_path, resolve_output_path
from contact_book.logging import get_logger
from contact_book.models import NAME_LIMIT, Contact
from contact_book.registry.contact_book import ContactBook
from contact_book.resolution.workflow import MergeSession, parse_selection

log = get_logger("cli.actions")

SORT_FIELDS: Dict[str, str] = {
    "given": "given_name",
    "family": "family_name",
    "phone": "phone",
    "email": "email",
}


def _ask(label: str, default: str = "") -> str:
    return typer.prompt(label, default=default, show_default=bool(default)).strip()


def _show(contact: Contact) -> None:
    console.print(Text(str(contact)))


# ---------------------------------------------------------
# Listing
# ---------------------------------------------------------
def show_contacts(
    book: ContactBook,
    *,
    sort: Optional[str] = None,
    page: int = 1,
    page_size: Optional[int] = None,
    interactive: bool = False,
) -> None:
    if not len(book):
        info("No contacts to show.")
        return

    size = page_size or get_config().page_size
    positions = book.sorted_positions(SORT_FIELDS.get(sort or "", sort))

    while True:
        rows, total_pages = book.page(positions, page, size)
        page = min(max(page, 1), total_pages)
        console.print(contacts_table(book, rows, title=f"Contacts (page {page} of {total_pages})"))
        info(f"Showing {len(rows)} of {len(positions)} contacts")

        if not interactive or total_pages == 1:
            return

        choices = ["M = menu"]
        if page > 1:
            choices.append("P = previous")
        if page < total_pages:
            choices.append("N = next")
        answer = _ask(", ".join(choices), default="M").upper()

        if answer == "N" and page < total_pages:
            page += 1
        elif answer == "P" and page > 1:
            page -= 1
        elif answer == "M":
            return
        else:
            warn("Invalid option.")


# ---------------------------------------------------------
# Add / edit / delete
# ---------------------------------------------------------
def name_problem(label: str, value: str) -> Optional[str]:
    """Why `value` cannot be used as a name, or None when it can."""
    if not value:
        return f"{label} is required."
    if len(value) > NAME_LIMIT:
        return f"{label} cannot be longer than {NAME_LIMIT} characters."
    return None


def _prompt_name(label: str) -> str:
    while True:
        value = _ask(f"{label} (max {NAME_LIMIT} characters)")
        problem = name_problem(label, value)
        if problem is None:
            return value
        warn(problem)


def add_contact(book: ContactBook, contact: Optional[Contact] = None, *, assume_yes: bool = False) -> bool:
    if contact is None:
        given = _prompt_name("Given name")
        family = _prompt_name("Family name")
        contact = Contact(given, family, _ask("Phone"), _ask("Email"))

    if not contact.is_addable():
        warn("Phone and email cannot both be blank.")
        return False

    if contact in book.contacts:
        warn(f"A contact named '{contact.given_name} {contact.family_name}' already exists.")

    info("\nNew contact:")
    _show(contact)
    if not assume_yes and not typer.confirm("Add this contact?", default=False):
        info("Operation cancelled. The contact was not added.")
        return False

    try:
        book.add(contact)
    except ValidationError as exc:
        warn(str(exc))
        return False
    success("Contact added.")
    return True


def find_one(book: ContactBook, action: str, query: Optional[str] = None) -> Optional[int]:
    if not len(book):
        info(f"No contacts to {action}.")
        return None

    if query is None:
        query = _ask("Search by position or text (blank to cancel)")
    if not query:
        info("Operation cancelled.")
        return None

    matches = book.search(query)
    if not matches:
        warn("No contacts match that search.")
        return None
    return pick_one(book, matches, action)


def edit_contact(book: ContactBook, query: Optional[str] = None) -> bool:
    position = find_one(book, "edit", query)
    if position is None:
        return False

    current = book.get(position)
    _show(current)
    info("Fields: 1 given name, 2 family name, 3 phone, 4 email, 5 all, 0 cancel")
    option = _ask("Field to edit", default="0")
    fields_by_option = {
        "1": ("given_name",),
        "2": ("family_name",),
        "3": ("phone",),
        "4": ("email",),
        "5": ("given_name", "family_name", "phone", "email"),
    }
    if option == "0":
        info("Operation cancelled.")
        return False
    if option not in fields_by_option:
        warn("Invalid option.")
        return False

    changes = {
        name: _ask(f"New {name.replace('_', ' ')} [{getattr(current, name)}]")
        for name in fields_by_option[option]
    }
    preview = current.with_changes(**{k: v for k, v in changes.items() if v})
    if not preview.is_valid_after_edit():
        warn("A contact needs a name and a phone or email.")
        return False

    info("\nEdited contact:")
    _show(preview)
    if not typer.confirm("Save the changes?", default=False):
        info("Operation cancelled. The contact was not changed.")
        return False

    try:
        book.edit(position, **changes)
    except ValidationError as exc:
        warn(str(exc))
        return False
    success("Contact updated.")
    return True


def delete_contact(book: ContactBook, query: Optional[str] = None) -> bool:
    position = find_one(book, "delete", query)
    if position is None:
        return False

    _show(book.get(position))
    if not typer.confirm("Delete this contact?", default=False):
        info("Operation cancelled. The contact was not deleted.")
        return False

    book.remove_at(position)
    success("Contact deleted.")
    return True


# ---------------------------------------------------------
# Duplicates
# ---------------------------------------------------------
def merge_duplicates(book: ContactBook) -> bool:
    if len(book) <= 1:
        info("Not enough contacts to look for duplicates.")
        return False

    session = MergeSession(book)
    if not session.total:
        info("No duplicate contacts found.")
        return False

    index = 0
    while (outcome := session.next_group()) is not None:
        index += 1
        console.rule(f"Duplicates ({index}/{session.total}, matched by {outcome.key})")
        for number, contact in enumerate(session.members(), start=1):
            console.print(f"{number}. ", end="")
            _show(contact)

        info("\nProposed merged contact:")
        _show(outcome.proposal)

        if not typer.confirm("Add this merged contact?", default=False):
            session.reject()
            info("The merged contact was not added.")
            continue

        session.accept()
        success("Merged contact added.")
        answer = _ask(
            "Which duplicates should be deleted? Numbers separated by commas, "
            "'all' for every one, blank for none"
        )
        outcome = session.cleanup(parse_selection(answer, len(outcome.group)))
        info(f"Deleted {len(outcome.removed)} duplicate(s).")

    if session.changed:
        success("Duplicate merge finished.")
    else:
        info("No changes were made.")
    return session.changed


# ---------------------------------------------------------
# Files
# ---------------------------------------------------------
def load_contacts(book: ContactBook, path_text: Optional[str] = None) -> bool:
    if path_text is None:
        path_text = _ask("File to load (blank to cancel)")
    path = resolve_input_path(path_text)
    if path is None:
        info("Operation cancelled. No file given.")
        return False

    try:
        count = book.load(path)
    except StorageError as exc:
        warn(str(exc))
        return False
    success(f"Loaded {count} contacts from '{path}'.")
    return True


def save_contacts(book: ContactBook, path_text: Optional[str] = None, *, overwrite: bool = False) -> bool:
    if path_text is None:
        default = str(book.path) if book.path else ""
        path_text = _ask("File to save to", default=default)
    path = resolve_output_path(path_text)
    if path is None:
        info("Operation cancelled. No file given.")
        return False

    target = Path(path)
    if target.exists() and not overwrite:
        if not typer.confirm(f"'{target}' already exists. Overwrite it?", default=False):
            info("Operation cancelled. The file was not overwritten.")
            return False

    try:
        count = book.save(target)
    except StorageError as exc:
        warn(str(exc))
        return False
    success(f"Saved {count} contacts to '{target}'.")
    return True


def confirm_exit(book: ContactBook) -> bool:
    if book.dirty:
        warn("There are unsaved changes.")
        leave = typer.confirm("Exit and DISCARD the changes?", default=False)
    else:
        leave = typer.confirm("Are you sure you want to exit?", default=False)

    if leave:
        log.info("Exiting shell (unsaved changes discarded: %s)", book.dirty)
        info("Goodbye.")
    return leave
