from __future__ import annotations

import math
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Iterable, Iterator, List, Optional, Tuple, Union

from contact_book.core.exceptions import RecordNotFoundError, StorageError, ValidationError
from contact_book.loader.file_loader import read_records, write_records
from contact_book.logging import get_logger
from contact_book.models import FIELD_NAMES, Contact, is_blank

log = get_logger(__name__)


@dataclass(slots=True)
class ContactBook:
    """
    In-memory ordered contact store.

    Positions are 0-based and contiguous; removing a record shifts every
    later record down by one. ``dirty`` is set by every structural or
    content change and cleared by a successful ``save`` or ``load``.
    """
    contacts: List[Contact] = field(default_factory=list)
    dirty: bool = False
    path: Optional[Path] = None

    def __len__(self) -> int:
        return len(self.contacts)

    def __iter__(self) -> Iterator[Contact]:
        return iter(self.contacts)

    def get(self, position: int) -> Contact:
        self._check_position(position)
        return self.contacts[position]

    # -----------------------------
    # Lookup
    # -----------------------------

    def search(self, query: str) -> List[int]:
        """
        Return matching positions for a user query.

        A query that parses as a valid 1-based position is an index lookup
        and returns only that position. Anything else is a substring search:
        names and email ignore case, phone is matched exactly as typed.
        """
        try:
            index = int(query)
        except ValueError:
            index = 0
        if 0 < index <= len(self.contacts):
            return [index - 1]

        needle = query.lower()
        matches: List[int] = []
        for position, contact in enumerate(self.contacts):
            if (
                needle in contact.given_name.lower()
                or needle in contact.family_name.lower()
                or query in contact.phone
                or needle in contact.email.lower()
            ):
                matches.append(position)
        log.debug("search %r matched %d record(s)", query, len(matches))
        return matches

    def sorted_positions(self, field_name: Optional[str] = None) -> List[int]:
        positions = list(range(len(self.contacts)))
        if not field_name:
            return positions
        if field_name not in FIELD_NAMES:
            raise ValueError(f"Unknown sort field: {field_name!r}")
        return sorted(positions, key=lambda p: getattr(self.contacts[p], field_name))

    @staticmethod
    def page(positions: List[int], page: int, page_size: int) -> Tuple[List[int], int]:
        """Return the slice for a 1-based page and the total page count."""
        if page_size <= 0:
            raise ValueError("page_size must be positive")
        total_pages = max(1, math.ceil(len(positions) / page_size))
        page = min(max(page, 1), total_pages)
        start = (page - 1) * page_size
        return positions[start:start + page_size], total_pages

    # -----------------------------
    # Mutation
    # -----------------------------

    def add(self, contact: Contact) -> int:
        """Append a contact after checking the add rule; returns its position."""
        if not contact.is_addable():
            raise ValidationError("Phone and email cannot both be blank.")
        return self.append(contact)

    def append(self, contact: Contact) -> int:
        self.contacts.append(contact)
        self.dirty = True
        log.debug("appended %s at %d", contact, len(self.contacts) - 1)
        return len(self.contacts) - 1

    def replace_at(self, position: int, contact: Contact) -> None:
        """Replace the record in a slot. No validation happens here."""
        self._check_position(position)
        self.contacts[position] = contact
        self.dirty = True

    def edit(self, position: int, **changes: Any) -> Contact:
        """
        Build the edited record, validate it, and store it at `position`.

        Blank replacement values keep the current field value.
        """
        current = self.get(position)
        kept = {name: value for name, value in changes.items() if not is_blank(value)}
        edited = current.with_changes(**kept)

        if not edited.is_valid_after_edit():
            if not edited.is_addable():
                raise ValidationError("Phone and email cannot both be blank.")
            raise ValidationError("Given name and family name cannot both be blank.")

        self.replace_at(position, edited)
        return edited

    def remove_at(self, position: int) -> Contact:
        self._check_position(position)
        removed = self.contacts.pop(position)
        self.dirty = True
        return removed

    def remove_many(self, positions: Iterable[int]) -> List[Contact]:
        """
        Remove several positions at once.

        Positions are removed from highest to lowest so pending positions
        never move. All positions are checked before anything is removed.
        Returns the removed contacts in ascending position order.
        """
        unique = sorted(set(positions), reverse=True)
        for position in unique:
            self._check_position(position)

        removed = [self.contacts.pop(position) for position in unique]
        if removed:
            self.dirty = True
            log.debug("removed positions %s", sorted(unique))
        removed.reverse()
        return removed

    # -----------------------------
    # Persistence
    # -----------------------------

    def load(self, path: Union[str, Path]) -> int:
        """
        Replace the collection with the records of `path`.

        On failure the current collection is left untouched.
        """
        file_path = Path(path)
        try:
            contacts = read_records(file_path)
        except OSError as exc:
            log.error("Could not load %s: %s", file_path, exc)
            raise StorageError(f"Could not read '{file_path}': {exc}") from exc

        self.contacts = contacts
        self.dirty = False
        self.path = file_path
        log.info("Loaded %d contacts from %s", len(contacts), file_path)
        return len(contacts)

    def save(self, path: Union[str, Path, None] = None) -> int:
        """Write the collection; the dirty flag stays set if writing fails."""
        target = Path(path) if path is not None else self.path
        if target is None:
            raise StorageError("No file to save to.")

        try:
            count = write_records(target, self.contacts)
        except OSError as exc:
            log.error("Could not save %s: %s", target, exc)
            raise StorageError(f"Could not write '{target}': {exc}") from exc

        self.dirty = False
        self.path = target
        log.info("Saved %d contacts to %s", count, target)
        return count

    def _check_position(self, position: int) -> None:
        if not 0 <= position < len(self.contacts):
            raise RecordNotFoundError(f"Position {position} out of range (0..{len(self.contacts) - 1})")
