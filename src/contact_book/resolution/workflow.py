"""
Operator-driven merge and cleanup of duplicate groups.

Each group moves through:

    PRESENTED -> REJECTED
    PRESENTED -> ADDED -> DELETED_ALL | DELETED_SELECTED | KEPT_ALL

Groups are handled one at a time in discovery order and are never revisited.
The merged contact is appended to the end of the book, so the positions of
the group being handled stay valid while the operator picks what to delete.
After a deletion the positions of the groups still pending are shifted down
to follow the records they point at.
"""

from __future__ import annotations

from bisect import bisect_left
from collections import deque
from dataclasses import dataclass, field
from enum import Enum
from typing import Deque, Iterable, List, Optional, Sequence, Tuple

from contact_book.core.exceptions import MergeStateError
from contact_book.logging import get_logger
from contact_book.models import Contact
from contact_book.registry.contact_book import ContactBook
from contact_book.resolution.grouping import describe_groups
from contact_book.resolution.merge import propose_merge

log = get_logger("merge_workflow")

ALL_KEYWORDS = frozenset({"todos", "all", "*"})


class GroupState(Enum):
    PRESENTED = "presented"
    REJECTED = "rejected"
    ADDED = "added"
    DELETED_ALL = "deleted_all"
    DELETED_SELECTED = "deleted_selected"
    KEPT_ALL = "kept_all"


class DeletionMode(Enum):
    ALL = "all"
    SELECTED = "selected"
    NONE = "none"


@dataclass(frozen=True)
class Deletion:
    """Which members of the current group to remove, by 1-based member number."""
    mode: DeletionMode
    members: Tuple[int, ...] = ()

    @classmethod
    def all(cls) -> "Deletion":
        return cls(DeletionMode.ALL)

    @classmethod
    def none(cls) -> "Deletion":
        return cls(DeletionMode.NONE)

    @classmethod
    def selected(cls, members: Iterable[int]) -> "Deletion":
        return cls(DeletionMode.SELECTED, tuple(members))

    def positions(self, group: Sequence[int]) -> List[int]:
        if self.mode is DeletionMode.ALL:
            return list(group)
        if self.mode is DeletionMode.NONE:
            return []
        return [group[n - 1] for n in self.members if 1 <= n <= len(group)]


def parse_selection(text: str, group_size: int) -> Deletion:
    """
    Turn operator input into a Deletion.

    "todos"/"all" deletes the whole group, blank keeps everything, and a
    comma-separated list picks members by number. Tokens that are not
    numbers in 1..group_size are ignored.
    """
    cleaned = (text or "").strip().lower()
    if cleaned in ALL_KEYWORDS:
        return Deletion.all()
    if not cleaned:
        return Deletion.none()

    members: List[int] = []
    for token in cleaned.split(","):
        try:
            number = int(token.strip())
        except ValueError:
            continue
        if 1 <= number <= group_size and number not in members:
            members.append(number)

    return Deletion.selected(members) if members else Deletion.none()


def shift_positions(group: Sequence[int], removed: Iterable[int]) -> List[int]:
    """Shift each position down by the number of removed positions below it."""
    below = sorted(removed)
    return [position - bisect_left(below, position) for position in group]


@dataclass
class MergeOutcome:
    group: List[int]
    key: str
    proposal: Contact
    state: GroupState = GroupState.PRESENTED
    removed: List[Contact] = field(default_factory=list)


class MergeSession:
    """
    Walks the duplicate groups of a ContactBook.

    Usage:
        session = MergeSession(book)
        while (outcome := session.next_group()) is not None:
            ... show outcome.group / outcome.proposal ...
            if accepted:
                session.accept()
                session.cleanup(parse_selection(answer, len(outcome.group)))
            else:
                session.reject()
    """

    def __init__(self, book: ContactBook) -> None:
        self.book = book
        self._pending: Deque[Tuple[str, List[int]]] = deque(describe_groups(book.contacts))
        self.total = len(self._pending)
        self.outcomes: List[MergeOutcome] = []
        self._current: Optional[MergeOutcome] = None

    @property
    def changed(self) -> bool:
        return any(o.state is not GroupState.REJECTED for o in self.outcomes)

    def next_group(self) -> Optional[MergeOutcome]:
        if self._current is not None and self._current.state in (
            GroupState.PRESENTED,
            GroupState.ADDED,
        ):
            raise MergeStateError("Finish the current group before moving on.")
        if not self._pending:
            self._current = None
            return None

        key, group = self._pending.popleft()
        outcome = MergeOutcome(
            group=group,
            key=key,
            proposal=propose_merge(self.book.contacts, group),
        )
        self.outcomes.append(outcome)
        self._current = outcome
        log.debug("Presenting %s group %s", key, group)
        return outcome

    def members(self) -> List[Contact]:
        outcome = self._require(GroupState.PRESENTED, GroupState.ADDED)
        return [self.book.contacts[p] for p in outcome.group]

    def reject(self) -> MergeOutcome:
        outcome = self._require(GroupState.PRESENTED)
        outcome.state = GroupState.REJECTED
        log.info("Merged contact for group %s rejected", outcome.group)
        return outcome

    def accept(self) -> int:
        """Append the proposal to the book; returns its position."""
        outcome = self._require(GroupState.PRESENTED)
        position = self.book.append(outcome.proposal)
        outcome.state = GroupState.ADDED
        log.info("Merged contact %s added at %d", outcome.proposal, position)
        return position

    def cleanup(self, deletion: Deletion) -> MergeOutcome:
        outcome = self._require(GroupState.ADDED)
        positions = deletion.positions(outcome.group)

        outcome.removed = self.book.remove_many(positions)
        if deletion.mode is DeletionMode.ALL:
            outcome.state = GroupState.DELETED_ALL
        elif positions:
            outcome.state = GroupState.DELETED_SELECTED
        else:
            outcome.state = GroupState.KEPT_ALL

        if positions:
            self._pending = deque(
                (key, shift_positions(group, positions)) for key, group in self._pending
            )
        log.info("Group %s: removed %d original(s)", outcome.group, len(outcome.removed))
        return outcome

    def _require(self, *states: GroupState) -> MergeOutcome:
        outcome = self._current
        if outcome is None or outcome.state not in states:
            current = outcome.state.value if outcome else "none"
            raise MergeStateError(f"Merge step not allowed in state '{current}'.")
        return outcome
