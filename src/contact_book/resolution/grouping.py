"""
Duplicate detection for contacts.

Records are partitioned by three exact keys (full name, phone, email).
Every key value shared by more than one record is a candidate group.
Candidates are accepted name-first, then phone, then email; a candidate that
shares any position with an already accepted group is dropped whole, so the
reported groups never overlap.
"""

from __future__ import annotations

from typing import Callable, Dict, List, Sequence, Tuple

from contact_book.logging import get_logger
from contact_book.models import Contact

log = get_logger("grouping")

KeyFunction = Callable[[Contact], str]

# ---------------------------------------------------------------------------
# Key functions (an empty key keeps the record out of that partition)
# ---------------------------------------------------------------------------

def name_key(contact: Contact) -> str:
    return f"{contact.given_name.lower()} {contact.family_name.lower()}".strip()


def phone_key(contact: Contact) -> str:
    return contact.phone


def email_key(contact: Contact) -> str:
    return contact.email.lower()


# Acceptance order matters: earlier keys win overlapping positions.
KEY_FUNCTIONS: Tuple[Tuple[str, KeyFunction], ...] = (
    ("name", name_key),
    ("phone", phone_key),
    ("email", email_key),
)

# ---------------------------------------------------------------------------
# Partitioning
# ---------------------------------------------------------------------------

def partition(records: Sequence[Contact], key: KeyFunction) -> Dict[str, List[int]]:
    """
    Map each non-empty key to the positions that produce it.

    Keys keep first-seen order and positions keep collection order.
    """
    buckets: Dict[str, List[int]] = {}
    for position, contact in enumerate(records):
        value = key(contact)
        if not value:
            continue
        buckets.setdefault(value, []).append(position)
    return buckets


def candidate_groups(records: Sequence[Contact], key: KeyFunction) -> List[List[int]]:
    return [positions for positions in partition(records, key).values() if len(positions) > 1]


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def describe_groups(records: Sequence[Contact]) -> List[Tuple[str, List[int]]]:
    """
    Like find_duplicate_groups(), but each group is paired with the label
    of the key that produced it.
    """
    accepted: List[Tuple[str, List[int]]] = []
    claimed: set[int] = set()

    if len(records) < 2:
        return accepted

    for label, key in KEY_FUNCTIONS:
        for group in candidate_groups(records, key):
            if claimed.intersection(group):
                log.debug("Dropping %s group %s: overlaps an accepted group", label, group)
                continue
            accepted.append((label, group))
            claimed.update(group)

    log.info("Found %d duplicate group(s) in %d records", len(accepted), len(records))
    return accepted


def find_duplicate_groups(records: Sequence[Contact]) -> List[List[int]]:
    """Return pairwise-disjoint groups of duplicate positions, in acceptance order."""
    return [group for _, group in describe_groups(records)]
