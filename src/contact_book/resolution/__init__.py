"""
Duplicate detection and merging.

Re-exports the grouping, merge and workflow entry points.
"""

from contact_book.resolution.grouping import (
    KEY_FUNCTIONS,
    describe_groups,
    email_key,
    find_duplicate_groups,
    name_key,
    phone_key,
)
from contact_book.resolution.merge import propose_merge
from contact_book.resolution.workflow import (
    Deletion,
    DeletionMode,
    GroupState,
    MergeOutcome,
    MergeSession,
    parse_selection,
    shift_positions,
)

__all__ = [
    "KEY_FUNCTIONS",
    "describe_groups",
    "email_key",
    "find_duplicate_groups",
    "name_key",
    "phone_key",
    "propose_merge",
    "Deletion",
    "DeletionMode",
    "GroupState",
    "MergeOutcome",
    "MergeSession",
    "parse_selection",
    "shift_positions",
]
