from __future__ import annotations

from typing import Sequence

from contact_book.models import FIELD_NAMES, Contact


def propose_merge(records: Sequence[Contact], group: Sequence[int]) -> Contact:
    """
    Build one contact from a duplicate group.

    The first member seeds every field. Later members, in group order, only
    fill fields that are still empty; a non-empty field is never replaced.
    The result is not validated.
    """
    if not group:
        raise ValueError("Cannot merge an empty group")
    for position in group:
        if not 0 <= position < len(records):
            raise IndexError(f"Position {position} out of range")

    first = records[group[0]]
    merged = Contact(*first.as_tuple())

    for position in group[1:]:
        other = records[position]
        for name in FIELD_NAMES:
            value = getattr(other, name)
            if not getattr(merged, name) and value:
                setattr(merged, name, value)

    return merged
