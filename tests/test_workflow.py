# tests/test_workflow.py

from __future__ import annotations

import pytest

from contact_book.core.exceptions import MergeStateError
from contact_book.models import Contact
from contact_book.registry.contact_book import ContactBook
from contact_book.resolution import (
    Deletion,
    DeletionMode,
    GroupState,
    MergeSession,
    parse_selection,
    shift_positions,
)


@pytest.fixture
def dup_book() -> ContactBook:
    return ContactBook(
        contacts=[
            Contact("Ann", "Lee", "555", "ann@x.com"),   # 0  name group with 2
            Contact("Bob", "Ray", "777", ""),            # 1  phone group with 3
            Contact("ann", "LEE", "", ""),               # 2
            Contact("Cid", "Poe", "777", "cid@x.com"),   # 3
            Contact("Dee", "Moe", "888", ""),            # 4
        ]
    )


def test_parse_selection():
    assert parse_selection("todos", 3).mode is DeletionMode.ALL
    assert parse_selection(" ALL ", 3).mode is DeletionMode.ALL
    assert parse_selection("", 3).mode is DeletionMode.NONE
    assert parse_selection("1, 3", 3) == Deletion.selected([1, 3])
    assert parse_selection("0,4,x,2,2", 3) == Deletion.selected([2])
    assert parse_selection("9", 3).mode is DeletionMode.NONE


def test_deletion_positions_map_member_numbers_to_positions():
    group = [4, 7, 9]
    assert Deletion.all().positions(group) == [4, 7, 9]
    assert Deletion.none().positions(group) == []
    assert Deletion.selected([3, 1]).positions(group) == [9, 4]


def test_shift_positions():
    assert shift_positions([1, 3, 6], [0, 2]) == [0, 1, 4]
    assert shift_positions([5], []) == [5]


def test_accept_and_delete_all_remaps_the_next_group(dup_book):
    session = MergeSession(dup_book)
    assert session.total == 2

    first = session.next_group()
    assert first.key == "name"
    assert first.group == [0, 2]
    assert first.proposal.as_tuple() == ("Ann", "Lee", "555", "ann@x.com")

    assert session.accept() == 5
    outcome = session.cleanup(Deletion.all())
    assert outcome.state is GroupState.DELETED_ALL
    assert [c.given_name for c in outcome.removed] == ["Ann", "ann"]
    assert [c.given_name for c in dup_book] == ["Bob", "Cid", "Dee", "Ann"]

    second = session.next_group()
    assert second.key == "phone"
    assert second.group == [0, 1]
    assert [c.given_name for c in session.members()] == ["Bob", "Cid"]
    assert second.proposal.as_tuple() == ("Bob", "Ray", "777", "cid@x.com")

    session.reject()
    assert session.next_group() is None
    assert session.changed
    assert len(dup_book) == 4


def test_delete_selected_and_keep_all(dup_book):
    session = MergeSession(dup_book)

    session.next_group()
    session.accept()
    assert session.cleanup(Deletion.selected([2])).state is GroupState.DELETED_SELECTED
    assert [c.given_name for c in dup_book] == ["Ann", "Bob", "Cid", "Dee", "Ann"]

    second = session.next_group()
    assert second.group == [1, 2]
    session.accept()
    assert session.cleanup(Deletion.none()).state is GroupState.KEPT_ALL
    assert len(dup_book) == 6


def test_rejecting_everything_changes_nothing(dup_book):
    session = MergeSession(dup_book)
    while session.next_group() is not None:
        session.reject()

    assert not session.changed
    assert not dup_book.dirty
    assert [o.state for o in session.outcomes] == [GroupState.REJECTED, GroupState.REJECTED]


def test_steps_out_of_order_raise(dup_book):
    session = MergeSession(dup_book)

    with pytest.raises(MergeStateError):
        session.accept()

    session.next_group()
    with pytest.raises(MergeStateError):
        session.cleanup(Deletion.all())
    with pytest.raises(MergeStateError):
        session.next_group()

    session.accept()
    with pytest.raises(MergeStateError):
        session.reject()
