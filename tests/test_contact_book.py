# tests/test_contact_book.py

from __future__ import annotations

import pytest

from contact_book.core.exceptions import RecordNotFoundError, StorageError, ValidationError
from contact_book.models import Contact
from contact_book.registry.contact_book import ContactBook


# -----------------------------
# Search
# -----------------------------

def test_search_numeric_query_is_an_index_lookup(book):
    # "2" also appears inside phone numbers, but the index wins
    assert book.search("2") == [1]
    assert book.search("3") == [2]


def test_search_out_of_range_number_falls_back_to_text(book):
    assert book.search("555") == [0, 1, 2]
    assert book.search("0") == [0, 1]
    assert book.search("99") == [1]


def test_search_names_and_email_ignore_case(book):
    assert book.search("JOHN") == book.search("john") == [0, 1]
    assert book.search("EXAMPLE.COM") == [0, 1]


def test_search_phone_is_case_sensitive():
    b = ContactBook(contacts=[Contact("Ann", "Lee", "555-EXT", "")])
    assert b.search("EXT") == [0]
    assert b.search("ext") == []


def test_search_without_matches(book):
    assert book.search("nobody") == []


# -----------------------------
# Mutation
# -----------------------------

def test_remove_many_leaves_the_last_record(book, people):
    removed = book.remove_many({0, 1})

    assert len(book) == 1
    assert book.get(0) is people[2]
    assert removed == [people[0], people[1]]
    assert book.dirty


def test_remove_many_checks_every_position_first(book):
    with pytest.raises(IndexError):
        book.remove_many([0, 7])
    assert len(book) == 3
    assert not book.dirty


def test_replace_at_does_not_validate(book):
    blank = Contact("", "", "", "")
    book.replace_at(1, blank)
    assert book.get(1) is blank
    assert book.dirty


def test_add_rejects_record_without_phone_or_email(book):
    with pytest.raises(ValidationError):
        book.add(Contact("Zoe", "Kim", "", ""))
    assert len(book) == 3
    assert not book.dirty


def test_add_appends(book):
    assert book.add(Contact("Zoe", "Kim", "", "zoe@x.com")) == 3
    assert book.get(3).given_name == "Zoe"
    assert book.dirty


def test_edit_ignores_blank_values_and_replaces_slot(book):
    original = book.get(0)
    edited = book.edit(0, given_name="Johnny", phone="  ", email="")

    assert edited.given_name == "Johnny"
    assert edited.phone == "555-0100"
    assert book.get(0) is edited
    assert original.given_name == "John"


def test_edit_rejects_invalid_result():
    b = ContactBook(contacts=[Contact("", "", "555", "")])
    with pytest.raises(ValidationError):
        b.edit(0, phone="556")
    assert b.get(0).phone == "555"


def test_remove_at_shifts_positions(book, people):
    book.remove_at(0)
    assert book.get(0) is people[1]
    with pytest.raises(IndexError):
        book.get(2)


# -----------------------------
# Views
# -----------------------------

def test_sorted_positions(book):
    assert book.sorted_positions() == [0, 1, 2]
    assert book.sorted_positions("given_name") == [2, 0, 1]
    with pytest.raises(ValueError):
        book.sorted_positions("age")


def test_page_slices_and_counts():
    positions = list(range(25))
    rows, total = ContactBook.page(positions, 3, 10)
    assert rows == [20, 21, 22, 23, 24]
    assert total == 3

    rows, total = ContactBook.page([], 1, 10)
    assert rows == []
    assert total == 1


# -----------------------------
# Persistence
# -----------------------------

def test_load_replaces_collection_and_clears_dirty(contacts_file, book):
    book.dirty = True
    assert book.load(contacts_file) == 3
    assert book.get(2).given_name == "Bob"
    assert not book.dirty
    assert book.path == contacts_file


def test_failed_load_keeps_current_records(tmp_path, book, people):
    with pytest.raises(StorageError):
        book.load(tmp_path / "missing.csv")
    assert list(book) == people


def test_save_clears_dirty(tmp_path, book):
    book.add(Contact("Zoe", "Kim", "", "zoe@x.com"))
    target = tmp_path / "saved.csv"

    assert book.save(target) == 4
    assert not book.dirty
    assert target.read_text(encoding="utf-8").splitlines()[-1] == "Zoe,Kim,,zoe@x.com"


def test_failed_save_keeps_dirty(tmp_path, book):
    book.add(Contact("Zoe", "Kim", "", "zoe@x.com"))
    with pytest.raises(StorageError):
        book.save(tmp_path)  # a directory cannot be written as a file
    assert book.dirty


def test_save_without_any_path_fails():
    with pytest.raises(StorageError):
        ContactBook().save()


def test_search_case_rules_match_grouping():
    book = ContactBook(contacts=[Contact("Straße", "Lee", "555", "")])
    assert book.search("STRAßE") == [0]
    assert book.search("SS") == []


def test_unknown_position_raises_record_not_found(book):
    with pytest.raises(RecordNotFoundError):
        book.get(3)
    with pytest.raises(IndexError):
        book.remove_at(-1)
