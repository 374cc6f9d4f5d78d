# tests/test_models.py

from __future__ import annotations

from dataclasses import replace

from contact_book.models import NAME_LIMIT, Contact
from contact_book.resolution import find_duplicate_groups


def test_long_given_name_is_truncated_on_construction():
    c = Contact(given_name="A" * 20, family_name="Lee", phone="1")
    assert c.given_name == "A" * NAME_LIMIT
    assert len(c.given_name) == 16


def test_truncation_applies_to_assignment_and_replace():
    c = Contact("Ann", "Lee", "1", "")
    c.family_name = "Abcdefghijklmnopqrstuvwxyz"
    assert c.family_name == "Abcdefghijklmnop"

    r = replace(c, given_name="X" * 30)
    assert r.given_name == "X" * 16

    edited = c.with_changes(given_name="Y" * 17)
    assert edited.given_name == "Y" * 16
    assert c.given_name == "Ann"


def test_phone_and_email_are_not_truncated():
    c = Contact("Ann", "Lee", "1" * 40, "a" * 40 + "@x.com")
    assert len(c.phone) == 40
    assert c.email.startswith("a" * 40)


def test_none_is_stored_as_empty_string():
    c = Contact("Ann", None, None, "ann@x.com")
    assert c.family_name == ""
    assert c.phone == ""


def test_equality_ignores_case_and_contact_fields():
    a = Contact("Ann", "Lee", "555", "ann@x.com")
    b = Contact("ANN", "lee", "999", "")
    c = Contact("Ann", "Leeds", "555", "ann@x.com")

    assert a == b
    assert hash(a) == hash(b)
    assert a != c
    assert a != "Ann Lee"


def test_addable_requires_phone_or_email():
    assert Contact("Ann", "Lee", "555", "").is_addable()
    assert Contact("Ann", "Lee", "", "ann@x.com").is_addable()
    assert not Contact("Ann", "Lee", "", "").is_addable()
    assert not Contact("Ann", "Lee", "  ", " ").is_addable()


def test_valid_after_edit_also_requires_a_name():
    assert Contact("", "Lee", "555", "").is_valid_after_edit()
    assert not Contact("", " ", "555", "").is_valid_after_edit()
    assert not Contact("Ann", "Lee", "", "").is_valid_after_edit()


def test_display_form():
    c = Contact("Ann", "Lee", "555", "ann@x.com")
    assert str(c) == "Ann Lee | Tel: 555 | Email: ann@x.com"
    assert c.as_tuple() == ("Ann", "Lee", "555", "ann@x.com")


def test_equality_agrees_with_name_grouping():
    records = [
        Contact("Straße", "Lee", "1", ""),
        Contact("STRASSE", "Lee", "2", ""),
        Contact("STRASSE", "LEE", "3", ""),
    ]

    assert records[0] != records[1]
    assert records[1] == records[2]
    assert find_duplicate_groups(records) == [[1, 2]]
