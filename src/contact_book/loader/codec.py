# src/contact_book/loader/codec.py

from __future__ import annotations

from typing import Optional

from contact_book.models import Contact

DELIMITER = ","
FIELD_COUNT = 4


def _strip_eol(line: str) -> str:
    """Strip trailing CR/LF characters but preserve all other whitespace."""
    return line.rstrip("\r\n")


def decode_record(line: str) -> Optional[Contact]:
    """
    Decode one stored line into a Contact.

    The format is fixed and unquoted:
        <given>,<family>,<phone>,<email>

    The line is split on every comma and the first four parts are used, so
    extra parts are dropped. Lines with fewer than four parts return None.

    Examples:
        "Ann,Lee,555,ann@x.com"   -> Contact("Ann", "Lee", "555", "ann@x.com")
        "Ann,Lee,555,"            -> Contact("Ann", "Lee", "555", "")
        "Ann,Lee"                 -> None
    """
    parts = _strip_eol(line).split(DELIMITER)
    if len(parts) < FIELD_COUNT:
        return None

    given, family, phone, email = parts[:FIELD_COUNT]
    return Contact(given_name=given, family_name=family, phone=phone, email=email)


def encode_record(contact: Contact) -> str:
    """
    Encode a Contact as one stored line, in the same field order that
    decode_record() expects.

    Commas inside a field are written verbatim; such a line will not decode
    back to the same record.
    """
    return DELIMITER.join(contact.as_tuple())
