# src/contact_book/loader/__init__.py

"""
Public interface for the contacts file stack.

Intended usage from other parts of the project and tests:

    from contact_book.loader import (
        decode_record,
        encode_record,
        iter_records,
        read_records,
        write_records,
        resolve_input_path,
        resolve_output_path,
    )
"""

from __future__ import annotations

from .codec import decode_record, encode_record
from .file_loader import iter_records, read_records, write_records
from .file_locator import resolve_input_path, resolve_output_path

__all__ = [
    "decode_record",
    "encode_record",
    "iter_records",
    "read_records",
    "write_records",
    "resolve_input_path",
    "resolve_output_path",
]
