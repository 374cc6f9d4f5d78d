from __future__ import annotations

from pathlib import Path
from typing import Iterable, Iterator, Union

from contact_book.loader.codec import decode_record, encode_record
from contact_book.logging import get_logger
from contact_book.models import Contact

log = get_logger(__name__)


def iter_records(path: Union[str, Path]) -> Iterator[Contact]:
    """
    Yield a Contact for every decodable line of a contacts file.

    Blank lines and lines that do not split into four fields are skipped
    without being reported. A leading UTF-8 byte-order mark is dropped.

    Raises:
        FileNotFoundError: if `path` is not an existing file.
    """
    file_path = Path(path)

    if not file_path.is_file():
        raise FileNotFoundError(f"Contacts file not found: {file_path}")

    with file_path.open("r", encoding="utf-8-sig", errors="replace") as f:
        for lineno, raw_line in enumerate(f, start=1):
            if not raw_line.strip():
                continue

            contact = decode_record(raw_line)
            if contact is None:
                log.debug("Skipping malformed line %d in %s", lineno, file_path)
                continue

            yield contact


def read_records(path: Union[str, Path]) -> list[Contact]:
    return list(iter_records(path))


def write_records(path: Union[str, Path], contacts: Iterable[Contact]) -> int:
    """Write every contact as one line; returns the number of lines written."""
    file_path = Path(path)
    lines = [encode_record(contact) for contact in contacts]

    with file_path.open("w", encoding="utf-8", newline="\n") as f:
        for line in lines:
            f.write(line + "\n")

    return len(lines)
