import os
import sys
from pathlib import Path

import pytest

# Ensure the project src directory is on sys.path for test imports
PROJECT_ROOT = Path(__file__).resolve().parent.parent
SRC_PATH = PROJECT_ROOT / "src"
if str(SRC_PATH) not in sys.path:
    sys.path.insert(0, str(SRC_PATH))

# Console-only logging and a small page size for the whole test run
os.environ.setdefault(
    "CONTACT_BOOK_CONFIG",
    str(PROJECT_ROOT / "tests" / "data" / "contact_book_test.yml"),
)

from contact_book.models import Contact  # noqa: E402
from contact_book.registry.contact_book import ContactBook  # noqa: E402


@pytest.fixture
def people() -> list[Contact]:
    return [
        Contact("John", "Smith", "555-0100", "john@example.com"),
        Contact("Mary", "Johnson", "555-0199", "mary@example.com"),
        Contact("Ann", "Lee", "555", "ann@x.com"),
    ]


@pytest.fixture
def book(people) -> ContactBook:
    return ContactBook(contacts=list(people))


@pytest.fixture
def contacts_file(tmp_path) -> Path:
    path = tmp_path / "contactos.csv"
    path.write_text(
        "Ann,Lee,555,ann@x.com\n"
        "Ann,Lee,555,\n"
        "Bob,Ray,777,bob@x.com\n",
        encoding="utf-8",
    )
    return path
