"""Personal contact list with exact-key duplicate detection and merging."""

from contact_book.models import Contact
from contact_book.registry.contact_book import ContactBook
from contact_book.resolution.grouping import find_duplicate_groups
from contact_book.resolution.merge import propose_merge

__all__ = ["Contact", "ContactBook", "find_duplicate_groups", "propose_merge"]
