from contact_book.core.exceptions import (
    ContactBookError,
    MergeStateError,
    RecordNotFoundError,
    StorageError,
    ValidationError,
)

__all__ = [
    "ContactBookError",
    "MergeStateError",
    "RecordNotFoundError",
    "StorageError",
    "ValidationError",
]
