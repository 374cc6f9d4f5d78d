class ContactBookError(Exception):
    """Base exception for contact book failures."""


class ValidationError(ContactBookError):
    """Raised when a record does not satisfy the add or edit rules."""


class RecordNotFoundError(ContactBookError, IndexError):
    """Raised when a position does not name a stored record."""


class StorageError(ContactBookError):
    """Raised when the contacts file cannot be read or written."""


class MergeStateError(ContactBookError):
    """Raised when a merge step is requested out of order."""
