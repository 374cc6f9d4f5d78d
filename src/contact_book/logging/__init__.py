"""
Logging package for ``contact_book``.

Modules call ``get_logger("<area>")`` and inherit the shared console and
optional log-file handlers.
"""

from .logger import get_logger, list_active_loggers, set_debug

__all__ = [
    "get_logger",
    "list_active_loggers",
    "set_debug",
]
