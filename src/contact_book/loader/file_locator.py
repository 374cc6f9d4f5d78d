"""
File Locator

Resolves the paths used to load and save contacts files.
"""

from __future__ import annotations

import os

from contact_book.config import get_config
from contact_book.logging import get_logger

log = get_logger(__name__)


def resolve_input_path(path: str | None) -> str | None:
    """
    Convert a user-provided path into an absolute path for loading.

    Returns:
        Absolute path string, or None if no (or a blank) path was provided.
    """
    if path is None or not path.strip():
        log.debug("No input path provided to resolve_input_path().")
        return None

    abs_path = os.path.abspath(path.strip())
    log.debug(f"Resolving input file: {abs_path}")
    return abs_path


def resolve_output_path(path: str | None, extension: str | None = None) -> str | None:
    """
    Convert a user-provided file name into an absolute path for saving.

    The configured extension (``.csv`` by default) is appended when the
    name does not already end with it, compared case-insensitively.
    """
    if path is None or not path.strip():
        log.debug("No output path provided to resolve_output_path().")
        return None

    ext = extension or get_config().extension
    name = path.strip()
    if not name.lower().endswith(ext.lower()):
        name += ext

    abs_path = os.path.abspath(name)
    log.debug(f"Resolved output file: {abs_path}")
    return abs_path
