"""
Main entry for the contact book.

This module is intentionally thin:
- configuration setup
- CLI dispatch

No record or duplicate logic lives here.
"""

from __future__ import annotations

from contact_book.cli.app import app
from contact_book.config import get_config
from contact_book.logging import get_logger

log = get_logger("main")


# ---------------------------------------------------------
# Program Entry Point
# ---------------------------------------------------------
def main() -> None:
    cfg = get_config()
    log.debug("Starting contact book (debug=%s)", cfg.debug)

    try:
        app()
    except Exception as exc:
        log.exception(f"Unhandled exception in main: {exc}")
        raise


if __name__ == "__main__":
    main()
