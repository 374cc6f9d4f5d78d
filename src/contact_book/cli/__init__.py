"""
CLI package for contact_book.

Provides the Typer application entrypoint and shared CLI utilities.
"""

from contact_book.cli.app import app, main

__all__ = [
    "app",
    "main",
]
