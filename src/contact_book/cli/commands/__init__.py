"""
CLI command modules for contact_book.

Each command module defines a single Typer-compatible command function.
"""

from contact_book.cli.commands.add import add_command
from contact_book.cli.commands.dedupe import dedupe_command
from contact_book.cli.commands.delete import delete_command
from contact_book.cli.commands.edit import edit_command
from contact_book.cli.commands.search import search_command
from contact_book.cli.commands.shell import shell_command
from contact_book.cli.commands.show import show_command

__all__ = [
    "add_command",
    "dedupe_command",
    "delete_command",
    "edit_command",
    "search_command",
    "shell_command",
    "show_command",
]
