from __future__ import annotations

import typer

from contact_book.cli.commands.add import add_command
from contact_book.cli.commands.dedupe import dedupe_command
from contact_book.cli.commands.delete import delete_command
from contact_book.cli.commands.edit import edit_command
from contact_book.cli.commands.search import search_command
from contact_book.cli.commands.shell import shell_command
from contact_book.cli.commands.show import show_command

app = typer.Typer(
    name="contact-book",
    help="Personal contact list with duplicate detection and merging",
    add_completion=False,
)

app.command("show")(show_command)
app.command("search")(search_command)
app.command("add")(add_command)
app.command("edit")(edit_command)
app.command("delete")(delete_command)
app.command("dedupe")(dedupe_command)
app.command("shell")(shell_command)


def main():
    app()


if __name__ == "__main__":
    main()
