from __future__ import annotations

import logging
from typing import Annotated

import typer

from .base import configure_logging
from .commands.db import app as db_app
from .commands.rows import app as rows_app

configure_logging()
app = typer.Typer(
    help="Table-level row operations over SQLite",
    context_settings={"help_option_names": ["-h", "--help"]},
)

app.add_typer(rows_app, name="row")
app.add_typer(db_app, name="db")


@app.callback()
def root(
    verbose: Annotated[
        bool,
        typer.Option("-v", "--verbose", help="Log generated SQL at DEBUG level"),
    ] = False,
) -> None:
    """Table-level row operations over SQLite."""
    if verbose:
        logging.getLogger().setLevel(logging.DEBUG)


def main() -> None:
    """Main entry point for package CLI.

    Invokes the Typer application, which handles command parsing and
    execution.
    """
    app()


if __name__ == "__main__":
    main()
