"""CLI commands for database setup."""

from pathlib import Path
from typing import Annotated, Any

import typer

from ..base import BaseCLI
from ...database import execute_script, transaction

db_app = typer.Typer(help="Database management commands.")


class DatabaseCLI(BaseCLI):
    """CLI helpers for database management."""

    def __init__(self) -> None:
        """Initialize DatabaseCLI with db domain name."""
        super().__init__("db")

    def run_script(
        self,
        *,
        script: Path,
        db_path: Path | None,
    ) -> dict[str, Any]:
        """Run a SQL script using the CLI operation handler.

        Args:
            script: Path to a multi-statement SQL file.
            db_path: Path to SQLite database. Defaults to global config.

        Returns:
            Standardized result dictionary with success status.
        """
        return self.handle_cli_operation(
            operation="db script",
            op_callable=lambda: self._script_operation(script=script, db_path=db_path),
            pre_message=f"Running {script.name}...",
        )

    def _script_operation(self, *, script: Path, db_path: Path | None) -> dict[str, Any]:
        """Execute the script in one transaction and return a standardized result.

        Raises:
            FileNotFoundError: If the script is missing (handled by handle_cli_operation).
            sqlite3.Error: If execution fails (handled by handle_cli_operation).
        """
        sql = script.read_text(encoding="utf-8")
        with transaction(db_path=db_path) as conn:
            execute_script(conn, sql, description=script.name)
        return {"success": True, "message": f"Executed {script.name}"}


cli = DatabaseCLI()


@db_app.command("script")
def script_command(
    script: Annotated[Path, typer.Argument(help="SQL file to execute")],
    db_path: Annotated[
        Path | None,
        typer.Option(
            "--db-path",
            help="Path to SQLite database file (defaults to global config)",
        ),
    ] = None,
) -> None:
    """Execute a multi-statement SQL file, e.g. to create tables.

    Exits with code 1 if the file is missing or any statement fails.
    """
    result = cli.run_script(script=script, db_path=db_path)
    if not result.get("success"):
        raise typer.Exit(1)


app = db_app
