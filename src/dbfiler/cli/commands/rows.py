"""CLI commands for single-row operations through a TableFiler."""

from __future__ import annotations

import json
from collections.abc import Callable
from pathlib import Path
from typing import Annotated, Any

import typer

from ..base import BaseCLI
from ...database import SQLiteDriver
from ...filer import InsertStyle, Skipped, TableFiler

rows_app = typer.Typer(help="Load, store, insert and delete single rows.")

DbPathOption = Annotated[
    Path | None,
    typer.Option(
        "--db-path",
        help="Path to SQLite database file (defaults to global config)",
    ),
]
WhereOption = Annotated[
    list[str] | None,
    typer.Option(
        "-w",
        "--where",
        help="Identity predicate as column=value (repeatable)",
    ),
]


def parse_assignments(items: list[str] | None) -> dict[str, Any]:
    """Parse ``column=value`` strings into a mapping.

    Values are JSON-decoded when possible (``7`` becomes an int, ``null``
    becomes None); anything else is kept as the raw string.

    Raises:
        typer.BadParameter: If an item has no ``=`` or an empty column.
    """
    parsed: dict[str, Any] = {}
    for item in items or []:
        column, sep, raw = item.partition("=")
        if not sep or not column:
            raise typer.BadParameter(f"Expected column=value, got {item!r}")
        try:
            parsed[column] = json.loads(raw)
        except json.JSONDecodeError:
            parsed[column] = raw
    return parsed


def _skipped(result: Skipped) -> dict[str, Any]:
    return {"success": False, "message": f"skipped: {result.reason}"}


class RowsCLI(BaseCLI):
    """CLI helpers for row operations."""

    def __init__(self) -> None:
        super().__init__("row")

    def _with_filer(
        self,
        *,
        db_path: Path | None,
        table: str,
        where: dict[str, Any] | None,
        op: Callable[[TableFiler], dict[str, Any]],
        insert_style: InsertStyle = InsertStyle.VALUES,
    ) -> dict[str, Any]:
        with SQLiteDriver.open(db_path) as driver:
            filer = TableFiler(driver, table=table, where=where, insert_style=insert_style)
            return op(filer)

    def load(
        self, *, db_path: Path | None, table: str, fields: list[str], where: dict[str, Any]
    ) -> dict[str, Any]:
        def _op(filer: TableFiler) -> dict[str, Any]:
            row = filer.load(*fields)
            if isinstance(row, Skipped):
                return _skipped(row)
            if not row:
                return {"success": True, "message": "No matching row"}
            return {"success": True, "row": row}

        return self.handle_cli_operation(
            operation=f"load {table}",
            op_callable=lambda: self._with_filer(
                db_path=db_path, table=table, where=where, op=_op
            ),
        )

    def store(
        self,
        *,
        db_path: Path | None,
        table: str,
        values: dict[str, Any],
        where: dict[str, Any],
    ) -> dict[str, Any]:
        def _op(filer: TableFiler) -> dict[str, Any]:
            result = filer.store(values)
            if isinstance(result, Skipped):
                return _skipped(result)
            return {"success": True, "message": "Row stored"}

        return self.handle_cli_operation(
            operation=f"store {table}",
            op_callable=lambda: self._with_filer(
                db_path=db_path, table=table, where=where, op=_op
            ),
        )

    def insert(
        self,
        *,
        db_path: Path | None,
        table: str,
        values: dict[str, Any],
        insert_style: InsertStyle,
    ) -> dict[str, Any]:
        def _op(filer: TableFiler) -> dict[str, Any]:
            result = filer.insert(values)
            if isinstance(result, Skipped):
                return _skipped(result)
            return {
                "success": True,
                "rowcount": result.rowcount,
                "lastrowid": result.lastrowid,
            }

        return self.handle_cli_operation(
            operation=f"insert {table}",
            op_callable=lambda: self._with_filer(
                db_path=db_path,
                table=table,
                where=None,
                op=_op,
                insert_style=insert_style,
            ),
        )

    def delete(
        self, *, db_path: Path | None, table: str, where: dict[str, Any]
    ) -> dict[str, Any]:
        def _op(filer: TableFiler) -> dict[str, Any]:
            result = filer.delete()
            if isinstance(result, Skipped):
                return _skipped(result)
            return {"success": True, "message": "Row deleted"}

        return self.handle_cli_operation(
            operation=f"delete {table}",
            op_callable=lambda: self._with_filer(
                db_path=db_path, table=table, where=where, op=_op
            ),
        )


cli = RowsCLI()


@rows_app.command("load")
def load_command(
    table: Annotated[str, typer.Argument(help="Table to read from")],
    fields: Annotated[list[str], typer.Argument(help="Columns to load")],
    where: WhereOption = None,
    db_path: DbPathOption = None,
) -> None:
    """Load columns of the row matching --where.

    Exits with code 1 if no predicate was given.
    """
    result = cli.load(
        db_path=db_path, table=table, fields=fields, where=parse_assignments(where)
    )
    if not result.get("success"):
        raise typer.Exit(1)


@rows_app.command("store")
def store_command(
    table: Annotated[str, typer.Argument(help="Table to update")],
    values: Annotated[list[str], typer.Argument(help="Assignments as column=value")],
    where: WhereOption = None,
    db_path: DbPathOption = None,
) -> None:
    """Update the row matching --where with the given values.

    Exits with code 1 if no predicate was given.
    """
    result = cli.store(
        db_path=db_path,
        table=table,
        values=parse_assignments(values),
        where=parse_assignments(where),
    )
    if not result.get("success"):
        raise typer.Exit(1)


@rows_app.command("insert")
def insert_command(
    table: Annotated[str, typer.Argument(help="Table to insert into")],
    values: Annotated[
        list[str] | None, typer.Argument(help="Column values as column=value")
    ] = None,
    set_style: Annotated[
        bool,
        typer.Option("--set-style", help="Emit INSERT ... SET (MySQL form)"),
    ] = False,
    db_path: DbPathOption = None,
) -> None:
    """Insert a new row and print its generated row id."""
    result = cli.insert(
        db_path=db_path,
        table=table,
        values=parse_assignments(values),
        insert_style=InsertStyle.SET if set_style else InsertStyle.VALUES,
    )
    if not result.get("success"):
        raise typer.Exit(1)


@rows_app.command("delete")
def delete_command(
    table: Annotated[str, typer.Argument(help="Table to delete from")],
    where: WhereOption = None,
    db_path: DbPathOption = None,
) -> None:
    """Delete the row matching --where.

    Exits with code 1 if no predicate was given.
    """
    result = cli.delete(db_path=db_path, table=table, where=parse_assignments(where))
    if not result.get("success"):
        raise typer.Exit(1)


app = rows_app
