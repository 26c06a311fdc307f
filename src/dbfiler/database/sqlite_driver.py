"""SQLite implementation of the driver contract.

Wraps a single ``sqlite3.Connection``. The connection is switched to manual
transaction control so statements autocommit unless the caller opened a
transaction with ``begin()``.
"""

from __future__ import annotations

import logging
import sqlite3
from dataclasses import dataclass
from pathlib import Path
from types import TracebackType
from typing import Any

from . import queries
from .connection import get_connection
from .errors import DriverError, from_sqlite_error

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SQLiteResult:
    """Result handle over an executed sqlite3 cursor."""

    cursor: sqlite3.Cursor

    @property
    def rowcount(self) -> int:
        return self.cursor.rowcount

    @property
    def lastrowid(self) -> int | None:
        return self.cursor.lastrowid

    def fetch_one(self) -> dict[str, Any] | None:
        """Return the next row as a column-name mapping, or None."""
        try:
            return queries.fetch_one(self.cursor)
        except sqlite3.Error as exc:
            raise from_sqlite_error(exc) from exc


class SQLiteDriver:
    """Driver backed by the standard library sqlite3 module."""

    def __init__(self, conn: sqlite3.Connection) -> None:
        # Manual mode: BEGIN/COMMIT/ROLLBACK are only issued by begin/commit/rollback.
        conn.isolation_level = None
        self.conn = conn

    @classmethod
    def open(cls, db_path: Path | str | None = None) -> SQLiteDriver:
        """Open a configured connection and wrap it.

        Args:
            db_path: Database file, ``":memory:"``, or None for the project
                default.

        Returns:
            Driver owning the new connection.
        """
        return cls(get_connection(db_path))

    def execute(self, sql: str) -> SQLiteResult:
        """Execute one SQL statement.

        Args:
            sql: Complete statement text, values already quoted.

        Returns:
            SQLiteResult for the executed cursor.

        Raises:
            IntegrityError: On constraint violations.
            DriverError: On any other sqlite3 failure.
        """
        try:
            cursor = queries.execute_query(self.conn, sql)
        except sqlite3.Error as exc:
            raise from_sqlite_error(exc) from exc
        return SQLiteResult(cursor)

    def quote(self, value: Any) -> str:
        """Return an SQL literal for value using SQLite's quote() function.

        Strings are single-quoted with embedded quotes doubled, None becomes
        NULL, numbers are rendered as numeric literals and bytes as blob
        literals. SQLite's quote() stops at an embedded NUL, so such strings
        are emitted as a UTF-8 blob cast back to TEXT instead.

        Raises:
            DriverError: If sqlite3 cannot bind the value's type or the
                value is out of range.
        """
        if isinstance(value, str) and "\x00" in value:
            return f"CAST(X'{value.encode('utf-8').hex().upper()}' AS TEXT)"
        try:
            return self.conn.execute("SELECT quote(?)", (value,)).fetchone()[0]
        except sqlite3.Error as exc:
            raise from_sqlite_error(exc) from exc
        except OverflowError as exc:
            raise DriverError(str(exc)) from exc

    def begin(self) -> None:
        try:
            self.conn.execute("BEGIN")
        except sqlite3.Error as exc:
            raise from_sqlite_error(exc) from exc
        logger.debug("Beginning transaction")

    def commit(self) -> None:
        try:
            self.conn.commit()
        except sqlite3.Error as exc:
            raise from_sqlite_error(exc) from exc
        logger.debug("Transaction committed")

    def rollback(self) -> None:
        try:
            self.conn.rollback()
        except sqlite3.Error as exc:
            raise from_sqlite_error(exc) from exc
        logger.debug("Transaction rolled back")

    @property
    def in_transaction(self) -> bool:
        return self.conn.in_transaction

    def close(self) -> None:
        self.conn.close()
        logger.debug("Connection closed")

    def __enter__(self) -> SQLiteDriver:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()
