"""Basic query execution helpers.

These wrap low-level sqlite3 operations with logging and typed return
shapes used by the SQLite driver.
"""

from __future__ import annotations

import logging
import sqlite3
from typing import Any

logger = logging.getLogger(__name__)


def execute_query(
    conn: sqlite3.Connection,
    sql: str,
    params: tuple | dict | None = None,
) -> sqlite3.Cursor:
    """Execute a SQL query and return the cursor.

    Args:
        conn: Database connection.
        sql: SQL query string.
        params: Query parameters (tuple or dict). Defaults to empty tuple.

    Returns:
        SQLite cursor with query results.

    Raises:
        sqlite3.Error: If query execution fails.

    Logs:
        - DEBUG: "Executed query: {sql[:80]}" on success.
        - ERROR: "Query execution failed: {exc}" with exception details on failure.
    """
    try:
        cursor = conn.execute(sql, params or ())
        logger.debug("Executed query: %s", sql[:80])
        return cursor
    except sqlite3.Error as exc:
        logger.exception("Query execution failed: %s", exc)
        raise


def fetch_one(cursor: sqlite3.Cursor) -> dict[str, Any] | None:
    """Return the next row of an executed cursor as dict, or None.

    Column names come from ``cursor.description`` so this works whether or
    not the connection uses ``sqlite3.Row`` as its row factory.

    Args:
        cursor: Cursor returned by execute_query.

    Returns:
        Dictionary with column names as keys, or None if no row remains.
    """
    row = cursor.fetchone()
    if row is None:
        return None
    columns = [col[0] for col in cursor.description or ()]
    return dict(zip(columns, row))
