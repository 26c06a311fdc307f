"""Table-level filer that turns named values into SQL statements.

A TableFiler is bound to one driver, one table and optionally one
predicate (``{primary_key: value}``) identifying a single row. It composes
statement text and hands it to the driver; it does not open connections,
cache anything, or catch driver errors.

Example:
    driver = SQLiteDriver.open("app.sqlite")
    filer = TableFiler(driver, table="users", where={"id": 7})
    name = filer.load("name").get("name")
    filer.store({"name": name.lower()})
"""

from __future__ import annotations

import contextlib
import enum
import logging
from collections.abc import Iterator, Mapping
from typing import Any

from ..database.driver import Driver, ResultHandle
from .config import FilerConfig
from .predicate import compile_assignments, compile_where
from .result import Skipped

logger = logging.getLogger(__name__)


class InsertStyle(enum.Enum):
    """Statement form used by TableFiler.insert."""

    # INSERT INTO t (c1,c2) VALUES (q1,q2)
    VALUES = "values"
    # INSERT INTO t SET c1=q1,c2=q2 (MySQL only)
    SET = "set"


class TableFiler:
    """Load, store, insert and delete rows of one table through a driver."""

    def __init__(
        self,
        driver: Driver,
        table: str | None = None,
        where: Mapping[str, Any] | None = None,
        *,
        insert_style: InsertStyle = InsertStyle.VALUES,
    ) -> None:
        self.config = FilerConfig(driver=driver, table=table, where=where)
        self.insert_style = insert_style

    @classmethod
    def from_properties(
        cls,
        properties: Mapping[str, Any],
        *,
        strict: bool = True,
        insert_style: InsertStyle = InsertStyle.VALUES,
    ) -> TableFiler:
        """Construct a filer from a property mapping.

        See FilerConfig.from_properties for the recognised keys.
        """
        config = FilerConfig.from_properties(properties, strict=strict)
        return cls(config.driver, config.table, config.where, insert_style=insert_style)

    @property
    def driver(self) -> Driver:
        return self.config.driver

    @property
    def table(self) -> str | None:
        return self.config.table

    @property
    def where(self) -> Mapping[str, Any] | None:
        return self.config.where

    @where.setter
    def where(self, value: Mapping[str, Any] | None) -> None:
        self.config.where = value

    def _where_clause(self) -> str | None:
        return compile_where(self.config.where, self.driver.quote)

    def _skip(self, operation: str, reason: str) -> Skipped:
        logger.debug("Skipping %s on %s: %s", operation, self.table, reason)
        return Skipped(reason)

    def load(self, *fields: str) -> dict[str, Any] | Skipped:
        """Load columns of the row selected by the predicate.

        Args:
            *fields: Column names to select.

        Returns:
            The first matching row as a dict, ``{}`` if no row matched, or
            Skipped when table or predicate is missing.

        Raises:
            Whatever the driver raises; nothing is caught here.
        """
        if not self.table:
            return self._skip("load", "no table configured")
        where = self._where_clause()
        if not where:
            return self._skip("load", "no predicate configured")

        sql = f"SELECT {','.join(fields)} FROM {self.table} WHERE {where}"  # noqa: S608
        logger.debug("Loading from %s: %s", self.table, sql)
        row = self.driver.execute(sql).fetch_one()
        return dict(row) if row else {}

    def store(self, values: Mapping[str, Any]) -> bool | Skipped:
        """Update the row selected by the predicate.

        The affected row count is not checked, so an UPDATE that matched
        nothing still returns True.

        Args:
            values: Column to new-value mapping.

        Returns:
            True once the UPDATE was executed, or Skipped when table,
            predicate or values are missing.
        """
        if not self.table:
            return self._skip("store", "no table configured")
        if not values:
            return self._skip("store", "no values to store")
        where = self._where_clause()
        if not where:
            return self._skip("store", "no predicate configured")

        assignments = compile_assignments(values, self.driver.quote)
        sql = f"UPDATE {self.table} SET {assignments} WHERE {where}"  # noqa: S608
        logger.debug("Storing into %s: %s", self.table, sql)
        self.driver.execute(sql)
        return True

    def insert(self, values: Mapping[str, Any]) -> ResultHandle | Skipped:
        """Insert a new row. No predicate is needed.

        Args:
            values: Column to value mapping for the new row.

        Returns:
            The driver's result handle (read ``lastrowid`` for a generated
            key), or Skipped when no table is configured.
        """
        if not self.table:
            return self._skip("insert", "no table configured")

        sql = self._insert_sql(values)
        logger.debug("Inserting into %s: %s", self.table, sql)
        return self.driver.execute(sql)

    def _insert_sql(self, values: Mapping[str, Any]) -> str:
        if self.insert_style is InsertStyle.SET:
            assignments = compile_assignments(values, self.driver.quote)
            return f"INSERT INTO {self.table} SET {assignments}"  # noqa: S608
        if not values:
            return f"INSERT INTO {self.table} DEFAULT VALUES"  # noqa: S608
        columns = ",".join(values)
        literals = ",".join(self.driver.quote(value) for value in values.values())
        return f"INSERT INTO {self.table} ({columns}) VALUES ({literals})"  # noqa: S608

    def delete(self) -> bool | Skipped:
        """Delete the row selected by the predicate.

        Returns:
            True once the DELETE was executed, or Skipped when table or
            predicate is missing.
        """
        if not self.table:
            return self._skip("delete", "no table configured")
        where = self._where_clause()
        if not where:
            return self._skip("delete", "no predicate configured")

        sql = f"DELETE FROM {self.table} WHERE {where}"  # noqa: S608
        logger.debug("Deleting from %s: %s", self.table, sql)
        self.driver.execute(sql)
        return True

    def begin(self) -> bool:
        self.driver.begin()
        return True

    def commit(self) -> bool:
        self.driver.commit()
        return True

    def rollback(self) -> bool:
        self.driver.rollback()
        return True

    @contextlib.contextmanager
    def transaction(self) -> Iterator[TableFiler]:
        """Run a block between begin and commit, rolling back on error.

        Yields:
            This filer.

        Raises:
            Re-raises any exception from the block after rollback.
        """
        self.begin()
        try:
            yield self
            self.commit()
        except Exception:
            logger.exception("Transaction on %s rolled back due to error", self.table)
            self.rollback()
            raise
