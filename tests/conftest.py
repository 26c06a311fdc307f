from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import pytest

from dbfiler.database import SQLiteDriver


@pytest.fixture
def project_root(tmp_path: Path) -> Path:
    """
    A dedicated temp root directory for each test.
    All filesystem writes in tests should be under this root (or tmp_path directly).
    """
    root = tmp_path / "proj"
    root.mkdir()
    return root


@pytest.fixture(autouse=True)
def chdir_to_project_root(project_root: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """
    Automatically change working directory to project_root for all tests.
    This ensures relative-path operations go into the temp directory by default.
    """
    monkeypatch.chdir(project_root)


@pytest.fixture
def sqlite_path(project_root: Path) -> Path:
    """
    On-disk SQLite DB under the temp project root (more realistic than :memory:).
    """
    return project_root / "test.sqlite"


USERS_SCHEMA = """
CREATE TABLE users (
    id INTEGER PRIMARY KEY,
    name TEXT,
    email TEXT UNIQUE,
    age INTEGER
);
"""


@pytest.fixture
def users_driver(sqlite_path: Path) -> SQLiteDriver:
    """
    SQLiteDriver over the on-disk test DB with a `users` table holding id=7.
    """
    driver = SQLiteDriver.open(sqlite_path)
    try:
        driver.conn.executescript(USERS_SCHEMA)
        driver.execute(
            "INSERT INTO users (id, name, email, age) VALUES (7, 'Ana', 'ana@example.com', 30)"
        )
        yield driver
    finally:
        driver.close()


@dataclass
class FakeResult:
    rows: list[dict[str, Any]] = field(default_factory=list)
    lastrowid: int | None = None

    @property
    def rowcount(self) -> int:
        return len(self.rows)

    def fetch_one(self) -> dict[str, Any] | None:
        return self.rows[0] if self.rows else None


class RecordingDriver:
    """
    In-memory driver double that records every call and returns canned rows.
    """

    def __init__(self, rows: list[dict[str, Any]] | None = None) -> None:
        self.rows = rows or []
        self.executed: list[str] = []
        self.quoted: list[Any] = []
        self.calls: list[str] = []

    def execute(self, sql: str) -> FakeResult:
        self.calls.append("execute")
        self.executed.append(sql)
        return FakeResult(rows=list(self.rows), lastrowid=42)

    def quote(self, value: Any) -> str:
        self.calls.append("quote")
        self.quoted.append(value)
        if value is None:
            return "NULL"
        if isinstance(value, (int, float)):
            return str(value)
        return "'" + str(value).replace("'", "''") + "'"

    def begin(self) -> None:
        self.calls.append("begin")

    def commit(self) -> None:
        self.calls.append("commit")

    def rollback(self) -> None:
        self.calls.append("rollback")


@pytest.fixture
def driver() -> RecordingDriver:
    return RecordingDriver()
