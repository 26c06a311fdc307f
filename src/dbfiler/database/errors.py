"""Database-specific exception types for the project."""

from __future__ import annotations

import sqlite3


class DatabaseError(Exception):
    """Base exception for database-related errors."""


class ConfigurationError(DatabaseError):
    """Raised when a filer is constructed with missing or unknown parameters."""


# Name used by older callers for the missing-driver case.
ParamsMissing = ConfigurationError


class DriverError(DatabaseError):
    """Raised by a driver when executing, quoting or transaction control fails."""


class IntegrityError(DriverError):
    """Raised when a constraint violation occurs."""


def from_sqlite_error(error: sqlite3.Error) -> DriverError:
    """Map a raw sqlite3 error to a project-level DriverError.

    Converts sqlite3 exceptions to project-specific exception types.
    IntegrityError is mapped to IntegrityError, all others to DriverError.

    Args:
        error: SQLite exception to convert.

    Returns:
        DriverError or IntegrityError instance with error message.
    """
    if isinstance(error, sqlite3.IntegrityError):
        return IntegrityError(str(error))
    return DriverError(str(error))
